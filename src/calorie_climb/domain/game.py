"""Domain models for game sessions."""

from dataclasses import dataclass, field
from enum import Enum

from calorie_climb.domain.foods import Food


class Expression(str, Enum):
    """Facial expression shown by the character."""

    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    SICK = "sick"
    EXCITED = "excited"
    STUFFED = "stuffed"


@dataclass(frozen=True)
class CharacterState:
    """Simulated character attributes."""

    happiness: int = 8
    size: float = 2
    health: int = 9
    expression: Expression = Expression.HAPPY


STARTING_FOOD = Food(
    name="water",
    calories=0,
    emoji="💧",
    health_rating=10,
    description="Starting fresh with water!",
)

DEFAULT_MAX_CALORIES = 2000


@dataclass(frozen=True)
class GameState:
    """Authoritative record of one game session."""

    current_food: Food = STARTING_FOOD
    previous_food: Food | None = None
    score: int = 0
    streak: int = 0
    longest_streak: int = 0
    total_calories: int = 0
    food_history: tuple[Food, ...] = (STARTING_FOOD,)
    character: CharacterState = field(default_factory=CharacterState)
    game_over: bool = False
    game_over_reason: str = ""
    is_win: bool = False
    max_calories: int = DEFAULT_MAX_CALORIES
    feedback_message: str = ""
    is_loading: bool = False
    is_online_mode: bool = False


@dataclass(frozen=True)
class FeedFood:
    """Feed the food resolved for ``food_name``; ``food`` is None on a miss."""

    food_name: str
    food: Food | None
    feedback_message: str | None = None


@dataclass(frozen=True)
class ResetGame:
    """Start a fresh game keeping carry-over configuration."""


@dataclass(frozen=True)
class SetMaxCalories:
    """Change the calorie ceiling."""

    calories: int


@dataclass(frozen=True)
class SetLoading:
    """Toggle the loading flag."""

    is_loading: bool


@dataclass(frozen=True)
class SetOnlineMode:
    """Record whether remote food data is available."""

    is_online: bool


GameAction = FeedFood | ResetGame | SetMaxCalories | SetLoading | SetOnlineMode


@dataclass(frozen=True)
class GameOverCheck:
    """Outcome of evaluating terminal conditions after a move."""

    game_over: bool
    reason: str = ""
    is_win: bool = False
