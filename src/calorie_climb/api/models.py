"""Pydantic models for the game HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from calorie_climb.domain.foods import Food
from calorie_climb.domain.game import CharacterState, GameState
from calorie_climb.domain.nutrition import FoodSummary, SearchMode, SearchPage


class NutrientModel(BaseModel):
    """Nutrient amount."""

    name: str
    amount: float
    unit: str


class FoodModel(BaseModel):
    """Food payload."""

    name: str
    calories: int
    emoji: str
    health_rating: int
    description: str
    is_toxic: bool = False
    fdc_id: int | None = None
    brand_owner: str | None = None
    ingredients: str | None = None
    serving_size: float | None = None
    serving_size_unit: str | None = None
    nutrients: list[NutrientModel] = Field(default_factory=list)
    data_type: str | None = None
    additional_descriptions: str | None = None
    is_from_usda: bool = False

    @classmethod
    def from_food(cls, food: Food) -> "FoodModel":
        return cls(
            name=food.name,
            calories=food.calories,
            emoji=food.emoji,
            health_rating=food.health_rating,
            description=food.description,
            is_toxic=food.is_toxic,
            fdc_id=food.fdc_id,
            brand_owner=food.brand_owner,
            ingredients=food.ingredients,
            serving_size=food.serving_size,
            serving_size_unit=food.serving_size_unit,
            nutrients=[
                NutrientModel(name=n.name, amount=n.amount, unit=n.unit)
                for n in food.nutrients
            ],
            data_type=food.data_type,
            additional_descriptions=food.additional_descriptions,
            is_from_usda=food.is_from_usda,
        )


class CharacterModel(BaseModel):
    """Character payload."""

    happiness: int
    size: float
    health: int
    expression: str

    @classmethod
    def from_character(cls, character: CharacterState) -> "CharacterModel":
        return cls(
            happiness=character.happiness,
            size=character.size,
            health=character.health,
            expression=character.expression.value,
        )


class GameStateModel(BaseModel):
    """Game session payload."""

    session_id: UUID
    current_food: FoodModel
    previous_food: FoodModel | None
    score: int
    streak: int
    longest_streak: int
    total_calories: int
    food_history: list[FoodModel]
    character: CharacterModel
    game_over: bool
    game_over_reason: str
    is_win: bool
    max_calories: int
    feedback_message: str
    is_loading: bool
    is_online_mode: bool

    @classmethod
    def from_state(cls, session_id: UUID, state: GameState) -> "GameStateModel":
        return cls(
            session_id=session_id,
            current_food=FoodModel.from_food(state.current_food),
            previous_food=(
                FoodModel.from_food(state.previous_food)
                if state.previous_food
                else None
            ),
            score=state.score,
            streak=state.streak,
            longest_streak=state.longest_streak,
            total_calories=state.total_calories,
            food_history=[FoodModel.from_food(food) for food in state.food_history],
            character=CharacterModel.from_character(state.character),
            game_over=state.game_over,
            game_over_reason=state.game_over_reason,
            is_win=state.is_win,
            max_calories=state.max_calories,
            feedback_message=state.feedback_message,
            is_loading=state.is_loading,
            is_online_mode=state.is_online_mode,
        )


class FeedRequest(BaseModel):
    """Feed a food by name."""

    food: str = Field(min_length=1, max_length=200)


class FeedResponse(BaseModel):
    """Result of a feed request."""

    accepted: bool
    resolution_failed: bool
    game: GameStateModel


class GameSettingsRequest(BaseModel):
    """Per-game settings."""

    max_calories: int = Field(ge=100)


class SearchModeModel(BaseModel):
    """Search breadth setting."""

    search_mode: SearchMode


class SuggestionsResponse(BaseModel):
    """Suggestions for partially typed input."""

    query: str
    superseded: bool = False
    suggestions: list[FoodModel] = Field(default_factory=list)


class FoodSummaryModel(BaseModel):
    """FDC search hit."""

    fdc_id: int
    description: str
    brand_owner: str | None
    brand_name: str | None
    data_type: str | None

    @classmethod
    def from_summary(cls, summary: FoodSummary) -> "FoodSummaryModel":
        return cls(
            fdc_id=summary.fdc_id,
            description=summary.description,
            brand_owner=summary.brand_owner,
            brand_name=summary.brand_name,
            data_type=summary.data_type,
        )


class SearchPageModel(BaseModel):
    """Paged FDC search results."""

    foods: list[FoodSummaryModel]
    total_hits: int
    current_page: int
    total_pages: int

    @classmethod
    def from_page(cls, page: SearchPage) -> "SearchPageModel":
        return cls(
            foods=[FoodSummaryModel.from_summary(food) for food in page.foods],
            total_hits=page.total_hits,
            current_page=page.page_number,
            total_pages=page.total_pages,
        )
