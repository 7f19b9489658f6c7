"""Player-facing feedback for each move."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_climb.domain.foods import Food
from calorie_climb.domain.game import CharacterState, Expression, GameState

HEALTHY_RATING = 7

EXPRESSION_PHRASES: dict[Expression, str] = {
    Expression.HAPPY: "The person is really enjoying this healthy choice! 😊",
    Expression.EXCITED: "The person is excited about this tasty food! 🤩",
    Expression.NEUTRAL: "The person is satisfied with this choice. 😐",
    Expression.SAD: "The person doesn't feel great about this choice... 😞",
    Expression.STUFFED: (
        "The person is getting really full! Maybe lighter foods next time? 😵"
    ),
    Expression.SICK: "The person isn't feeling well from all this food... 🤢",
}

_logger = logging.getLogger(__name__)


class NarrativeClient(Protocol):
    """Interface for LLM-written feedback."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        mode: str,
        current_food: str,
        current_calories: int,
        previous_food: str | None,
        previous_calories: int | None,
        is_healthy: bool,
        reason: str | None = None,
        total_calories: int | None = None,
        foods_eaten: list[str] | None = None,
    ) -> str:
        """Return a short narrative message."""


@dataclass
class FeedbackService:
    """Build feedback messages, optionally enriched by a narrative client."""

    narrative_client: NarrativeClient | None = None
    timeout_seconds: float = 5.0

    async def message(
        self,
        food: Food,
        previous_food: Food | None,
        is_valid_move: bool,
        character: CharacterState,
    ) -> str:
        """Describe the move that just happened."""
        if food.is_toxic:
            return (
                f"Oh no! {food.name} is not safe to eat! The person is feeling very "
                "sick and needs help immediately. That's why we should never eat "
                "things that aren't food!"
            )

        if not is_valid_move and previous_food is not None:
            return (
                f"Oops! {food.name} ({food.calories} calories) does not have more "
                f"calories than {previous_food.name} ({previous_food.calories} "
                "calories). Remember, we need to climb up the calorie ladder!"
            )

        if self.narrative_client is not None and food.is_from_usda:
            narrative = await self._narrate(
                mode="feedback",
                current_food=food.name,
                current_calories=food.calories,
                previous_food=previous_food.name if previous_food else None,
                previous_calories=previous_food.calories if previous_food else None,
                is_healthy=food.health_rating >= HEALTHY_RATING,
            )
            if narrative:
                return narrative

        return template_message(food, previous_food, character)

    async def game_over_message(self, state: GameState) -> str | None:
        """Narrative summary of a finished game, or None when unavailable.

        Toxic endings keep their fixed safety message and are never narrated.
        """
        if (
            self.narrative_client is None
            or not state.game_over
            or state.current_food.is_toxic
        ):
            return None
        return await self._narrate(
            mode="gameOver",
            current_food="",
            current_calories=0,
            previous_food=None,
            previous_calories=None,
            is_healthy=False,
            reason=state.game_over_reason,
            total_calories=state.total_calories,
            foods_eaten=[food.name for food in state.food_history],
        )

    async def _narrate(self, **kwargs: object) -> str | None:
        if self.narrative_client is None:
            return None
        try:
            return await asyncio.wait_for(
                self.narrative_client.generate(**kwargs),
                timeout=self.timeout_seconds,
            )
        except Exception:
            _logger.warning("Narrative generation failed", exc_info=True)
            return None


def template_message(
    food: Food, previous_food: Food | None, character: CharacterState
) -> str:
    """Deterministic feedback for a valid move."""
    message = f"Great choice! {food.name} {food.description} "
    if previous_food is not None:
        message += (
            f"It has {food.calories} calories compared to {previous_food.name}'s "
            f"{previous_food.calories} calories. "
        )
    return message + EXPRESSION_PHRASES[character.expression]
