"""Character evolution in response to each food eaten."""

from dataclasses import replace

from calorie_climb.domain.foods import Food
from calorie_climb.domain.game import CharacterState, Expression

MIN_STAT = 1
MAX_STAT = 10
MIN_SIZE = 1
MAX_SIZE = 5
STUFFED_SIZE = 4


def evolve(
    food: Food, prior: CharacterState, total_calories: int, max_calories: int
) -> CharacterState:
    """Return the character state after eating ``food``.

    ``total_calories`` already includes ``food``. Later rules override the
    expression chosen by earlier ones: happiness band, then stuffed, then
    calorie-ratio sickness. Toxic food short-circuits everything.
    """
    if food.is_toxic:
        return CharacterState(
            happiness=MIN_STAT,
            size=prior.size,
            health=MIN_STAT,
            expression=Expression.SICK,
        )

    happiness, expression = _happiness_band(food.health_rating, prior.happiness)

    size = prior.size
    if food.calories > 300:
        size = _clamp(size + 1, MIN_SIZE, MAX_SIZE)
        if size >= STUFFED_SIZE:
            expression = Expression.STUFFED
    elif food.calories > 150:
        size = _clamp(size + 0.5, MIN_SIZE, MAX_SIZE)

    health = prior.health
    ratio = total_calories / max_calories if max_calories > 0 else 1.0
    if ratio > 0.8:
        health -= 2
        expression = Expression.SICK
    elif ratio > 0.6:
        health -= 1
    elif food.health_rating >= 8:
        health += 1
    elif food.health_rating <= 3:
        health -= 1

    return replace(
        prior,
        happiness=_clamp(happiness, MIN_STAT, MAX_STAT),
        size=size,
        health=_clamp(health, MIN_STAT, MAX_STAT),
        expression=expression,
    )


def _happiness_band(health_rating: int, happiness: int) -> tuple[int, Expression]:
    if health_rating >= 8:
        return happiness + 2, Expression.HAPPY
    if health_rating >= 6:
        return happiness, Expression.NEUTRAL
    if health_rating >= 3:
        return happiness - 1, Expression.NEUTRAL
    return happiness - 2, Expression.SAD


def _clamp(value, low, high):
    return max(low, min(high, value))
