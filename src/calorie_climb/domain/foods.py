"""Food domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Nutrient:
    """Single nutrient amount reported for a food."""

    name: str
    amount: float
    unit: str


@dataclass(frozen=True)
class Food:
    """A food the character can eat."""

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
    nutrients: tuple[Nutrient, ...] = ()
    data_type: str | None = None
    additional_descriptions: str | None = None
    is_from_usda: bool = False

    def __post_init__(self) -> None:
        if self.calories < 0:
            raise ValueError(f"calories must be non-negative, got {self.calories}")
        if not 1 <= self.health_rating <= 10:
            raise ValueError(
                f"health_rating must be between 1 and 10, got {self.health_rating}"
            )
