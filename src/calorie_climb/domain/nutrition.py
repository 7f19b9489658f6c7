"""Nutrition domain models for FoodData Central records."""

import math
from dataclasses import dataclass
from enum import Enum

from calorie_climb.domain.foods import Nutrient


class SearchMode(str, Enum):
    """How broadly remote lookups search FoodData Central."""

    OFFLINE = "offline"
    GENERIC = "generic"
    BRANDED = "branded"
    FULL = "full"

    @property
    def data_types(self) -> list[str]:
        """FDC data types queried in this mode."""
        if self is SearchMode.BRANDED:
            return ["Branded"]
        if self is SearchMode.FULL:
            return ["Foundation", "SR Legacy", "Branded"]
        return ["Foundation", "Survey (FNDDS)"]


@dataclass(frozen=True)
class FoodSummary:
    """Summary information about a food from FDC search."""

    fdc_id: int
    description: str
    brand_owner: str | None
    brand_name: str | None
    data_type: str | None


@dataclass(frozen=True)
class FoodDetails:
    """Full FDC food record with its nutrient list."""

    summary: FoodSummary
    nutrients: tuple[Nutrient, ...]
    ingredients: str | None = None
    serving_size: float | None = None
    serving_size_unit: str | None = None
    additional_descriptions: str | None = None


@dataclass(frozen=True)
class SearchPage:
    """One page of FDC search results."""

    foods: list[FoodSummary]
    total_hits: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_hits / self.page_size)
