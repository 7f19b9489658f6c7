"""Nutrition service integrating USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calorie_climb.adapters.fdc_client import FdcClient
from calorie_climb.domain.foods import Nutrient
from calorie_climb.domain.nutrition import (
    FoodDetails,
    FoodSummary,
    SearchMode,
    SearchPage,
)
from calorie_climb.services.cache import Cache
from calorie_climb.services.safety import contains_restricted, is_restricted_brand

_GENERIC_DATA_TYPES = frozenset({"Foundation", "Survey (FNDDS)"})

_ACCEPTABLE_BRANDED = (
    "usda commodity",
    "school lunch",
    "generic",
    "store brand",
)

_TOO_SPECIFIC = (
    "upc:",
    "gtin:",
    "prepared from recipe",
    "restaurant",
    "fast food",
    "frozen meal",
    "baby food",
    "dietary supplement",
    "formula",
    "medical food",
    "enteral",
    "parenteral",
)

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for FDC lookups with caching, retries and content filtering."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(
        self,
        query: str,
        limit: int = 5,
        mode: SearchMode = SearchMode.GENERIC,
        page_number: int = 1,
    ) -> SearchPage:
        """Search FDC foods, dropping restricted and off-mode entries."""
        cache_key = f"fdc:search:{mode.value}:{query.lower()}:{limit}:{page_number}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, SearchPage):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(
                query,
                page_size=limit,
                page_number=page_number,
                data_types=mode.data_types,
            ),
            action="search",
        )
        foods = [
            _summary_from_payload(food)
            for food in payload.get("foods") or []
            if food.get("fdcId") is not None
        ]
        foods = [food for food in foods if _is_safe(food)]
        if mode is SearchMode.GENERIC:
            foods = _filter_generic(foods, query)

        page = SearchPage(
            foods=foods,
            total_hits=int(payload.get("totalHits") or 0),
            page_number=page_number,
            page_size=limit,
        )
        self.cache.set(cache_key, page, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info("Nutrition search FDC: query=%s results=%s", query, len(foods))
        return page

    async def get_food(self, fdc_id: int) -> FoodDetails:
        """Retrieve a food record with its nutrients from FDC."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodDetails):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        details = FoodDetails(
            summary=_summary_from_payload(payload),
            nutrients=_extract_nutrients(payload.get("foodNutrients") or []),
            ingredients=payload.get("ingredients"),
            serving_size=payload.get("servingSize"),
            serving_size_unit=payload.get("servingSizeUnit"),
            additional_descriptions=payload.get("additionalDescriptions"),
        )
        self.cache.set(cache_key, details, ttl_seconds=self.food_ttl_seconds)
        if self.debug:
            _logger.info("Nutrition food FDC: fdc_id=%s", fdc_id)
        return details

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _summary_from_payload(payload: dict[str, object]) -> FoodSummary:
    return FoodSummary(
        fdc_id=int(payload["fdcId"]),
        description=str(payload.get("description") or ""),
        brand_owner=payload.get("brandOwner"),
        brand_name=payload.get("brandName"),
        data_type=payload.get("dataType"),
    )


def _extract_nutrients(food_nutrients: list[dict[str, object]]) -> tuple[Nutrient, ...]:
    """Normalize FDC nutrient rows from detail or search payload shapes."""
    nutrients: list[Nutrient] = []
    for row in food_nutrients:
        info = row.get("nutrient") or {}
        name = info.get("name") or row.get("nutrientName")
        amount = row.get("amount", row.get("value"))
        if not name or amount is None:
            continue
        unit = info.get("unitName") or row.get("unitName") or ""
        nutrients.append(Nutrient(name=str(name), amount=float(amount), unit=str(unit)))
    return tuple(nutrients)


def _is_safe(food: FoodSummary) -> bool:
    return not contains_restricted(food.description) and not is_restricted_brand(
        food.brand_owner
    )


def _filter_generic(foods: list[FoodSummary], query: str) -> list[FoodSummary]:
    """Keep plain reference foods and rank them for a kid-friendly list."""
    normalized_query = query.lower().strip()
    kept = []
    for food in foods:
        description = food.description.lower()
        if food.brand_owner and not any(
            brand in description for brand in _ACCEPTABLE_BRANDED
        ):
            continue
        if any(indicator in description for indicator in _TOO_SPECIFIC):
            continue
        if food.data_type not in _GENERIC_DATA_TYPES:
            continue
        kept.append(food)

    return sorted(
        kept,
        key=lambda food: (
            normalized_query not in food.description.lower(),
            food.data_type != "Foundation",
            len(food.description),
        ),
    )
