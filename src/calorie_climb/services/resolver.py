"""Layered food resolution: offline catalog first, FDC when reachable."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from calorie_climb.domain.foods import Food
from calorie_climb.domain.nutrition import FoodSummary, SearchMode
from calorie_climb.services.cache import Cache, InMemoryCache
from calorie_climb.services.catalog import FoodCatalog
from calorie_climb.services.food_profile import food_from_details
from calorie_climb.services.nutrition import NutritionService
from calorie_climb.services.safety import contains_restricted

MAX_SUGGESTIONS = 8
MAX_REMOTE_SUGGESTIONS = 6
REMOTE_SUGGESTION_MIN_LENGTH = 3
SUGGESTION_MIN_LENGTH = 2

_logger = logging.getLogger(__name__)


@dataclass
class FoodResolver:
    """Resolve typed food names against the catalog and FoodData Central.

    Remote lookups are skipped while the circuit breaker is open (after
    ``max_failures`` consecutive transport failures) or while the cooldown
    since the previous remote call has not elapsed. Every remote result is
    re-checked against the content denylist before it is returned. Toxic
    catalog entries are returned without a remote lookup.
    """

    catalog: FoodCatalog = field(default_factory=FoodCatalog)
    nutrition_service: NutritionService | None = None
    search_mode: SearchMode = SearchMode.GENERIC
    suggestion_cache: Cache = field(default_factory=InMemoryCache)
    max_failures: int = 3
    cooldown_seconds: float = 0.5
    suggestion_ttl_seconds: float = 300
    clock: Callable[[], float] = time.monotonic
    failure_count: int = field(default=0, init=False)
    _last_remote_call: float | None = field(default=None, init=False, repr=False)

    @property
    def is_online(self) -> bool:
        """True when remote lookups are configured and the breaker is closed."""
        return (
            self.nutrition_service is not None
            and self.search_mode is not SearchMode.OFFLINE
            and self.failure_count < self.max_failures
        )

    @property
    def mode(self) -> str:
        return "online" if self.is_online else "offline"

    def set_search_mode(self, mode: SearchMode) -> None:
        """Switch search breadth; cached suggestions belong to the old mode."""
        self.search_mode = mode
        self.suggestion_cache.clear()

    async def resolve(self, name: str) -> Food | None:
        """Return the food for a typed name, or None when nothing matches."""
        if contains_restricted(name):
            return None

        offline_food = self.catalog.lookup(name)
        if offline_food is not None and offline_food.is_toxic:
            return offline_food
        nutrition_service = self.nutrition_service
        if (
            nutrition_service is None
            or not self.is_online
            or not self._cooldown_elapsed()
        ):
            return offline_food

        try:
            remote_food = await self._resolve_remote(nutrition_service, name)
        except Exception as exc:
            self._record_failure(exc)
            return offline_food
        self.failure_count = 0
        return remote_food or offline_food

    async def suggestions(self, prefix: str) -> list[Food]:
        """Return up to eight suggestions, catalog entries first."""
        normalized = prefix.strip().lower()
        if len(normalized) < SUGGESTION_MIN_LENGTH:
            return []
        if contains_restricted(normalized):
            return []

        cache_key = f"suggest:{normalized}:{self.search_mode.value}"
        cached = self.suggestion_cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        catalog_suggestions = self.catalog.suggest(normalized)
        nutrition_service = self.nutrition_service
        if (
            nutrition_service is None
            or len(normalized) < REMOTE_SUGGESTION_MIN_LENGTH
            or not self.is_online
            or not self._cooldown_elapsed()
        ):
            return catalog_suggestions[:MAX_SUGGESTIONS]

        try:
            remote_suggestions = await self._remote_suggestions(
                nutrition_service, normalized, catalog_suggestions
            )
        except Exception as exc:
            self._record_failure(exc)
            return catalog_suggestions[:MAX_SUGGESTIONS]
        self.failure_count = 0

        combined = combine_suggestions(catalog_suggestions, remote_suggestions)
        combined = combined[:MAX_SUGGESTIONS]
        self.suggestion_cache.set(
            cache_key, combined, ttl_seconds=self.suggestion_ttl_seconds
        )
        return combined

    async def _resolve_remote(
        self, nutrition_service: NutritionService, name: str
    ) -> Food | None:
        self._last_remote_call = self.clock()
        page = await nutrition_service.search(name, limit=5, mode=self.search_mode)
        best = find_best_match(name, page.foods)
        if best is None:
            return None
        if contains_restricted(best.description):
            return None

        details = await nutrition_service.get_food(best.fdc_id)
        food = food_from_details(details, self.search_mode)
        if contains_restricted(food.name) or contains_restricted(food.description):
            return None
        if food.calories <= 0:
            _logger.info("Discarding FDC %s without calorie data", best.fdc_id)
            return None
        return food

    async def _remote_suggestions(
        self,
        nutrition_service: NutritionService,
        prefix: str,
        catalog_suggestions: list[Food],
    ) -> list[Food]:
        self._last_remote_call = self.clock()
        page = await nutrition_service.search(
            prefix, limit=MAX_SUGGESTIONS, mode=self.search_mode
        )

        foods: list[Food] = []
        for result in page.foods[:MAX_REMOTE_SUGGESTIONS]:
            if contains_restricted(result.description):
                continue
            head = result.description.lower().split(",")[0]
            if any(_overlaps(food.name.lower(), head) for food in catalog_suggestions):
                continue
            try:
                details = await nutrition_service.get_food(result.fdc_id)
            except Exception:
                _logger.warning(
                    "Skipping suggestion fdc_id=%s after detail fetch failure",
                    result.fdc_id,
                    exc_info=True,
                )
                continue
            food = food_from_details(details, self.search_mode)
            if contains_restricted(food.name) or contains_restricted(food.description):
                continue
            if food.calories > 0:
                foods.append(food)
        return foods

    def _cooldown_elapsed(self) -> bool:
        if self._last_remote_call is None:
            return True
        return self.clock() - self._last_remote_call >= self.cooldown_seconds

    def _record_failure(self, exc: Exception) -> None:
        self.failure_count += 1
        _logger.warning(
            "FDC lookup failed (%s/%s), using offline catalog: %s",
            self.failure_count,
            self.max_failures,
            exc,
        )
        if self.failure_count >= self.max_failures:
            _logger.warning("FDC failed repeatedly, switching to offline mode")


def find_best_match(query: str, results: list[FoodSummary]) -> FoodSummary | None:
    """Pick the FDC search result that best matches a typed name."""
    normalized = query.lower().strip()

    for result in results:
        head = result.description.lower().split(",")[0].strip()
        if head.startswith(normalized):
            return result

    partial = [
        result
        for result in results
        if _overlaps(result.description.lower().split(",")[0].strip(), normalized)
    ]
    if partial:
        return min(
            partial,
            key=lambda result: (
                result.data_type != "Foundation",
                len(result.description),
            ),
        )
    # No prefix or substring match: take the top-ranked hit.
    return results[0] if results else None


def combine_suggestions(offline: list[Food], remote: list[Food]) -> list[Food]:
    """Merge suggestions, dropping names contained in an earlier name or vice versa."""
    combined: list[Food] = []
    seen: list[str] = []

    for food in offline:
        name = food.name.lower()
        if name not in seen:
            combined.append(food)
            seen.append(name)

    for food in remote:
        name = food.name.lower()
        if not any(_overlaps(name, existing) for existing in seen):
            combined.append(food)
            seen.append(name)
    return combined


def _overlaps(first: str, second: str) -> bool:
    return first in second or second in first
