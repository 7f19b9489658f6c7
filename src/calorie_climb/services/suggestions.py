"""Debounced suggestion lookups where only the newest query wins."""

import asyncio
import itertools
from dataclasses import dataclass, field

from calorie_climb.domain.foods import Food
from calorie_climb.services.resolver import FoodResolver


@dataclass
class SuggestionDebouncer:
    """Delay suggestion lookups and drop ones superseded by a newer query.

    Each ``key`` (one per input box or client) maps to the token of its newest
    lookup. A lookup returns None when another lookup for the same key started
    while it was waiting or fetching. The key is released once its newest
    lookup finishes.
    """

    resolver: FoodResolver
    delay_seconds: float = 0.8
    _latest: dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _tokens: itertools.count = field(
        default_factory=lambda: itertools.count(1), init=False, repr=False
    )

    async def lookup(self, key: str, prefix: str) -> list[Food] | None:
        token = next(self._tokens)
        self._latest[key] = token
        try:
            await asyncio.sleep(self.delay_seconds)
            if self._latest.get(key) != token:
                return None

            results = await self.resolver.suggestions(prefix)
            if self._latest.get(key) != token:
                return None
            return results
        finally:
            if self._latest.get(key) == token:
                del self._latest[key]

    def __len__(self) -> int:
        return len(self._latest)
