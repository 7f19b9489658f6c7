"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from calorie_climb.adapters.fdc_client import FdcClient
from calorie_climb.config import Settings
from calorie_climb.containers import AppContainer
from calorie_climb.domain.foods import Food
from calorie_climb.services.cache import InMemoryCache
from calorie_climb.services.catalog import FoodCatalog
from calorie_climb.services.feedback import FeedbackService, NarrativeClient
from calorie_climb.services.game import GameService
from calorie_climb.services.nutrition import NutritionService
from calorie_climb.services.resolver import FoodResolver
from calorie_climb.services.suggestions import SuggestionDebouncer


def _energy(kcal: float) -> list[dict[str, object]]:
    return [
        {"nutrient": {"name": "Energy", "unitName": "kJ"}, "amount": kcal * 4.184},
        {"nutrient": {"name": "Energy", "unitName": "kcal"}, "amount": kcal},
        {"nutrient": {"name": "Protein", "unitName": "g"}, "amount": 0.8},
    ]


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses and call counters."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "totalHits": 2,
            "foods": [
                {
                    "fdcId": 1001,
                    "description": "Mango, raw",
                    "dataType": "Foundation",
                },
                {
                    "fdcId": 1002,
                    "description": "Mango nectar",
                    "dataType": "Survey (FNDDS)",
                },
            ],
        }
    )
    food_payloads: dict[int, dict[str, object]] = field(
        default_factory=lambda: {
            1001: {
                "fdcId": 1001,
                "description": "Mango, raw",
                "dataType": "Foundation",
                "foodNutrients": _energy(60),
            },
            1002: {
                "fdcId": 1002,
                "description": "Mango nectar",
                "dataType": "Survey (FNDDS)",
                "foodNutrients": _energy(51),
            },
        }
    )
    search_calls: int = 0
    food_calls: int = 0
    last_search: dict[str, object] | None = None

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        page_number: int = 1,
        data_types: list[str] | None = None,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        self.search_calls += 1
        self.last_search = {
            "query": query,
            "page_size": page_size,
            "page_number": page_number,
            "data_types": data_types,
        }
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls += 1
        return self.food_payloads[fdc_id]


@dataclass
class FailingFdcClient(FdcClient):
    """FDC client whose every call fails like a dropped connection."""

    search_calls: int = 0

    async def search_foods(  # noqa: PLR0913
        self,
        query: str,
        page_size: int = 25,
        page_number: int = 1,
        data_types: list[str] | None = None,
        sort_by: str = "dataType.keyword",
        sort_order: str = "asc",
    ) -> dict[str, object]:
        self.search_calls += 1
        raise RuntimeError("connection refused")

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        raise RuntimeError("connection refused")


@dataclass
class FakeNarrativeClient(NarrativeClient):
    """Narrative client that records requests and returns a fixed message."""

    message: str = "Mangoes are sunshine in fruit form!"
    delay_seconds: float = 0
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(self, **kwargs: object) -> str:  # type: ignore[override]
        self.calls.append(kwargs)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.message


@dataclass
class GatedResolver:
    """Resolver stand-in that waits for a gate before answering."""

    catalog: FoodCatalog = field(default_factory=FoodCatalog)
    gate: asyncio.Event | None = None
    error: Exception | None = None
    is_online: bool = False

    async def resolve(self, name: str) -> Food | None:
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.catalog.lookup(name)

    async def suggestions(self, prefix: str) -> list[Food]:
        if self.gate is not None:
            await self.gate.wait()
        return self.catalog.suggest(prefix)


def online_resolver(
    client: FdcClient | None = None, **kwargs: object
) -> FoodResolver:
    """Build a resolver wired to a fake FDC client without retries or cooldown."""
    nutrition_service = NutritionService(
        fdc_client=client or FakeFdcClient(),
        cache=InMemoryCache(),
        retry_attempts=0,
    )
    kwargs.setdefault("cooldown_seconds", 0)
    return FoodResolver(nutrition_service=nutrition_service, **kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        openai_api_key="openai-key",
        environment="test",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    resolver = FoodResolver()
    feedback_service = FeedbackService()
    game_service = GameService(resolver=resolver, feedback_service=feedback_service)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=None,
        resolver=resolver,
        suggestion_debouncer=SuggestionDebouncer(resolver=resolver, delay_seconds=0),
        feedback_service=feedback_service,
        game_service=game_service,
        close_resources=close_resources,
    )


@pytest.fixture
def online_container(settings: Settings, fdc_client: FakeFdcClient) -> AppContainer:
    resolver = online_resolver(fdc_client)
    feedback_service = FeedbackService()
    game_service = GameService(resolver=resolver, feedback_service=feedback_service)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=resolver.nutrition_service,
        resolver=resolver,
        suggestion_debouncer=SuggestionDebouncer(resolver=resolver, delay_seconds=0),
        feedback_service=feedback_service,
        game_service=game_service,
        close_resources=close_resources,
    )
