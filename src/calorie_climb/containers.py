"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_climb.adapters.fdc_client import HttpxFdcClient
from calorie_climb.adapters.openai_narrative_client import OpenAINarrativeClient
from calorie_climb.config import Settings, is_configured
from calorie_climb.services.cache import InMemoryCache
from calorie_climb.services.catalog import FoodCatalog
from calorie_climb.services.feedback import FeedbackService
from calorie_climb.services.game import GameService
from calorie_climb.services.nutrition import NutritionService
from calorie_climb.services.resolver import FoodResolver
from calorie_climb.services.suggestions import SuggestionDebouncer


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService | None
    resolver: FoodResolver
    suggestion_debouncer: SuggestionDebouncer
    feedback_service: FeedbackService
    game_service: GameService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()

    fdc_client: HttpxFdcClient | None = None
    nutrition_service: NutritionService | None = None
    if is_configured(resolved_settings.fdc_api_key):
        fdc_client = HttpxFdcClient.create(
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
        )
        nutrition_service = NutritionService(
            fdc_client=fdc_client,
            cache=InMemoryCache(),
            debug=resolved_settings.environment == "local",
        )

    narrative_client: OpenAINarrativeClient | None = None
    if is_configured(resolved_settings.openai_api_key):
        narrative_client = OpenAINarrativeClient.create(
            api_key=resolved_settings.openai_api_key,
            model=resolved_settings.openai_model,
            base_url=resolved_settings.openai_base_url,
        )

    resolver = FoodResolver(
        catalog=FoodCatalog(),
        nutrition_service=nutrition_service,
        search_mode=resolved_settings.search_mode,
        suggestion_cache=InMemoryCache(),
        cooldown_seconds=resolved_settings.resolver_cooldown_seconds,
    )
    feedback_service = FeedbackService(
        narrative_client=narrative_client,
        timeout_seconds=resolved_settings.narrative_timeout_seconds,
    )
    game_service = GameService(
        resolver=resolver,
        feedback_service=feedback_service,
        default_max_calories=resolved_settings.max_calories,
        session_ttl_seconds=resolved_settings.session_ttl_seconds,
    )
    suggestion_debouncer = SuggestionDebouncer(
        resolver=resolver,
        delay_seconds=resolved_settings.suggestion_debounce_seconds,
    )

    async def close_resources() -> None:
        if fdc_client is not None:
            await fdc_client.close()
        if narrative_client is not None:
            await narrative_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        resolver=resolver,
        suggestion_debouncer=suggestion_debouncer,
        feedback_service=feedback_service,
        game_service=game_service,
        close_resources=close_resources,
    )
