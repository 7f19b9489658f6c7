"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_climb.domain.nutrition import SearchMode

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"
    narrative_timeout_seconds: float = 5.0
    max_calories: int = Field(default=2000, ge=100)
    search_mode: SearchMode = SearchMode.GENERIC
    resolver_cooldown_seconds: float = 0.5
    suggestion_debounce_seconds: float = 0.8
    session_ttl_seconds: float = 6 * 60 * 60
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def is_configured(value: str | None) -> bool:
    """Treat unset, blank, or placeholder secrets as missing."""
    if value is None:
        return False
    cleaned = value.strip()
    return cleaned not in {"", "changeme", "your-api-key"}
