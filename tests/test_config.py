"""Tests for settings and secret detection."""

import pytest
from pydantic import ValidationError

from calorie_climb.config import Settings, is_configured
from calorie_climb.domain.nutrition import SearchMode


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FDC_API_KEY",
        "OPENAI_API_KEY",
        "SEARCH_MODE",
        "MAX_CALORIES",
        "LOG_LEVEL",
        "SESSION_TTL_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.fdc_api_key is None
    assert settings.fdc_base_url == "https://api.nal.usda.gov/fdc/v1"
    assert settings.max_calories == 2000
    assert settings.search_mode is SearchMode.GENERIC
    assert settings.resolver_cooldown_seconds == 0.5
    assert settings.suggestion_debounce_seconds == 0.8
    assert settings.log_level == "INFO"
    assert settings.session_ttl_seconds == 21600


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FDC_API_KEY", "abc123")
    monkeypatch.setenv("SEARCH_MODE", "branded")
    monkeypatch.setenv("MAX_CALORIES", "2500")

    settings = Settings(_env_file=None)

    assert settings.fdc_api_key == "abc123"
    assert settings.search_mode is SearchMode.BRANDED
    assert settings.max_calories == 2500


def test_settings_reject_low_ceiling() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_calories=50)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        ("", False),
        ("   ", False),
        ("changeme", False),
        ("your-api-key", False),
        ("DEMO_KEY", True),
    ],
)
def test_is_configured(value: str | None, expected: bool) -> None:
    assert is_configured(value) is expected
