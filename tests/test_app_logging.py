"""Tests for logging configuration."""

import logging

from calorie_climb.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("calorie_climb")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging("debug")
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert not logger.propagate


def test_configure_logging_quiets_http_request_logs() -> None:
    configure_logging()

    assert logging.getLogger("httpx").level == logging.WARNING
