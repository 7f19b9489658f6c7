"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"

# httpx logs full request URLs at INFO, and FDC takes its api_key as a query param.
_QUIET_LOGGERS = ("httpx", "httpcore", "openai")


def configure_logging(level: int | str = logging.INFO) -> None:
    """Route ``calorie_climb`` records to one stream handler.

    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger("calorie_climb")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
