"""Logging configuration helpers."""

import logging
from typing import Optional

from horse_diet.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure package logging with a single stream handler."""
    logger = logging.getLogger("horse_diet")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
