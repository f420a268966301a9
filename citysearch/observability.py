"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig

logger = logging.getLogger("citysearch")


def configure_logging(
    config: ObservabilityConfig, level_override: Optional[str] = None
) -> None:
    """Apply level and format from the observability settings.

    Only entry points call this; library code just asks for loggers.
    """
    level_name = (level_override or config.level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {level_name!r}, falling back to WARNING")
        level = logging.WARNING

    logging.basicConfig(level=level, format=config.format, force=True)
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
