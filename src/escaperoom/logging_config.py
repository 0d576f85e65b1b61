import logging
import os
from typing import Optional

ENV_LOG_LEVEL = "ESCAPEROOM_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level_name: Optional[str], default_level: int = logging.INFO) -> int:
    """Map a level name ("debug") or number ("10") to a logging level."""
    if not level_name:
        return default_level
    text = level_name.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default_level


def configure_logging(default_level: int = logging.INFO) -> None:
    """Configure the root logger.

    ESCAPEROOM_LOG_LEVEL, when set, overrides ``default_level``.
    """
    logging.basicConfig(
        level=resolve_level(os.getenv(ENV_LOG_LEVEL), default_level),
        format=LOG_FORMAT,
    )
