"""Console (and optional file) logging for the flappy_senac namespace."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name or number into a logging level, falling back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> None:
    """Attach a stdout handler, and a file handler when log_file is given."""
    level = resolve_level(level)
    logger = logging.getLogger("flappy_senac")
    logger.setLevel(level)
    # Re-running setup replaces handlers instead of stacking them
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("Logging at %s", logging.getLevelName(level))
