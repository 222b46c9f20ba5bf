"""Log level control for the `pcmwav.*` loggers.

The codec modules only create loggers; the CLI calls :func:`configure_logging`
to pick a level for the package logger. A stderr handler is attached only when
nothing up the logger chain handles records yet, so applications that embed
pcmwav keep their own logging setup.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional


PACKAGE_LOGGER = "pcmwav"

_FORMAT = "pcmwav: %(levelname)s %(name)s: %(message)s"


def level_from_env(raw: Optional[str], *, default: int = logging.WARNING) -> int:
    """Map a `PCMWAV_LOG_LEVEL` value (name or number) to a logging level."""
    value = (raw or "").strip().upper()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else default


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Set the level of the package logger and return it.

    `debug` wins over `PCMWAV_LOG_LEVEL`, which wins over WARNING.
    """
    if debug:
        level = logging.DEBUG
    else:
        level = level_from_env(os.environ.get("PCMWAV_LOG_LEVEL"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.hasHandlers():
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
