from __future__ import annotations
import logging
import os


PROMPT = "user> "

# Integers are signed 64-bit.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def get_log_level() -> int:
    raw = os.environ.get("MALLET_LOG_LEVEL")
    if not raw:
        raw = _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName maps unknown names to "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=_LOG_FORMAT)
