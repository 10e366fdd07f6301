"""Process-level logging setup."""

import sys

from loguru import logger

from myshell.config import LOG_LEVEL

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_FALLBACK_LEVEL = "WARNING"
_configured = None


def resolve_level(level):
    """Return a level name loguru knows, falling back to WARNING"""
    level = (level or LOG_LEVEL).upper()
    try:
        logger.level(level)
    except ValueError:
        print(f"myshell: unknown log level {level!r}, using {_FALLBACK_LEVEL}", file=sys.stderr)
        return _FALLBACK_LEVEL
    return level


def configure_logging(level=None):
    """Route loguru to stderr at the configured level (once per level)."""
    global _configured

    level = resolve_level(level)
    if level == _configured:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _configured = level
