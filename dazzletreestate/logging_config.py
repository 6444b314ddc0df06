"""Logging configuration for applications embedding DazzleTreeState.

The library itself only creates module loggers (plus a NullHandler on the
package logger). Applications call :func:`setup_logging` once at start-up
to get console output.
"""

import logging
import logging.config
import os
from typing import Optional

__all__ = ["setup_logging"]

LOGGER_NAME = "dazzletreestate"
LEVEL_ENV = "DAZZLETREESTATE_LOG_LEVEL"
DEBUG_ENV = "DAZZLETREESTATE_DEBUG"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging for the dazzletreestate logger tree.

    Args:
        level: Log level name; defaults to $DAZZLETREESTATE_LOG_LEVEL or WARNING.
            $DAZZLETREESTATE_DEBUG=1 forces DEBUG.
    """
    level = (level or os.environ.get(LEVEL_ENV) or "WARNING").upper()
    if os.environ.get(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on"):
        level = "DEBUG"

    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': level,
            },
        },
        'loggers': {
            LOGGER_NAME: {
                'handlers': ['console'],
                'level': level,
                'propagate': False,
            },
        },
    })
    logging.getLogger(LOGGER_NAME).debug("Logging initialised at %s", level)
