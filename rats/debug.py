"""Logger setup for rats.

Modules log through ``logging.getLogger(__name__)``, which places them under
the ``rats`` logger configured here. The terminal belongs to the UI while a
session runs, so records never go to stderr by default. ``RATS_LOG=<path>``
or a truthy ``RATS_DEBUG`` routes them to a file; otherwise a ``NullHandler``
keeps logging silent.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "rats"
DEBUG_ENV = "RATS_DEBUG"
LOG_PATH_ENV = "RATS_LOG"
DEFAULT_DEBUG_LOG = "rats_debug.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED = False


def debug_enabled() -> bool:
    value = os.environ.get(DEBUG_ENV, "0").strip().lower()
    return value in {"1", "true", "yes", "on", "debug"}


def configure_logging() -> logging.Logger:
    """Attach the file or null handler to the package logger once."""
    global _CONFIGURED
    logger = logging.getLogger(LOGGER_NAME)
    if _CONFIGURED:
        return logger
    _CONFIGURED = True

    enabled = debug_enabled()
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
    if logger.handlers:
        return logger

    log_path = os.environ.get(LOG_PATH_ENV)
    if log_path:
        log_path = os.path.expanduser(log_path)
    elif enabled:
        log_path = os.path.join(os.getcwd(), DEFAULT_DEBUG_LOG)

    if log_path:
        try:
            handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
        else:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    return logger


def reset_logging() -> None:
    """Drop configured handlers so the next ``configure_logging`` re-reads the env."""
    global _CONFIGURED
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
