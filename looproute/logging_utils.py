"""Mini README: Application-wide logging helpers for LoopRoute.

Structure:
    * configure_root_logger - attach a single formatted handler to the root logger.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Every module creates ``LOGGER = get_logger(__name__)`` at import time. The
    root logger is configured on first use only, so reloading modules in a
    development server does not stack duplicate handlers. The log level can be
    raised or lowered by the CLI through ``configure_root_logger``.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger once, adjusting the level on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
