"""Mini README: Application-wide logging helpers for the budgeting tracker.

Structure:
    * configure_root_logger - installs a single stream handler on the root logger.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules call ``LOGGER = get_logger(__name__)`` at import time. Entry points
    call ``configure_root_logger`` with the level taken from settings before any
    work starts; later calls only adjust the level so handlers never duplicate.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_HANDLER: Optional[logging.Handler] = None


def _coerce_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the tracker's formatter to the root logger and set its level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(level))
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
