"""Logging setup for command-line runs."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "harvester"


def configure_logging(level: str | int = "INFO") -> None:
    """Send ``harvester`` log records to stderr at *level*.

    Library modules only create loggers; handlers are installed here so that
    importing the package never changes the host application's logging.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("harvester")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
