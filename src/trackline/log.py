# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"

_handler: RichHandler | None = None


def configure_logging(level: str = "WARNING") -> None:
    """
    Route the package loggers through rich on stderr.

    Safe to call more than once; the level of the existing handler is
    updated instead of adding another.
    """
    global _handler

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    logger = logging.getLogger("trackline")
    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(numeric_level)
    logger.setLevel(numeric_level)
