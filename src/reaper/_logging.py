"""Logging setup for the reaper CLI.

Log records go to stderr through rich so that rendered records on stdout
stay clean.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "reaper"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a RichHandler to the ``reaper`` logger.

    Args:
        debug: Log at DEBUG instead of WARNING.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if debug else logging.WARNING

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger
