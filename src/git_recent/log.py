"""Logging configuration for git-recent.

Library modules only create loggers under the ``git_recent`` namespace and
emit debug records. Handlers are installed by the CLI, never on import.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "git_recent"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send git-recent log records to stderr through a Rich handler.

    Calling it again replaces the previous handler instead of adding one.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(handler)

    # Keep records off the root logger's handlers
    logger.propagate = False
    return logger
