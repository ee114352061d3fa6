"""Logging setup for the command line.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s  %(levelname)s  %(name)s  %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str = "WARNING", use_rich: bool = False) -> None:
    """Route ``tilesolver`` log records to stderr at *level*."""
    handler: logging.Handler
    if use_rich:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", DATE_FORMAT))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger = logging.getLogger("tilesolver")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
