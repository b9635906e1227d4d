"""Logging setup for md-links."""

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Route the ``md_links`` loggers through a rich handler on stderr.

    Calling this again only updates the level.
    """
    global _CONFIGURED

    logger = logging.getLogger("md_links")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if _CONFIGURED:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    # aiohttp is chatty at DEBUG
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"md_links.{name}")
