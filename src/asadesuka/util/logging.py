from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "asadesuka"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Send package log records to stderr so stdout only carries the answer.

    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logger.setLevel(level)
    logger.propagate = False
