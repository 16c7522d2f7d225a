"""Route the package's event-style log records to the console."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Install a rich stderr handler on the ``sonar_radar`` logger."""
    logger = logging.getLogger("sonar_radar")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True))
