"""Logging setup for ledgerview."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging to stderr through rich.

    Args:
        level: Level name, case-insensitive. Unknown names fall back to WARNING.
    """
    logging.basicConfig(
        level=LOG_LEVELS.get(level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
