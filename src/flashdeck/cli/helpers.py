"""Shared CLI helpers used by main and the session loop."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# User dialogue goes to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> None:
    """Route diagnostic logging through rich on stderr."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
