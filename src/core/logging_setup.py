"""Logging configuration for the CLI.

Log records go to stderr through Rich so that stdout only carries the command
output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(verbosity: int, base_level: str = "WARNING") -> int:
    """Map the `-v` count onto a logging level (0 keeps `base_level`)."""

    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.getLevelName(base_level.upper())


def configure_logging(verbosity: int = 0, *, base_level: str = "WARNING") -> None:
    level = resolve_level(verbosity, base_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO; keep it for -vv only.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbosity >= 2 else logging.WARNING)
