"""
CLI context.

Exit codes and logging setup shared by CLI commands.
"""

from __future__ import annotations

import logging
from enum import IntEnum


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Parsed without errors
    ERROR = 1  # I/O or unexpected error
    PARSE = 2  # Input failed to parse
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
