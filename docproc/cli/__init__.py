"""
docproc CLI.

Command-line interface for parsing document flat files.
"""

from docproc.cli.main import app, run

__all__ = ["app", "run"]
