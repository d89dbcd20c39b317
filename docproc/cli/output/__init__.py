"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from docproc.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from docproc.cli.output.json import JsonOutput
from docproc.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]
