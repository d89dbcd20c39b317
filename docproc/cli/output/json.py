"""
JSON output adapter.

Renders results as JSON for machine processing. The shape matches the HTTP
API responses.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from docproc.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from docproc.core.parser import ParseError
    from docproc.core.summary import ProcessSummary


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_summary(self, summary: ProcessSummary) -> str:
        """Render summary as JSON."""
        return json.dumps(summary.to_response(), indent=self.indent)

    def render_error(self, error: ParseError) -> str:
        """Render parse failure as JSON."""
        return json.dumps(error.to_problem(), indent=self.indent)
