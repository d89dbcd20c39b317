"""
Terminal output adapter.

Renders results as human-readable text with optional ANSI colors.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from docproc.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from docproc.core.parser import Document, ParseError
    from docproc.core.summary import ProcessSummary


# Check if Unicode is supported
def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "\u2713".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


SUCCESS_SYMBOL_UNICODE = "\u2713"
SUCCESS_SYMBOL_ASCII = "OK"
ERROR_SYMBOL_UNICODE = "\u2716"
ERROR_SYMBOL_ASCII = "X"


class TerminalOutput(OutputAdapter):
    """Terminal output with ANSI colors."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._use_unicode = _supports_unicode()
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if self._use_unicode else SUCCESS_SYMBOL_ASCII
        self._error_symbol = ERROR_SYMBOL_UNICODE if self._use_unicode else ERROR_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_summary(self, summary: ProcessSummary) -> str:
        """Render summary for the terminal."""
        lines: list[str] = []

        for document in summary.documents:
            lines.append(self._format_document(document))

        if summary.documents:
            lines.append("")

        lines.append(f"Lines: {summary.line_count}")
        lines.append(f"Characters: {summary.char_count}")
        lines.append(f"Documents: {len(summary.documents)}")
        lines.append(f"Gross sum: {summary.sum}")
        lines.append(f"Documents with more than {summary.threshold} position(s): {summary.xcount}")
        if summary.products_with_max_net_value:
            lines.append(f"Max net value product(s): {summary.products_with_max_net_value}")

        lines.append(self._style(f"{self._success_symbol} Parsed successfully.", "green"))
        return "\n".join(lines)

    def render_error(self, error: ParseError) -> str:
        """Render parse failure for the terminal."""
        loc_parts = [f"L{error.line_number}"]
        if error.char_position:
            loc_parts.append(f"C{error.char_position}")
            loc_parts.append(f"col {error.column_index}")
        location = ":".join(loc_parts)

        styled_symbol = self._style(self._error_symbol, "bold red")
        styled_code = self._style(error.code, "dim")
        return f"{styled_symbol} {location}: {error.message} [{styled_code}]"

    def _format_document(self, document: Document) -> str:
        header = self._style(f"Document {document.document_number}", "bold")
        return (
            f"{header} ({document.document_type}) {document.contractor_name}: "
            f"gross {document.gross}, {len(document.positions)} position(s)"
        )

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text

        # ANSI color codes
        codes = {
            "bold": "\033[1m",
            "dim": "\033[2m",
            "red": "\033[31m",
            "green": "\033[32m",
            "bold red": "\033[1;31m",
        }
        reset = "\033[0m"

        code = codes.get(style, "")
        if code:
            return f"{code}{text}{reset}"
        return text
