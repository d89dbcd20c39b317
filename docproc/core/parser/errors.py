"""
Parser error models.

This module defines the single failure kind raised by the document parser.
Every failure carries a message, a 1-based line number, a 1-based character
offset within that line and a 0-based column index. Structural failures
report 0 for both the character offset and the column index.

Error codes use the DOC-XXX-NNN taxonomy.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Location(BaseModel, frozen=True):
    """Error location in the input."""

    line_no: int = 0
    char_position: int = 0
    column_index: int = 0

    def __str__(self) -> str:
        """Format location for display."""
        parts = [f"line {self.line_no}"]
        if self.char_position:
            parts.append(f"char {self.char_position}")
            parts.append(f"col {self.column_index}")
        return ", ".join(parts)


class ParseFailure(BaseModel, frozen=True):
    """Structured, serializable view of a ParseError."""

    code: str = Field(
        pattern=r"^DOC-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'DOC-DATE-001'",
    )
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(default_factory=Location)
    context: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        """Format failure for display."""
        return f"[{self.code}] {self.title} - {self.message} ({self.location})"


class ParseError(Exception):
    """
    Raised on the first invalid input found in a stream.

    The parser never recovers: one ParseError aborts the whole run.
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        char_position: int = 0,
        column_index: int = 0,
        *,
        code: str = "DOC-LINE-002",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.char_position = char_position
        self.column_index = column_index
        self.code = code
        self.context = context or {}
        super().__init__(message)

    @property
    def title(self) -> str:
        """Short title for the error code."""
        return get_error_description(self.code) or "Parse error"

    @property
    def failure(self) -> ParseFailure:
        """Return the failure as an immutable model."""
        return ParseFailure(
            code=self.code,
            title=self.title,
            message=self.message,
            location=Location(
                line_no=self.line_number,
                char_position=self.char_position,
                column_index=self.column_index,
            ),
            context=self.context,
        )

    def to_problem(self) -> dict[str, Any]:
        """Render as a problem-detail body (HTTP 400 "Parsing Error")."""
        return {
            "type": "https://httpstatuses.io/400",
            "title": "Parsing Error",
            "status": 400,
            "detail": self.message,
            "lineNumber": self.line_number,
            "charPosition": self.char_position,
            "columnIndex": self.column_index,
            "code": self.code,
        }

    def __repr__(self) -> str:
        return (
            f"ParseError({self.message!r}, line_number={self.line_number}, "
            f"char_position={self.char_position}, column_index={self.column_index}, "
            f"code={self.code!r})"
        )


# =============================================================================
# Error Codes Registry
# =============================================================================

PARSER_ERROR_CODES: dict[str, str] = {
    # Line errors
    "DOC-LINE-001": "Unknown line type",
    "DOC-LINE-002": "Error processing line",
    # Header errors
    "DOC-HDR-001": "Invalid header format",
    "DOC-HDR-002": "Error parsing header",
    # Position errors
    "DOC-POS-001": "Position without a document header",
    "DOC-POS-002": "Invalid position format",
    "DOC-POS-003": "Error parsing position",
    # Document errors
    "DOC-DOC-001": "Document has no positions but positions are required",
    # Field errors
    "DOC-DATE-001": "Invalid date format",
    "DOC-NUM-001": "Invalid number value",
    "DOC-NUM-002": "Invalid nullable number value",
    # Input errors
    "DOC-ENC-001": "Input is not valid UTF-8",
    "DOC-IO-001": "Input too large",
    "DOC-IO-002": "Input missing or empty",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return PARSER_ERROR_CODES.get(code)
