"""
Canonical writer.

Renders documents back into the fixed line schema. Output is canonical:
trimmed strings, dd-mm-yyyy dates, plain-notation decimals, a trailing
comma on every record and LF line endings. Parsing the output again gives
equal models.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from docproc.core.parser.models import LineType
from docproc.core.parser.records import HEADER_FIELDS, POSITION_FIELDS
from docproc.core.parser.tokenizer import DELIMITER

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from docproc.core.parser.models import Document, Position

LINE_TERMINATOR = "\n"


def format_value(value: object) -> str:
    """Format one typed field value."""
    if value is None:
        return ""
    if isinstance(value, date):
        return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value).strip()


def format_header(document: Document) -> str:
    """Render the "H" line of a document."""
    values = [format_value(getattr(document, name)) for name, _ in HEADER_FIELDS.values()]
    return _record(LineType.HEADER, values)


def format_position(position: Position) -> str:
    """Render a "B" line."""
    values = [format_value(getattr(position, name)) for name, _ in POSITION_FIELDS.values()]
    return _record(LineType.POSITION, values)


def format_document(document: Document) -> list[str]:
    """Render a document and its positions, one string per line."""
    lines = [format_header(document)]
    lines.extend(format_position(p) for p in document.positions)
    return lines


def serialize(documents: Iterable[Document]) -> str:
    """Render documents as file content."""
    lines: list[str] = []
    for document in documents:
        lines.extend(format_document(document))
    return "".join(line + LINE_TERMINATOR for line in lines)


def write_documents(documents: Iterable[Document], path: Path) -> int:
    """
    Write documents to a UTF-8 file.

    Returns:
        Number of bytes written
    """
    data = serialize(documents).encode("utf-8")
    path.write_bytes(data)
    return len(data)


def _record(line_type: LineType, values: list[str]) -> str:
    for value in values:
        if DELIMITER in value:
            raise ValueError(f"Value contains the delimiter and cannot be written: {value!r}")
    return DELIMITER.join([line_type.value, *values]) + DELIMITER
