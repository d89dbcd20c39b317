"""
Fixed record schemas.

Header ("H") lines have 16 fields, position ("B") lines have 12. Field 0 is
the record type; the remaining fields map to model attributes by index.
Extra fields (e.g. from a trailing comma) are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import ParseError
from .fields import parse_date, parse_decimal, parse_nullable_decimal, parse_string
from .models import Document, Position

if TYPE_CHECKING:
    from collections.abc import Callable

    Converter = Callable[[str, int, str, int], Any]

HEADER_FIELD_COUNT = 16
POSITION_FIELD_COUNT = 12

# Column index -> (attribute, converter)
HEADER_FIELDS: dict[int, tuple[str, Converter]] = {
    1: ("ba_code", parse_string),
    2: ("document_type", parse_string),
    3: ("document_number", parse_string),
    4: ("operation_date", parse_date),
    5: ("document_day_number", parse_string),
    6: ("contractor_code", parse_string),
    7: ("contractor_name", parse_string),
    8: ("external_document_number", parse_string),
    9: ("external_document_date", parse_date),
    10: ("net", parse_decimal),
    11: ("vat", parse_decimal),
    12: ("gross", parse_decimal),
    13: ("f1", parse_decimal),
    14: ("f2", parse_decimal),
    15: ("f3", parse_decimal),
}

POSITION_FIELDS: dict[int, tuple[str, Converter]] = {
    1: ("product_code", parse_string),
    2: ("product_name", parse_string),
    3: ("quantity", parse_decimal),
    4: ("price_net", parse_decimal),
    5: ("value_net", parse_decimal),
    6: ("vat", parse_decimal),
    7: ("length_before", parse_nullable_decimal),
    8: ("avg_before", parse_nullable_decimal),
    9: ("length_after", parse_nullable_decimal),
    10: ("avg_after", parse_nullable_decimal),
    11: ("group", parse_string),
}


def parse_header(fields: list[str], line: str, line_no: int) -> Document:
    """
    Build a Document from a tokenized header line.

    Args:
        fields: Raw fields of the line
        line: The full raw line (for error positions)
        line_no: 1-based line number

    Returns:
        A new Document without positions

    Raises:
        ParseError: On too few fields or an invalid field value
    """
    if len(fields) < HEADER_FIELD_COUNT:
        raise ParseError(
            "Invalid header format.",
            line_no,
            code="DOC-HDR-001",
            context={"field_count": len(fields), "expected": HEADER_FIELD_COUNT},
        )

    try:
        values = _convert(HEADER_FIELDS, fields, line, line_no)
        return Document(**values)
    except ParseError:
        raise
    except Exception as e:
        raise ParseError("Error parsing header.", line_no, code="DOC-HDR-002") from e


def parse_position(fields: list[str], line: str, line_no: int) -> Position:
    """
    Build a Position from a tokenized position line.

    Args:
        fields: Raw fields of the line
        line: The full raw line (for error positions)
        line_no: 1-based line number

    Returns:
        A new Position

    Raises:
        ParseError: On too few fields or an invalid field value
    """
    if len(fields) < POSITION_FIELD_COUNT:
        raise ParseError(
            "Invalid position format.",
            line_no,
            code="DOC-POS-002",
            context={"field_count": len(fields), "expected": POSITION_FIELD_COUNT},
        )

    try:
        values = _convert(POSITION_FIELDS, fields, line, line_no)
        return Position(**values)
    except ParseError:
        raise
    except Exception as e:
        raise ParseError("Error parsing position.", line_no, code="DOC-POS-003") from e


def _convert(
    schema: dict[int, tuple[str, Converter]],
    fields: list[str],
    line: str,
    line_no: int,
) -> dict[str, Any]:
    """Run each column's converter, in column order."""
    return {
        name: converter(fields[index], index, line, line_no)
        for index, (name, converter) in schema.items()
    }
