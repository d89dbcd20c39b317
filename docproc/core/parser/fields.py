"""
Typed field conversion.

Each converter gets the raw field, its column index and the full line, and
either returns a value or raises ParseError located at the column start.
Numbers and dates are culture-invariant: "-34.37", "29-01-2015".
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .errors import ParseError
from .tokenizer import column_start_position

DATE_FORMAT = "%d-%m-%Y"

_DATE_PATTERN = re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{4}$")
_DECIMAL_PATTERN = re.compile(r"^-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


def parse_string(raw: str, column_index: int, line: str, line_no: int) -> str:
    """Trim surrounding whitespace; empty values are allowed."""
    return raw.strip()


def parse_date(raw: str, column_index: int, line: str, line_no: int) -> date:
    """
    Parse a dd-mm-yyyy date.

    The value must match the pattern exactly, without surrounding
    whitespace, and name a real calendar day.

    Raises:
        ParseError: DOC-DATE-001 for any other form
    """
    if _DATE_PATTERN.match(raw):
        try:
            return datetime.strptime(raw, DATE_FORMAT).date()
        except ValueError:
            pass

    raise ParseError(
        f"Invalid date format: '{raw}'",
        line_no,
        column_start_position(line, column_index),
        column_index,
        code="DOC-DATE-001",
        context={"raw_value": raw, "expected": "dd-mm-yyyy"},
    )


def parse_decimal(raw: str, column_index: int, line: str, line_no: int) -> Decimal:
    """
    Parse a signed decimal with an optional '.' decimal point.

    Raises:
        ParseError: DOC-NUM-001 if the value is not a plain decimal number
    """
    value = _to_decimal(raw)
    if value is None:
        raise ParseError(
            f"Invalid number value: '{raw}'",
            line_no,
            column_start_position(line, column_index),
            column_index,
            code="DOC-NUM-001",
            context={"raw_value": raw},
        )
    return value


def parse_nullable_decimal(
    raw: str, column_index: int, line: str, line_no: int
) -> Decimal | None:
    """
    Parse an optional decimal; an empty (after trimming) field gives None.

    Raises:
        ParseError: DOC-NUM-002 if a non-empty value is not a decimal number
    """
    if not raw.strip():
        return None

    value = _to_decimal(raw)
    if value is None:
        raise ParseError(
            f"Invalid nullable number value: '{raw}'",
            line_no,
            column_start_position(line, column_index),
            column_index,
            code="DOC-NUM-002",
            context={"raw_value": raw},
        )
    return value


def _to_decimal(raw: str) -> Decimal | None:
    """Convert a trimmed plain decimal literal, None if it is not one."""
    value = raw.strip()
    if not _DECIMAL_PATTERN.match(value):
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        return None
