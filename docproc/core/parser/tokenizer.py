"""
Field tokenizer for document lines.

The format has no quoting or escaping:
- Delimiter: comma (,)
- Every comma starts a new field, so adjacent commas give an empty field
- A trailing comma gives a trailing empty field
- A zero-length line has no fields at all
"""

from __future__ import annotations

DELIMITER = ","


def tokenize_line(line: str) -> list[str]:
    """
    Split a line into raw, untrimmed fields.

    Args:
        line: The line content without terminator

    Returns:
        List of field values, empty for an empty line
    """
    if not line:
        return []
    return line.split(DELIMITER)


def column_start_position(line: str, column_index: int) -> int:
    """
    Return the 1-based character offset where a column starts.

    Column 0 always starts at 1. Column c starts right after the c-th comma.
    If the line has fewer than c commas the offset is one past the end.

    Args:
        line: The full raw line
        column_index: Zero-based column ordinal

    Returns:
        1-based character offset
    """
    if column_index == 0:
        return 1

    current_column = 0
    for i, char in enumerate(line):
        if char == DELIMITER:
            current_column += 1
            if current_column == column_index:
                return i + 2

    return len(line) + 1
