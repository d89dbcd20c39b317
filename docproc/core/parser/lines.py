"""
Incremental line splitting.

Input arrives in chunks of arbitrary size. Lines end with LF, CR or CRLF;
a CR immediately followed by LF is one two-character terminator. Content
that crosses a chunk boundary is kept in a buffer until its terminator
arrives.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_TERMINATOR = re.compile(r"\r\n|\r|\n")


class RawLine(NamedTuple):
    """One logical line: untrimmed content and characters consumed."""

    content: str
    consumed: int  # len(content) plus terminator length (0, 1 or 2)


class LineSplitter:
    """
    Stateful splitter fed one chunk at a time.

    A trailing CR is held back until the next chunk shows whether it is
    followed by LF.
    """

    def __init__(self) -> None:
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Unterminated content retained between chunks."""
        return self._buffer

    def reset(self) -> None:
        """Drop any buffered content."""
        self._buffer = ""

    def feed(self, chunk: str) -> list[RawLine]:
        """
        Add a chunk and return the lines it completes.

        Args:
            chunk: Next piece of decoded text

        Returns:
            Completed lines in input order
        """
        if not chunk:
            return []

        # Already scanned buffer content holds no terminator except a held CR.
        scan_from = max(len(self._buffer) - 1, 0)
        buffer = self._buffer + chunk
        end = len(buffer)
        start = 0
        lines: list[RawLine] = []

        for match in _TERMINATOR.finditer(buffer, scan_from):
            if match.end() == end and match.group() == "\r":
                break
            lines.append(RawLine(buffer[start : match.start()], match.end() - start))
            start = match.end()

        self._buffer = buffer[start:]
        return lines

    def finish(self) -> RawLine | None:
        """
        Flush the final line at end of input.

        Returns:
            The last line, or None when nothing is buffered
        """
        buffer = self._buffer
        self._buffer = ""

        if not buffer:
            return None
        if buffer.endswith("\r"):
            return RawLine(buffer[:-1], len(buffer))
        return RawLine(buffer, len(buffer))


def split_lines(chunks: Iterable[str]) -> Iterator[RawLine]:
    """
    Split an iterable of text chunks into lines.

    Args:
        chunks: Text pieces, not necessarily aligned to line boundaries

    Yields:
        RawLine for every line, including blank ones
    """
    splitter = LineSplitter()

    for chunk in chunks:
        yield from splitter.feed(chunk)

    last = splitter.finish()
    if last is not None:
        yield last
