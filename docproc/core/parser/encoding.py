"""
Stream decoding for document files.

Input is UTF-8, optionally preceded by a byte-order mark. The BOM is
consumed before line splitting and never counts as line content.

charset-normalizer is only consulted when decoding fails, to name the
encoding the input was most likely written in.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING, BinaryIO

from charset_normalizer import from_bytes

if TYPE_CHECKING:
    from collections.abc import Iterator

# Read size used when the caller does not pass one
DEFAULT_CHUNK_SIZE = 4096

# Size of data to use for encoding guesses (8KB is usually sufficient)
DETECTION_SAMPLE_SIZE = 8192

UTF8_BOM = "\ufeff"


class DecodeError(Exception):
    """Input bytes are not valid UTF-8."""

    def __init__(self, reason: str, guessed_encoding: str | None) -> None:
        self.reason = reason
        self.guessed_encoding = guessed_encoding
        message = f"Input is not valid UTF-8: {reason}"
        if guessed_encoding:
            message += f" (looks like {guessed_encoding})"
        super().__init__(message)


def guess_encoding(data: bytes) -> str | None:
    """
    Guess the encoding of undecodable data.

    Args:
        data: Sample of the raw input

    Returns:
        Lower-case encoding name, or None if nothing plausible was found
    """
    results = from_bytes(data[:DETECTION_SAMPLE_SIZE])
    best = results.best() if results else None
    if best is None:
        return None
    return best.encoding.lower()


def iter_text(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Decode a binary stream incrementally.

    Multi-byte sequences split across reads are carried over by the
    incremental decoder; a leading BOM is dropped.

    Args:
        stream: Binary file-like object
        chunk_size: Bytes per read

    Yields:
        Decoded text chunks (possibly empty)

    Raises:
        DecodeError: If the stream contains invalid UTF-8. The text before
            the offending byte is yielded first.
    """
    decoder = codecs.getincrementaldecoder("utf-8-sig")(errors="strict")

    while True:
        raw = stream.read(chunk_size)
        final = not raw
        try:
            text = decoder.decode(raw or b"", final=final)
        except UnicodeDecodeError as exc:
            # exc.object holds buffered bytes plus this read, minus any BOM
            valid = exc.object[: exc.start].decode("utf-8")
            if valid:
                yield valid
            raise DecodeError(exc.reason, guess_encoding(exc.object)) from exc
        if text:
            yield text
        if final:
            return


def strip_bom(text: str) -> str:
    """Remove a leading BOM from already decoded text."""
    if text.startswith(UTF8_BOM):
        return text[len(UTF8_BOM) :]
    return text
