"""
Document Parser Core.

Public API for parsing document flat files ("H" headers, "B" positions,
"C" comments).

Usage:
    from docproc.core.parser import process_file, ParseError

    try:
        result = process_file("documents.txt")
    except ParseError as e:
        print(f"line {e.line_number}: {e.message}")

    for document in result.documents:
        print(document.document_number, len(document.positions))

API Functions:
    process_file(path) -> ProcessResult
    process_bytes(data) -> ProcessResult
    process_stream(stream) -> ProcessResult
    process_text(text) -> ProcessResult
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from .assembler import AssemblerState, DocumentAssembler, validate_document
from .encoding import DEFAULT_CHUNK_SIZE, DecodeError, iter_text, strip_bom
from .errors import Location, ParseError, ParseFailure, get_error_description
from .lines import LineSplitter, RawLine, split_lines
from .models import Document, LineType, Position, ProcessResult
from .tokenizer import column_start_position, tokenize_line

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class FileProcessor:
    """
    Parses streams into a ProcessResult.

    The processor itself is stateless: every call builds its own splitter
    and assembler, so one instance can be shared between callers.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE, max_bytes: int | None = None) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size
        self.max_bytes = max_bytes if max_bytes and max_bytes > 0 else None

    def process(self, stream: BinaryIO) -> ProcessResult:
        """
        Parse a binary stream of UTF-8 text.

        Args:
            stream: Binary file-like object, optionally starting with a BOM

        Returns:
            ProcessResult with documents and line/char counts

        Raises:
            ParseError: On the first invalid line, undecodable input or
                input larger than max_bytes
        """
        return _assemble(_decoded_chunks(stream, self.chunk_size, self.max_bytes))

    def process_text(self, text: str) -> ProcessResult:
        """Parse already decoded text."""
        text = strip_bom(text)
        chunks = (text[i : i + self.chunk_size] for i in range(0, len(text), self.chunk_size))
        return _assemble(chunks)


def process_stream(
    stream: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_bytes: int | None = None,
) -> ProcessResult:
    """
    Parse document data from a binary stream.

    Args:
        stream: Binary file-like object
        chunk_size: Bytes per read
        max_bytes: Maximum bytes to read (None or 0 = unlimited)

    Returns:
        ProcessResult
    """
    return FileProcessor(chunk_size=chunk_size, max_bytes=max_bytes).process(stream)


def process_bytes(
    data: bytes,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_bytes: int | None = None,
) -> ProcessResult:
    """Parse document data from bytes."""
    return process_stream(io.BytesIO(data), chunk_size=chunk_size, max_bytes=max_bytes)


def process_text(text: str, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> ProcessResult:
    """Parse document data from a decoded string."""
    return FileProcessor(chunk_size=chunk_size).process_text(text)


def process_file(
    path: Path | str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    max_bytes: int | None = None,
) -> ProcessResult:
    """
    Parse a document file.

    Args:
        path: Path to the file
        chunk_size: Bytes per read
        max_bytes: Maximum file size in bytes (None or 0 = unlimited)

    Returns:
        ProcessResult

    Raises:
        FileNotFoundError: If file does not exist
        ParseError: On invalid content
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    logger.debug("Parsing %s", path)
    with path.open("rb") as f:
        return process_stream(f, chunk_size=chunk_size, max_bytes=max_bytes)


def _decoded_chunks(stream: BinaryIO, chunk_size: int, max_bytes: int | None) -> Iterable[str]:
    """Yield decoded text, enforcing the size limit as bytes are read."""
    if max_bytes is None:
        yield from iter_text(stream, chunk_size)
        return

    limited = _LimitedReader(stream, max_bytes)
    yield from iter_text(limited, chunk_size)  # type: ignore[arg-type]


def _assemble(chunks: Iterable[str]) -> ProcessResult:
    """Run lines through a fresh assembler."""
    assembler = DocumentAssembler()
    splitter = LineSplitter()

    try:
        for chunk in chunks:
            for raw in splitter.feed(chunk):
                assembler.feed(raw)
    except DecodeError as e:
        # The text before the bad byte has been fed; a held CR already ends a line
        line_no = assembler.line_count + (2 if splitter.pending.endswith("\r") else 1)
        raise ParseError(
            str(e),
            line_no,
            code="DOC-ENC-001",
            context={"guessed_encoding": e.guessed_encoding},
        ) from e

    last = splitter.finish()
    if last is not None:
        assembler.feed(last)

    return assembler.finish()


class _LimitedReader:
    """Binary reader that fails once more than max_bytes have been read."""

    def __init__(self, stream: BinaryIO, max_bytes: int) -> None:
        self._stream = stream
        self._max_bytes = max_bytes
        self._read = 0

    def read(self, size: int = -1) -> bytes:
        data = self._stream.read(size)
        self._read += len(data)
        if self._read > self._max_bytes:
            raise ParseError(
                f"Input exceeds maximum size of {self._max_bytes} bytes",
                0,
                code="DOC-IO-001",
                context={"max_bytes": self._max_bytes},
            )
        return data


# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "AssemblerState",
    "Document",
    "DocumentAssembler",
    "FileProcessor",
    "LineSplitter",
    "LineType",
    "Location",
    "ParseError",
    "ParseFailure",
    "Position",
    "ProcessResult",
    "RawLine",
    "column_start_position",
    "get_error_description",
    "process_bytes",
    "process_file",
    "process_stream",
    "process_text",
    "split_lines",
    "tokenize_line",
    "validate_document",
]
