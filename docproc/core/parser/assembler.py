"""
Document assembly state machine.

Lines are fed one at a time. The first field decides what happens:

    "H"  close the open document (validating it) and open a new one
    "B"  append a position to the open document
    "C"  comment, ignored
    *    unknown line type, parse fails

Empty lines only advance the counters. The first failure aborts the run.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING

from .errors import ParseError
from .models import Document, LineType, ProcessResult
from .records import parse_header, parse_position
from .tokenizer import tokenize_line

if TYPE_CHECKING:
    from .lines import RawLine

logger = logging.getLogger(__name__)


class AssemblerState(Enum):
    """State of the assembly state machine."""

    NO_OPEN_DOCUMENT = auto()  # Before the first header
    DOCUMENT_OPEN = auto()  # A header has been read, positions may follow


class DocumentAssembler:
    """
    Accumulates documents for one parse run.

    Instances hold per-run state (open document, counters). Use a fresh
    instance per stream or call reset() before reuse.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Clear all state accumulated by a previous run."""
        self.state = AssemblerState.NO_OPEN_DOCUMENT
        self.line_count = 0
        self.char_count = 0
        self._documents: list[Document] = []
        self._current: Document | None = None

    @property
    def current_document(self) -> Document | None:
        """The open document, if any."""
        return self._current

    def feed(self, raw: RawLine) -> None:
        """
        Process one line.

        Args:
            raw: Line content and consumed character count

        Raises:
            ParseError: On the first invalid line
        """
        self.line_count += 1
        self.char_count += raw.consumed

        line = raw.content
        if not line:
            return

        fields = tokenize_line(line)
        token = fields[0].strip() if fields else ""

        try:
            line_type = LineType(token)
        except ValueError:
            raise ParseError(
                f"Unknown line type: '{token}'.",
                self.line_count,
                code="DOC-LINE-001",
                context={"raw_value": token},
            ) from None

        try:
            if line_type is LineType.HEADER:
                self._open_document(fields, line)
            elif line_type is LineType.POSITION:
                self._add_position(fields, line)
        except ParseError:
            raise
        except Exception as e:
            raise ParseError("Error processing line.", self.line_count, code="DOC-LINE-002") from e

    def finish(self) -> ProcessResult:
        """
        Close the open document and build the result.

        Returns:
            ProcessResult with documents in file order

        Raises:
            ParseError: If the last document is missing required positions
        """
        if self.state is AssemblerState.DOCUMENT_OPEN:
            self._close_document()

        logger.debug(
            "Parsed %d document(s), %d line(s), %d char(s)",
            len(self._documents),
            self.line_count,
            self.char_count,
        )
        return ProcessResult(
            documents=self._documents,
            line_count=self.line_count,
            char_count=self.char_count,
        )

    def _open_document(self, fields: list[str], line: str) -> None:
        if self.state is AssemblerState.DOCUMENT_OPEN:
            self._close_document()

        document = parse_header(fields, line, self.line_count)
        self._documents.append(document)
        self._current = document
        self.state = AssemblerState.DOCUMENT_OPEN
        logger.debug("Line %d: opened document %s", self.line_count, document.document_number)

    def _add_position(self, fields: list[str], line: str) -> None:
        document = self._current
        if self.state is AssemblerState.NO_OPEN_DOCUMENT or document is None:
            raise ParseError(
                "Position without a document header.",
                self.line_count,
                code="DOC-POS-001",
            )

        position = parse_position(fields, line, self.line_count)
        document.positions.append(position)

    def _close_document(self) -> None:
        """Validate the open document at the line where it closes."""
        document = self._current
        if document is None:
            return

        validate_document(document, self.line_count)
        self._current = None
        self.state = AssemblerState.NO_OPEN_DOCUMENT
        logger.debug(
            "Line %d: closed document %s with %d position(s)",
            self.line_count,
            document.document_number,
            len(document.positions),
        )


def validate_document(document: Document, line_no: int) -> None:
    """
    Check that a document may be closed.

    Args:
        document: Document to check
        line_no: Line at which the document closes

    Raises:
        ParseError: DOC-DOC-001 if gross != 0 and there are no positions
    """
    if not document.is_complete:
        raise ParseError(
            "Document has no positions but positions are required.",
            line_no,
            0,
            0,
            code="DOC-DOC-001",
            context={"document_number": document.document_number},
        )
