"""
Parser data models.

Core data models for the document flat-file format.

CRITICAL DESIGN DECISIONS:
- Codes and numbers (ba_code, document_number, product_code, ...) are ALWAYS
  strings (preserve leading zeros)
- Monetary values are Decimal, never float
- Document and Position are frozen; a Document's positions list is only
  appended to while the document is open
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel

# JSON output uses camelCase keys; construction keeps the field names
CAMEL_CASE = AliasGenerator(serialization_alias=to_camel)


# =============================================================================
# Enums
# =============================================================================


class LineType(Enum):
    """Record type, taken from the first field of a line."""

    HEADER = "H"
    POSITION = "B"
    COMMENT = "C"


# =============================================================================
# Position Model
# =============================================================================


class Position(BaseModel, frozen=True, alias_generator=CAMEL_CASE):
    """A single line item ("B" line) of a document."""

    product_code: str
    product_name: str
    quantity: Decimal
    price_net: Decimal = Field(description="Unit net price")
    value_net: Decimal = Field(description="Net value of the line")
    vat: Decimal
    length_before: Decimal | None = Field(
        default=None,
        description="Quantity before the operation, None if the field was empty",
    )
    avg_before: Decimal | None = None
    length_after: Decimal | None = None
    avg_after: Decimal | None = None
    group: str


# =============================================================================
# Document Model
# =============================================================================


class Document(BaseModel, frozen=True, alias_generator=CAMEL_CASE):
    """
    An accounting document ("H" line) and its positions.

    CRITICAL: if gross != 0 the document must own at least one position.
    This is checked when the document closes, not on construction.
    """

    ba_code: str = Field(description="Bank/branch code")
    document_type: str
    document_number: str
    operation_date: date
    document_day_number: str
    contractor_code: str
    contractor_name: str
    external_document_number: str
    external_document_date: date

    # Amounts
    net: Decimal
    vat: Decimal
    gross: Decimal

    # Auxiliary amounts
    f1: Decimal
    f2: Decimal
    f3: Decimal

    positions: list[Position] = Field(default_factory=list)

    @property
    def requires_positions(self) -> bool:
        """A document with a non-zero gross amount must have positions."""
        return self.gross != 0

    @property
    def is_complete(self) -> bool:
        """Check if the document may be closed."""
        return not self.requires_positions or bool(self.positions)


# =============================================================================
# Process Result Model
# =============================================================================


class ProcessResult(BaseModel, frozen=True):
    """
    Result of parsing one stream.

    line_count counts every line, blank and comment lines included.
    char_count is the sum of each line's length plus its literal terminator.
    """

    documents: list[Document] = Field(default_factory=list)
    line_count: int = Field(default=0, ge=0)
    char_count: int = Field(default=0, ge=0)

    @property
    def position_count(self) -> int:
        """Total number of positions across all documents."""
        return sum(len(d.positions) for d in self.documents)
