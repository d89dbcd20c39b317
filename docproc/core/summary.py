"""
Post-parse summary.

Aggregates business figures over a parsed ProcessResult: total gross
amount, number of documents with more than `threshold` positions, and the
products with the largest absolute net value.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from docproc.core.parser import Document, ProcessResult


class ProcessSummary(BaseModel, frozen=True):
    """Figures reported alongside the parsed documents."""

    documents: list[Document] = Field(default_factory=list)
    line_count: int = 0
    char_count: int = 0
    sum: Decimal = Field(default=Decimal(0), description="Sum of gross amounts")
    xcount: int = Field(default=0, description="Documents with more than `threshold` positions")
    products_with_max_net_value: str = Field(
        default="",
        description="Comma-joined names of products with the largest |value_net|",
    )
    threshold: int = 0

    def to_response(self) -> dict[str, Any]:
        """Convert to the public response shape (camelCase keys)."""
        return {
            "documents": [d.model_dump(mode="json", by_alias=True) for d in self.documents],
            "lineCount": self.line_count,
            "charCount": self.char_count,
            "sum": str(self.sum),
            "xcount": self.xcount,
            "productsWithMaxNetValue": self.products_with_max_net_value,
        }


def summarize(result: ProcessResult, threshold: int = 0) -> ProcessSummary:
    """
    Build a summary for a parse result.

    Args:
        result: Parsed documents
        threshold: Position count a document must exceed to be counted

    Returns:
        ProcessSummary
    """
    total = Decimal(0)
    xcount = 0
    max_value: Decimal | None = None
    # dict keeps first-seen order and drops duplicates
    products: dict[str, None] = {}

    for document in result.documents:
        if len(document.positions) > threshold:
            xcount += 1
        total += document.gross

        for position in document.positions:
            value = abs(position.value_net)
            if max_value is None or value > max_value:
                max_value = value
                products = {position.product_name: None}
            elif value == max_value:
                products[position.product_name] = None

    return ProcessSummary(
        documents=result.documents,
        line_count=result.line_count,
        char_count=result.char_count,
        sum=total,
        xcount=xcount,
        products_with_max_net_value=",".join(products),
        threshold=threshold,
    )
