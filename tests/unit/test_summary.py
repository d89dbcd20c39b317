"""Tests for post-parse summary."""

from decimal import Decimal

from docproc.core.parser import process_text
from docproc.core.summary import summarize

HEADER = "H,5308,02,{number},29-01-2015,5222,10140,KOL S.A.,1,28-01-2015,0,0,{gross},0,0,0,"
POSITION = "B,{code},{name},1,1,{value},0,,,,,G,"


def _content(*documents: tuple[str, str, list[tuple[str, str]]]) -> str:
    lines = []
    for number, gross, positions in documents:
        lines.append(HEADER.format(number=number, gross=gross))
        for name, value in positions:
            lines.append(POSITION.format(code=name.lower(), name=name, value=value))
    return "\n".join(lines)


class TestSummarize:
    """Tests for summarize function."""

    def test_empty_result(self) -> None:
        """Test summary of an empty parse."""
        summary = summarize(process_text(""))

        assert summary.sum == Decimal(0)
        assert summary.xcount == 0
        assert summary.products_with_max_net_value == ""
        assert summary.documents == []

    def test_gross_sum(self) -> None:
        """Test that gross amounts are summed exactly."""
        content = _content(
            ("1", "0.10", [("A", "1")]),
            ("2", "0.20", [("B", "1")]),
        )
        summary = summarize(process_text(content))
        assert summary.sum == Decimal("0.30")

    def test_xcount_threshold(self) -> None:
        """Test counting documents with more than x positions."""
        content = _content(
            ("1", "1", [("A", "1")]),
            ("2", "1", [("A", "1"), ("B", "2")]),
            ("3", "0", []),
        )
        result = process_text(content)

        assert summarize(result, threshold=0).xcount == 2
        assert summarize(result, threshold=1).xcount == 1
        assert summarize(result, threshold=2).xcount == 0

    def test_max_absolute_net_value(self) -> None:
        """Test that the comparison uses absolute values."""
        content = _content(("1", "1", [("A", "5"), ("B", "-7.5"), ("C", "7")]))
        summary = summarize(process_text(content))
        assert summary.products_with_max_net_value == "B"

    def test_max_ties_deduplicated(self) -> None:
        """Test that ties are joined in first-seen order without duplicates."""
        content = _content(
            ("1", "1", [("A", "2.0"), ("B", "-2"), ("A", "2")]),
            ("2", "1", [("C", "1"), ("B", "2.00")]),
        )
        summary = summarize(process_text(content))
        assert summary.products_with_max_net_value == "A,B"

    def test_counts_copied(self, valid_content: str) -> None:
        """Test that line and char counts are carried over."""
        summary = summarize(process_text(valid_content), threshold=1)

        assert summary.line_count == 3
        assert summary.char_count == len(valid_content)
        assert summary.xcount == 1
        assert summary.products_with_max_net_value == "AUTO WIAT CLASSIC"

    def test_to_response(self, valid_content: str) -> None:
        """Test the public response shape."""
        response = summarize(process_text(valid_content)).to_response()

        assert set(response) == {
            "documents",
            "lineCount",
            "charCount",
            "sum",
            "xcount",
            "productsWithMaxNetValue",
        }
        assert response["sum"] == "-37.12"
        document = response["documents"][0]
        assert document["operationDate"] == "2015-01-29"
        assert document["baCode"] == "5308"
        assert "ba_code" not in document
        assert document["positions"][0]["productName"] == "NASZ DZIENNIK"
