"""
Pytest configuration and fixtures for docproc tests.

Provides fixtures for:
- Sample header and position lines
- Sample files written to a temporary directory
- Generated large inputs for streaming tests
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

# =============================================================================
# Sample Lines
# =============================================================================

HEADER_LINE = (
    "H,5308,02,00130,29-01-2015,5222,10140,KOL S.A.,20150128099911,28-01-2015,"
    "-34.37,-2.75,-37.12,0.00,0.00,0.00,"
)
HEADER_ZERO_GROSS = (
    "H,5308,02,00130,29-01-2015,5222,10140,KOL S.A.,20150128099911,28-01-2015,"
    "0.00,0.00,0.00,0.00,0.00,0.00,"
)
HEADER_NONZERO_NO_POSITIONS = (
    "H,5308,02,00130,29-01-2015,5222,10140,KOL S.A.,20150128099911,28-01-2015,"
    "-34.37,-2.75,-37.12,10.00,0.00,0.00,"
)
SECOND_HEADER_ZERO_GROSS = (
    "H,5309,02,00131,30-01-2015,5223,10141,ABC S.A.,20150129099912,29-01-2015,"
    "0.00,0.00,0.00,0.00,0.00,0.00,"
)
POSITION_LINE_1 = "B,19556,NASZ DZIENNIK,-3.000,1.63000,-4.89,-0.39,5.000,1.73552,2.000,1.89379,1117,"
POSITION_LINE_2 = (
    "B,25947,AUTO WIAT CLASSIC,-2.000,14.74000,-29.48,-2.36,3.000,14.74000,1.000,14.74000,1117,"
)

VALID_CONTENT = "\n".join([HEADER_LINE, POSITION_LINE_1, POSITION_LINE_2])


@pytest.fixture
def header_line() -> str:
    """Return a header line with gross -37.12."""
    return HEADER_LINE


@pytest.fixture
def valid_content() -> str:
    """One document with two positions, LF line endings, no final newline."""
    return VALID_CONTENT


@pytest.fixture
def multi_document_content() -> str:
    """Two documents with positions, a comment and a blank line, CRLF endings."""
    return "\r\n".join(
        [
            "C,exported 2015-01-30",
            HEADER_LINE,
            POSITION_LINE_1,
            POSITION_LINE_2,
            "",
            SECOND_HEADER_ZERO_GROSS,
            "C,end of file",
        ]
    ) + "\r\n"


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def valid_file(tmp_path: Path, valid_content: str) -> Path:
    """Valid sample written to disk as UTF-8."""
    path = tmp_path / "documents.txt"
    path.write_bytes(valid_content.encode("utf-8"))
    return path


@pytest.fixture
def valid_file_bom(tmp_path: Path, valid_content: str) -> Path:
    """Valid sample written to disk as UTF-8 with BOM."""
    path = tmp_path / "documents_bom.txt"
    path.write_bytes(b"\xef\xbb\xbf" + valid_content.encode("utf-8"))
    return path


@pytest.fixture
def invalid_date_file(tmp_path: Path) -> Path:
    """Header with a slash-separated date."""
    path = tmp_path / "invalid_date.txt"
    path.write_text(HEADER_LINE.replace("29-01-2015", "29/01/2015"), encoding="utf-8")
    return path


# =============================================================================
# Large Input Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def large_content() -> str:
    """Generate 2,000 documents with 3 positions each."""
    return _generate_content(num_documents=2_000, positions_per_document=3)


def _generate_content(num_documents: int, positions_per_document: int) -> str:
    lines: list[str] = []
    for i in range(1, num_documents + 1):
        day = (i % 28) + 1
        lines.append(
            f"H,5308,02,{i:05d},{day:02d}-01-2015,5222,10140,KONTRAHENT {i},"
            f"2015012809{i:04d},{day:02d}-01-2015,-34.37,-2.75,-37.12,0.00,0.00,0.00,"
        )
        for j in range(positions_per_document):
            lines.append(
                f"B,{10000 + j},PRODUCT {j},-1.000,1.50000,-{j + 1}.50,-0.12,,,,,1117,"
            )
    return "\r\n".join(lines) + "\r\n"
