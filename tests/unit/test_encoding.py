"""Tests for stream decoding."""

import io

import pytest

from docproc.core.parser.encoding import DecodeError, guess_encoding, iter_text, strip_bom


class TestIterText:
    """Tests for iter_text function."""

    def test_plain_utf8(self) -> None:
        """Test decoding plain UTF-8."""
        assert "".join(iter_text(io.BytesIO("H,ŁÓDŹ".encode()))) == "H,ŁÓDŹ"

    def test_bom_removed(self) -> None:
        """Test that a leading BOM is dropped."""
        data = b"\xef\xbb\xbfH,1"
        assert "".join(iter_text(io.BytesIO(data))) == "H,1"

    def test_bom_split_across_reads(self) -> None:
        """Test that a BOM is recognized even when read byte by byte."""
        data = b"\xef\xbb\xbfH,1"
        assert "".join(iter_text(io.BytesIO(data), chunk_size=1)) == "H,1"

    def test_only_leading_bom_removed(self) -> None:
        """Test that a BOM in the middle of the text is kept."""
        data = "a\ufeffb".encode()
        assert "".join(iter_text(io.BytesIO(data))) == "a\ufeffb"

    def test_empty_stream(self) -> None:
        """Test that an empty stream yields nothing."""
        assert list(iter_text(io.BytesIO(b""))) == []

    def test_invalid_bytes(self) -> None:
        """Test that invalid UTF-8 raises DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            list(iter_text(io.BytesIO(b"C,\xff\xfe")))
        assert "not valid UTF-8" in str(exc_info.value)

    def test_valid_prefix_yielded_before_error(self) -> None:
        """Test that text before an invalid byte is yielded before the error."""
        chunks: list[str] = []
        with pytest.raises(DecodeError):
            for chunk in iter_text(io.BytesIO(b"\xef\xbb\xbfC,a\nC,\xc5\x81\xff\n")):
                chunks.append(chunk)
        assert "".join(chunks) == "C,a\nC,\u0141"

    def test_truncated_sequence_at_end(self) -> None:
        """Test that an incomplete multi-byte sequence at EOF is an error."""
        with pytest.raises(DecodeError):
            list(iter_text(io.BytesIO("Ł".encode()[:1])))


class TestGuessEncoding:
    """Tests for guess_encoding function."""

    def test_returns_name_or_none(self) -> None:
        """Test that a guess is a lower-case name when present."""
        guess = guess_encoding("Zażółć gęślą jaźń, zażółć gęślą jaźń".encode("cp1250"))
        assert guess is None or guess == guess.lower()


class TestStripBom:
    """Tests for strip_bom function."""

    def test_strip(self) -> None:
        """Test removing a leading BOM from text."""
        assert strip_bom("\ufeffH") == "H"
        assert strip_bom("H") == "H"
