"""Tests for incremental line splitting."""

import pytest

from docproc.core.parser.lines import LineSplitter, RawLine, split_lines


def _split(text: str, chunk_size: int) -> list[RawLine]:
    chunks = [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]
    return list(split_lines(chunks))


class TestSplitLines:
    """Tests for split_lines function."""

    def test_empty_input(self) -> None:
        """Test that empty input produces no lines."""
        assert list(split_lines([])) == []
        assert list(split_lines([""])) == []

    def test_lf_endings(self) -> None:
        """Test splitting on LF."""
        lines = list(split_lines(["a,b\nc,d\n"]))
        assert lines == [RawLine("a,b", 4), RawLine("c,d", 4)]

    def test_crlf_is_one_terminator(self) -> None:
        """Test that CRLF counts as one two-character terminator."""
        lines = list(split_lines(["a\r\nb\r\n"]))
        assert lines == [RawLine("a", 3), RawLine("b", 3)]

    def test_lone_cr(self) -> None:
        """Test that a lone CR ends a line."""
        lines = list(split_lines(["a\rb"]))
        assert lines == [RawLine("a", 2), RawLine("b", 1)]

    def test_lf_cr_is_two_lines(self) -> None:
        """Test that LF followed by CR gives a blank second line."""
        lines = list(split_lines(["a\n\rb"]))
        assert lines == [RawLine("a", 2), RawLine("", 1), RawLine("b", 1)]

    def test_final_unterminated_line(self) -> None:
        """Test that trailing content without terminator is emitted."""
        lines = list(split_lines(["a\nlast"]))
        assert lines[-1] == RawLine("last", 4)

    def test_blank_lines_are_kept(self) -> None:
        """Test that blank lines are emitted with their terminator length."""
        lines = list(split_lines(["\n\r\n\r"]))
        assert lines == [RawLine("", 1), RawLine("", 2), RawLine("", 1)]

    def test_content_is_not_trimmed(self) -> None:
        """Test that surrounding whitespace is preserved."""
        lines = list(split_lines(["  H , x  \n"]))
        assert lines[0].content == "  H , x  "

    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 5, 7, 64])
    def test_chunk_boundaries(self, chunk_size: int) -> None:
        """Test that results do not depend on chunk size."""
        text = "H,1,2\r\nB,x\rC\n\nB,y\r\nlast"
        assert _split(text, chunk_size) == _split(text, len(text))

    def test_consumed_sums_to_length(self) -> None:
        """Test that consumed counts add up to the input length."""
        text = "a\r\nbb\rccc\n\n\r\ndddd"
        assert sum(line.consumed for line in _split(text, 3)) == len(text)


class TestLineSplitter:
    """Tests for the stateful LineSplitter."""

    def test_cr_held_until_next_chunk(self) -> None:
        """Test that a CR at a chunk end waits for a possible LF."""
        splitter = LineSplitter()
        assert splitter.feed("abc\r") == []
        assert splitter.feed("\ndef") == [RawLine("abc", 5)]
        assert splitter.finish() == RawLine("def", 3)

    def test_cr_at_end_of_input(self) -> None:
        """Test that a final CR is a one-character terminator."""
        splitter = LineSplitter()
        assert splitter.feed("abc\r") == []
        assert splitter.finish() == RawLine("abc", 4)

    def test_pending_content(self) -> None:
        """Test that partial lines are buffered between chunks."""
        splitter = LineSplitter()
        splitter.feed("H,53")
        splitter.feed("08")
        assert splitter.pending == "H,5308"

    def test_finish_without_content(self) -> None:
        """Test that finish returns None when nothing is buffered."""
        splitter = LineSplitter()
        splitter.feed("a\n")
        assert splitter.finish() is None

    def test_reset(self) -> None:
        """Test that reset drops buffered content."""
        splitter = LineSplitter()
        splitter.feed("partial")
        splitter.reset()
        assert splitter.finish() is None
