"""Unit tests for splitting chunked text."""

import pytest

import nlsplit.core.splitting.streaming as streaming
from nlsplit.core import (
    ASCII_TERMINATORS,
    EMPTY_TERMINATORS,
    UNICODE_TERMINATORS,
    UNIX_TERMINATORS,
    Terminator,
    TerminatorSet,
    split_chunks,
    split_lines,
)

CRLF_ONLY = TerminatorSet([Terminator.CRLF])
CR_ONLY = TerminatorSet([Terminator.CARRIAGE_RETURN])

SAMPLE = "alpha\r\nbeta\rgamma\n\ndelta\x85eps\r\r\n\u2028zeta\r"


def _chunks(text: str, size: int) -> list[str]:
    return [text[i : i + size] for i in range(0, len(text), size)]


class TestSplitChunks:
    """Test split_chunks against whole-buffer splitting."""

    def test_crlf_split_across_chunks(self) -> None:
        """A CR ending one chunk and an LF starting the next form one CRLF."""
        assert list(split_chunks(["a\r", "\nb"], ASCII_TERMINATORS)) == ["a", "b"]

    def test_crlf_split_across_chunks_kept(self) -> None:
        """The reassembled CRLF is kept whole."""
        lines = list(split_chunks(["a\r", "\nb"], ASCII_TERMINATORS, keep_terminators=True))
        assert lines == ["a\r\n", "b"]

    def test_cr_at_chunk_end_without_crlf(self) -> None:
        """Without CRLF active, a CR at a chunk end ends its line at once."""
        lines = split_chunks(iter(["a\r", "\nb"]), CR_ONLY)
        assert next(lines) == "a"
        assert list(lines) == ["\nb"]

    def test_trailing_cr_in_last_chunk(self) -> None:
        """A CR at the very end is still a terminator once the input ends."""
        assert list(split_chunks(["a\r"], ASCII_TERMINATORS, keep_terminators=True)) == ["a\r"]

    def test_empty_chunks_are_skipped(self) -> None:
        """Empty chunks do not affect the result."""
        chunks = ["", "a\r", "", "\nb", ""]
        assert list(split_chunks(chunks, ASCII_TERMINATORS)) == ["a", "b"]

    def test_no_chunks(self) -> None:
        """No input yields no lines."""
        assert list(split_chunks([], UNICODE_TERMINATORS)) == []

    def test_line_spanning_many_chunks(self) -> None:
        """A line longer than a chunk is carried until it ends."""
        assert list(split_chunks(["ab", "cd", "e\nf"], UNIX_TERMINATORS)) == ["abcde", "f"]

    def test_crlf_only_with_cr_at_chunk_end(self) -> None:
        """With only CRLF active, a held CR that is not followed by LF stays content."""
        assert list(split_chunks(["a\r", "b\r", "\nc"], CRLF_ONLY)) == ["a\rb", "c"]

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 64])
    @pytest.mark.parametrize(
        "terminators",
        [EMPTY_TERMINATORS, UNIX_TERMINATORS, ASCII_TERMINATORS, UNICODE_TERMINATORS, CRLF_ONLY],
    )
    @pytest.mark.parametrize("keep", [False, True])
    def test_matches_whole_buffer_split(
        self, size: int, terminators: TerminatorSet, keep: bool
    ) -> None:
        """Every chunk size produces the same lines as splitting the joined text."""
        expected = split_lines(SAMPLE, terminators, keep)
        assert list(split_chunks(_chunks(SAMPLE, size), terminators, keep)) == expected

    def test_long_line_over_many_chunks(self, monkeypatch) -> None:
        """A line spread over many chunks is searched one chunk at a time."""
        searched_lengths = []
        original_find = streaming.find_terminator

        def recording_find(text, terminators, start=0):
            searched_lengths.append(len(text))
            return original_find(text, terminators, start)

        monkeypatch.setattr(streaming, "find_terminator", recording_find)
        chunks = ["x" * 1000] * 500 + ["\r", "\ny"]

        lines = list(split_chunks(chunks, ASCII_TERMINATORS))

        assert lines == ["x" * 500_000, "y"]
        assert max(searched_lengths) <= 1001
