"""Line scanner over a text buffer."""

from collections.abc import Iterable

from loguru import logger

from nlsplit.core.splitting.types import Line
from nlsplit.core.terminators import (
    UNICODE_TERMINATORS,
    Terminator,
    TerminatorSet,
    as_terminator_set,
    find_terminator,
)


class LineCursor:
    """Scan position within one buffer, advanced one line at a time.

    ``next_line`` produces the next Line or returns None once the buffer is
    exhausted; the iterator protocol is a thin layer over it. A cursor is
    forward-only and cannot be restarted. Each caller splitting the same
    buffer needs its own cursor; the buffer itself is never modified.

    Attributes:
        text: The buffer being split
        terminators: Terminators treated as line boundaries
        position: Offset where the next line starts
        lines_produced: Number of lines returned so far
    """

    def __init__(
        self,
        text: str,
        terminators: TerminatorSet | Iterable[Terminator] = UNICODE_TERMINATORS,
    ) -> None:
        self.text = text
        self.terminators = as_terminator_set(terminators)
        self.position = 0
        self.lines_produced = 0
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def next_line(self) -> Line | None:
        """Produce the next line, or None when the buffer is exhausted.

        A line ends at the first active terminator at or after the cursor.
        Text after the last terminator becomes a final line with no
        terminator; nothing is produced for an empty remainder, so an empty
        buffer yields no lines and a trailing terminator adds no empty line.
        """
        if self._exhausted:
            return None

        start = self.position
        if start >= len(self.text):
            self._finish()
            return None

        match = find_terminator(self.text, self.terminators, start)
        if match is None:
            line = Line(self.text, start, len(self.text))
            self.position = len(self.text)
        else:
            line = Line(self.text, start, match.start, match.terminator)
            self.position = match.end

        self.lines_produced += 1
        return line

    def _finish(self) -> None:
        self._exhausted = True
        logger.debug(
            f"Line scan finished: {self.lines_produced} lines from "
            f"{len(self.text)} characters using {self.terminators!r}"
        )

    def __iter__(self) -> "LineCursor":
        return self

    def __next__(self) -> Line:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def __repr__(self) -> str:
        return (
            f"LineCursor(position={self.position}, length={len(self.text)}, "
            f"terminators={self.terminators!r})"
        )
