"""Line record produced by the splitter."""

from dataclasses import dataclass, field

from nlsplit.core.terminators import Terminator


@dataclass(frozen=True)
class Line:
    """One line of a split buffer.

    A Line stores offsets into ``source`` rather than a copy of its text;
    ``content`` and ``raw`` slice the buffer when accessed.

    Attributes:
        source: The buffer being split
        start: Offset of the first character of the line
        end: Offset just past the line's content (where its terminator begins)
        terminator: The terminator that ended the line, or None for a final
            line that runs to the end of the buffer
    """

    source: str = field(repr=False)
    start: int
    end: int
    terminator: Terminator | None = None

    @property
    def has_terminator(self) -> bool:
        return self.terminator is not None

    @property
    def terminator_end(self) -> int:
        """Offset just past the terminator (equal to ``end`` when there is none)."""
        if self.terminator is None:
            return self.end
        return self.end + self.terminator.char_length

    @property
    def span(self) -> tuple[int, int]:
        """Offsets covered by the line including its terminator."""
        return self.start, self.terminator_end

    @property
    def content_span(self) -> tuple[int, int]:
        return self.start, self.end

    @property
    def content(self) -> str:
        """The line's text without its terminator."""
        return self.source[self.start : self.end]

    @property
    def raw(self) -> str:
        """The line's text with its terminator, exactly as in ``source``."""
        return self.source[self.start : self.terminator_end]

    def text(self, keep_terminator: bool = False) -> str:
        return self.raw if keep_terminator else self.content
