"""Line terminator catalog."""

from enum import Enum

from nlsplit.core.errors import InvalidTerminatorError


class Terminator(Enum):
    """Line terminator sequences recognized by the splitter.

    Each member's value is the exact sequence it matches. Declaration order is
    the catalog order: sets iterate in this order and it breaks ties between
    equal-length sequences when matching.
    """

    LINE_FEED = "\n"
    CARRIAGE_RETURN = "\r"
    CRLF = "\r\n"  # Matched as one unit, never as CR then LF
    VERTICAL_TAB = "\x0b"
    FORM_FEED = "\x0c"
    NEXT_LINE = "\x85"
    LINE_SEPARATOR = "\u2028"
    PARAGRAPH_SEPARATOR = "\u2029"

    def __str__(self) -> str:
        return self.value

    @property
    def sequence(self) -> str:
        """The exact string matched by this terminator."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Line Feed'."""
        return _DISPLAY_NAMES[self]

    @property
    def short_name(self) -> str:
        """Conventional abbreviation, e.g. 'LF' or 'CRLF'."""
        return _SHORT_NAMES[self]

    @property
    def char(self) -> str | None:
        """The terminator as a single character, or None for CRLF."""
        if len(self.value) == 1:
            return self.value
        return None

    @property
    def char_length(self) -> int:
        return len(self.value)

    @property
    def utf8_length(self) -> int:
        return len(self.value.encode("utf-8"))

    @property
    def is_paragraph(self) -> bool:
        """True for paragraph-level terminators, False for line-level ones."""
        return self in _PARAGRAPH_TERMINATORS

    @classmethod
    def from_sequence(cls, sequence: str) -> "Terminator":
        """Look up the terminator matching ``sequence`` exactly.

        Args:
            sequence: A terminator string such as ``"\\r\\n"``

        Returns:
            The matching Terminator

        Raises:
            InvalidTerminatorError: If ``sequence`` is not a terminator
        """
        try:
            return cls(sequence)
        except ValueError:
            raise InvalidTerminatorError(sequence) from None

    @classmethod
    def from_char(cls, char: str) -> "Terminator":
        """Look up the single-character terminator ``char``.

        No character maps to CRLF; ``"\\r"`` is CARRIAGE_RETURN.

        Raises:
            InvalidTerminatorError: If ``char`` is not one newline character
        """
        if len(char) != 1:
            raise InvalidTerminatorError(char)
        return cls.from_sequence(char)


_DISPLAY_NAMES: dict[Terminator, str] = {
    Terminator.LINE_FEED: "Line Feed",
    Terminator.CARRIAGE_RETURN: "Carriage Return",
    Terminator.CRLF: "Carriage Return + Line Feed",
    Terminator.VERTICAL_TAB: "Vertical Tab",
    Terminator.FORM_FEED: "Form Feed",
    Terminator.NEXT_LINE: "Next Line",
    Terminator.LINE_SEPARATOR: "Line Separator",
    Terminator.PARAGRAPH_SEPARATOR: "Paragraph Separator",
}

_SHORT_NAMES: dict[Terminator, str] = {
    Terminator.LINE_FEED: "LF",
    Terminator.CARRIAGE_RETURN: "CR",
    Terminator.CRLF: "CRLF",
    Terminator.VERTICAL_TAB: "VT",
    Terminator.FORM_FEED: "FF",
    Terminator.NEXT_LINE: "NEL",
    Terminator.LINE_SEPARATOR: "LS",
    Terminator.PARAGRAPH_SEPARATOR: "PS",
}

_PARAGRAPH_TERMINATORS = frozenset({Terminator.PARAGRAPH_SEPARATOR})
