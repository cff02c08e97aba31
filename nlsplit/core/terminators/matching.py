"""Locating terminators in text."""

from dataclasses import dataclass

from nlsplit.core.terminators.sets import TerminatorSet
from nlsplit.core.terminators.types import Terminator


@dataclass(frozen=True)
class TerminatorMatch:
    """A terminator found in a text buffer.

    Attributes:
        terminator: The catalog entry that matched
        start: Offset of the first character of the sequence
        end: Offset just past the sequence
    """

    terminator: Terminator
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


def match_at(text: str, position: int, terminators: TerminatorSet) -> TerminatorMatch | None:
    """Return the longest active terminator starting exactly at ``position``.

    CRLF is preferred over a lone CR or LF when it is in ``terminators``.

    Args:
        text: Buffer to probe
        position: Offset to probe at
        terminators: Active terminators

    Returns:
        The match, or None if no active terminator starts at ``position``
    """
    pattern = terminators.search_pattern
    if pattern is None or not 0 <= position < len(text):
        return None
    found = pattern.match(text, position)
    if found is None:
        return None
    return TerminatorMatch(Terminator(found.group()), found.start(), found.end())


def find_terminator(
    text: str, terminators: TerminatorSet, start: int = 0
) -> TerminatorMatch | None:
    """Return the first active terminator at or after ``start``.

    Equivalent to calling match_at at every offset from ``start`` onwards and
    returning the first hit.
    """
    pattern = terminators.search_pattern
    if pattern is None:
        return None
    found = pattern.search(text, start)
    if found is None:
        return None
    return TerminatorMatch(Terminator(found.group()), found.start(), found.end())


def rfind_terminator(text: str, terminators: TerminatorSet) -> TerminatorMatch | None:
    """Return the last active terminator in ``text``.

    The result agrees with a forward scan: a ``"\\n"`` preceded by ``"\\r"``
    is reported as CRLF when CRLF is active, and a ``"\\r"`` that is inactive
    on its own only counts when it begins an active CRLF.
    """
    if not terminators:
        return None

    has_crlf = Terminator.CRLF in terminators
    has_cr = Terminator.CARRIAGE_RETURN in terminators
    chars = terminators.initial_chars
    limit = len(text)

    while True:
        position = max(text.rfind(char, 0, limit) for char in chars)
        if position < 0:
            return None

        char = text[position]
        if char == "\n" and has_crlf and position > 0 and text[position - 1] == "\r":
            return TerminatorMatch(Terminator.CRLF, position - 1, position + 1)
        if char == "\r":
            if has_crlf and text.startswith("\r\n", position):
                return TerminatorMatch(Terminator.CRLF, position, position + 2)
            if not has_cr:
                # Only CRLF is active and this CR is not followed by LF
                limit = position
                continue
        return TerminatorMatch(Terminator.from_char(char), position, position + 1)
