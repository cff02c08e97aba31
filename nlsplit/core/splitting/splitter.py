"""Lazy and eager splitting entry points."""

from collections.abc import Iterable, Iterator

from nlsplit.core.splitting.cursor import LineCursor
from nlsplit.core.terminators import UNICODE_TERMINATORS, Terminator, TerminatorSet


def split_spans(
    text: str,
    terminators: TerminatorSet | Iterable[Terminator] = UNICODE_TERMINATORS,
) -> LineCursor:
    """Lazily split ``text`` into Line records.

    Args:
        text: Buffer to split
        terminators: Terminators treated as line boundaries

    Returns:
        A LineCursor yielding Line records in input order
    """
    return LineCursor(text, terminators)


def split(
    text: str,
    terminators: TerminatorSet | Iterable[Terminator] = UNICODE_TERMINATORS,
    keep_terminators: bool = False,
) -> Iterator[str]:
    """Lazily split ``text`` into lines.

    Lines are produced one at a time as the result is consumed. With
    ``keep_terminators`` each line ends with the terminator that ended it;
    the final line never has one if the text does not end with a terminator.

    Args:
        text: Buffer to split
        terminators: Terminators treated as line boundaries
        keep_terminators: Whether to keep each line's terminator

    Returns:
        Iterator over the lines of ``text``
    """
    return (line.text(keep_terminators) for line in LineCursor(text, terminators))


def split_lines(
    text: str,
    terminators: TerminatorSet | Iterable[Terminator] = UNICODE_TERMINATORS,
    keep_terminators: bool = False,
) -> list[str]:
    """Split ``text`` into a list of lines (eager form of split)."""
    return list(split(text, terminators, keep_terminators))
