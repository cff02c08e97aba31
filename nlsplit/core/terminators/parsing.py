"""Terminator name parsing."""

import re

from nlsplit.core.errors import UnknownTerminatorError
from nlsplit.core.terminators.types import Terminator

_NAME_NOISE = re.compile(r"[\s_+\-]+")


def normalize_terminator_name(name: str) -> str:
    """Normalize a terminator name for lookup.

    Case, underscores, hyphens, plus signs and runs of whitespace are ignored:
    'Carriage Return + Line Feed', 'carriage-return-line-feed' and
    'CARRIAGE_RETURN_LINE_FEED' all normalize to 'carriage return line feed'.

    Args:
        name: The name as written by the caller

    Returns:
        Normalized lookup key
    """
    return _NAME_NOISE.sub(" ", name).strip().lower()


def _build_name_index() -> dict[str, Terminator]:
    index: dict[str, Terminator] = {}
    for terminator in Terminator:
        for alias in (terminator.name, terminator.display_name, terminator.short_name):
            index[normalize_terminator_name(alias)] = terminator
    return index


_NAME_INDEX = _build_name_index()


def parse_terminator_name(name: str) -> Terminator:
    """Resolve a terminator by member name, display name or short name.

    Args:
        name: e.g. 'LINE_FEED', 'Line Feed' or 'LF'

    Returns:
        The named Terminator

    Raises:
        UnknownTerminatorError: If no catalog entry has this name
    """
    terminator = _NAME_INDEX.get(normalize_terminator_name(name))
    if terminator is None:
        raise UnknownTerminatorError(name)
    return terminator
