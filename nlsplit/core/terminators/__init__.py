"""Line terminator catalog, selection and matching."""

from nlsplit.core.terminators.formatting import (
    format_terminator_display,
    format_terminator_escape,
    format_terminator_set,
)
from nlsplit.core.terminators.matching import (
    TerminatorMatch,
    find_terminator,
    match_at,
    rfind_terminator,
)
from nlsplit.core.terminators.parsing import normalize_terminator_name, parse_terminator_name
from nlsplit.core.terminators.sets import (
    ASCII_TERMINATORS,
    EMPTY_TERMINATORS,
    PRESETS,
    UNICODE_TERMINATORS,
    UNIX_TERMINATORS,
    TerminatorSet,
    as_terminator_set,
)
from nlsplit.core.terminators.types import Terminator

__all__ = [
    "ASCII_TERMINATORS",
    "EMPTY_TERMINATORS",
    "PRESETS",
    "UNICODE_TERMINATORS",
    "UNIX_TERMINATORS",
    "Terminator",
    "TerminatorMatch",
    "TerminatorSet",
    "as_terminator_set",
    "find_terminator",
    "format_terminator_display",
    "format_terminator_escape",
    "format_terminator_set",
    "match_at",
    "normalize_terminator_name",
    "parse_terminator_name",
    "rfind_terminator",
]
