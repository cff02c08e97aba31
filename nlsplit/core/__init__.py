"""Core domain logic for nlsplit."""

from .config import Config, load_config
from .errors import InvalidTerminatorError, NlsplitError, UnknownTerminatorError
from .splitting import Line, LineCursor, split, split_chunks, split_lines, split_spans
from .terminators import (
    ASCII_TERMINATORS,
    EMPTY_TERMINATORS,
    UNICODE_TERMINATORS,
    UNIX_TERMINATORS,
    Terminator,
    TerminatorMatch,
    TerminatorSet,
    find_terminator,
    match_at,
    rfind_terminator,
)

__all__ = [
    "ASCII_TERMINATORS",
    "EMPTY_TERMINATORS",
    "UNICODE_TERMINATORS",
    "UNIX_TERMINATORS",
    "Config",
    "InvalidTerminatorError",
    "Line",
    "LineCursor",
    "NlsplitError",
    "Terminator",
    "TerminatorMatch",
    "TerminatorSet",
    "UnknownTerminatorError",
    "find_terminator",
    "load_config",
    "match_at",
    "rfind_terminator",
    "split",
    "split_chunks",
    "split_lines",
    "split_spans",
]
