"""nlsplit - Split text into lines on Unicode line terminators.

Recognizes LF, CR, CRLF (as one unit), VT, FF, NEL, LS and PS, and lets the
caller choose which of them count as line boundaries.
"""

from loguru import logger

from .core import (
    ASCII_TERMINATORS,
    EMPTY_TERMINATORS,
    UNICODE_TERMINATORS,
    UNIX_TERMINATORS,
    Config,
    InvalidTerminatorError,
    Line,
    LineCursor,
    NlsplitError,
    Terminator,
    TerminatorMatch,
    TerminatorSet,
    UnknownTerminatorError,
    find_terminator,
    load_config,
    match_at,
    rfind_terminator,
    split,
    split_chunks,
    split_lines,
    split_spans,
)

# Library log records stay silent until an application opts in
logger.disable("nlsplit")

__version__ = "0.1.0"
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
