"""Terminator formatting functions."""

from nlsplit.core.terminators.sets import TerminatorSet
from nlsplit.core.terminators.types import Terminator


def format_terminator_escape(terminator: Terminator) -> str:
    """Format a terminator's sequence as escapes (e.g., '\\r\\n', '\\u2028').

    Args:
        terminator: The terminator to format

    Returns:
        Escaped sequence, safe to print on one line
    """
    return "".join(_escape_char(char) for char in terminator.sequence)


def _escape_char(char: str) -> str:
    code = ord(char)
    if char == "\n":
        return "\\n"
    if char == "\r":
        return "\\r"
    if code <= 0xFF:
        return f"\\x{code:02x}"
    return f"\\u{code:04x}"


def format_terminator_display(terminator: Terminator) -> str:
    """Format a terminator for listings (e.g., 'LF      Line Feed  \\n').

    Args:
        terminator: The terminator to format

    Returns:
        One aligned line: short name, display name, escaped sequence, level
    """
    level = "paragraph" if terminator.is_paragraph else "line"
    return (
        f"{terminator.short_name:<5} {terminator.display_name:<28} "
        f"{format_terminator_escape(terminator):<8} {level}"
    )


def format_terminator_set(terminators: TerminatorSet) -> str:
    """Format a set as a comma-separated list of short names, '(none)' if empty."""
    if not terminators:
        return "(none)"
    return ", ".join(terminator.short_name for terminator in terminators)
