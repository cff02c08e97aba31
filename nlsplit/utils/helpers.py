"""Shared utility functions for nlsplit."""

import io
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_chunks(stream: TextIO, chunk_size: int) -> Iterator[str]:
    """Read a text stream in chunks of at most ``chunk_size`` characters.

    The stream must be opened with ``newline=""`` for terminators to reach
    the splitter untranslated.
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


@contextmanager
def open_text_input(path: str | None, encoding: str) -> Iterator[TextIO]:
    """Open ``path`` (or stdin when None) for reading without newline translation."""
    if path is None:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding, newline="")
        try:
            yield stream
        finally:
            stream.detach()
    else:
        with open(path, encoding=encoding, newline="") as f:
            yield f


@contextmanager
def open_text_output(path: str | None, encoding: str) -> Iterator[TextIO]:
    """Open ``path`` (or stdout when None) for writing without newline translation."""
    if path is None:
        sys.stdout.flush()
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding=encoding, newline="")
        try:
            yield stream
        finally:
            stream.detach()
    else:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding=encoding, newline="") as f:
            yield f
