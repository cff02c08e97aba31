"""Utility functions for nlsplit."""

from nlsplit.utils.constants import Constants
from nlsplit.utils.helpers import (
    expand_file_path,
    open_text_input,
    open_text_output,
    read_chunks,
)
from nlsplit.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "open_text_input",
    "open_text_output",
    "read_chunks",
    "setup_logger",
]
