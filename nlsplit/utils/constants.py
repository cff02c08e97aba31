"""Constants used throughout the nlsplit codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Input reading
    DEFAULT_CHUNK_SIZE = 64 * 1024
    """Number of characters read from the input per chunk when streaming."""

    DEFAULT_ENCODING = "utf-8"
    """Text encoding used for input and output files."""

    STDIO_PATH = "-"
    """Path that stands for stdin (input) or stdout (output)."""

    # Terminator selection
    DEFAULT_PRESET = "unicode"
    """Preset used when no terminators are configured."""

    NAME_SEPARATOR = ","
    """Separator between terminator names in a single CLI/config string."""

    # Output formats
    OUTPUT_FORMATS = ("text", "json", "yaml")
    """Supported output formats."""

    TEXT_LINE_ENDING = "\n"
    """Line ending written after each stripped line in text output."""
