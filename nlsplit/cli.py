"""Command-line interface."""

import argparse

from nlsplit.utils.constants import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="nlsplit",
        description="Split text into lines on Unicode line terminators",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split a file on every Unicode terminator, one line per output line
  %(prog)s notes.txt

  # Only LF counts; CR, VT, FF, NEL, LS and PS stay inside lines
  %(prog)s -t unix notes.txt

  # Pick terminators by name and keep them on each line
  %(prog)s -t "LF,CRLF,Line Separator" -k notes.txt

  # Line offsets and terminators as JSON
  %(prog)s -f json notes.txt -o lines.json

  # Using JSON config (CLI args override JSON values)
  %(prog)s --config config.json

Presets: ascii (LF, CR, CRLF), unicode (all), unix (LF), none.
Use --list-terminators to see every terminator name.

Example config.json:
{
  "terminators": ["LF", "CRLF"],
  "keep_terminators": false,
  "format": "yaml",
  "output": "./lines.yml",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input / output
    parser.add_argument(
        "input",
        nargs="?",
        type=str,
        help=f"Input file ('{Constants.STDIO_PATH}' or omitted for stdin)",
    )
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "-f",
        "--format",
        choices=Constants.OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        help=f"Text encoding for input and output (default: {Constants.DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        help=f"Characters read per chunk in text mode (default: {Constants.DEFAULT_CHUNK_SIZE})",
    )

    # Splitting
    parser.add_argument(
        "-t",
        "--terminators",
        type=str,
        help=f"Preset or comma-separated terminator names (default: {Constants.DEFAULT_PRESET})",
    )
    parser.add_argument(
        "-k",
        "--keep-terminators",
        action="store_true",
        default=None,
        help="Keep each line's terminator",
    )
    parser.add_argument(
        "--list-terminators",
        action="store_true",
        help="List recognized terminators and exit",
    )

    # Flags
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Debug logging (implies --verbose)"
    )

    return parser
