"""Output writers for split results."""

import json
from collections.abc import Iterable
from typing import TextIO

import yaml

from nlsplit.core import Line
from nlsplit.utils.constants import Constants


def line_to_record(index: int, line: Line) -> dict:
    """Convert a Line to a plain dict for JSON or YAML output."""
    return {
        "index": index,
        "start": line.start,
        "end": line.terminator_end,
        "content": line.content,
        "terminator": line.terminator.short_name if line.terminator else None,
    }


def write_text(lines: Iterable[str], stream: TextIO, keep_terminators: bool) -> int:
    """Write lines as plain text.

    Lines that keep their terminators are written verbatim; stripped lines are
    each followed by a newline.

    Returns:
        Number of lines written
    """
    count = 0
    ending = "" if keep_terminators else Constants.TEXT_LINE_ENDING
    for line in lines:
        stream.write(line + ending)
        count += 1
    return count


def write_json(records: list[dict], stream: TextIO) -> None:
    json.dump({"lines": records}, stream, ensure_ascii=False, indent=2)
    stream.write("\n")


def write_yaml(records: list[dict], stream: TextIO) -> None:
    yaml.safe_dump(
        {"lines": records},
        stream,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
        width=float("inf"),
    )


def write_records(records: list[dict], stream: TextIO, output_format: str) -> None:
    """Write line records in a structured format ('json' or 'yaml')."""
    if output_format == "json":
        write_json(records, stream)
    elif output_format == "yaml":
        write_yaml(records, stream)
    else:
        raise ValueError(f"Invalid structured output format: {output_format}")
