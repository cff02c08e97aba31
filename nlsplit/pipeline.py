"""Command-line split run: read input, split, write output."""

from loguru import logger
from tqdm import tqdm

from nlsplit.core import Config, split_chunks, split_spans
from nlsplit.core.terminators import format_terminator_set
from nlsplit.output import line_to_record, write_records, write_text
from nlsplit.utils.helpers import open_text_input, open_text_output, read_chunks


def _run_text(config: Config, source, sink) -> int:
    """Stream the input chunk by chunk and write plain text lines."""
    lines = split_chunks(
        read_chunks(source, config.chunk_size),
        config.terminators,
        config.keep_terminators,
    )
    if config.verbose:
        lines = tqdm(lines, desc="Splitting", unit="line")
    return write_text(lines, sink, config.keep_terminators)


def _run_structured(config: Config, source, sink) -> int:
    """Read the whole input and write one record per line as JSON or YAML."""
    text = source.read()
    logger.debug(f"Read {len(text)} characters")

    spans = split_spans(text, config.terminators)
    if config.verbose:
        spans = tqdm(spans, desc="Splitting", unit="line")

    records = [line_to_record(index, line) for index, line in enumerate(spans)]
    write_records(records, sink, config.format)
    return len(records)


def run_split(config: Config) -> int:
    """Split the configured input and write the result.

    Args:
        config: Validated configuration

    Returns:
        Number of lines written
    """
    if config.verbose:
        logger.info(f"Splitting on: {format_terminator_set(config.terminators)}")

    with open_text_input(config.input, config.encoding) as source:
        with open_text_output(config.output, config.encoding) as sink:
            if config.format == "text":
                count = _run_text(config, source, sink)
            else:
                count = _run_structured(config, source, sink)

    if config.verbose:
        logger.info(f"Wrote {count} lines to {config.output or 'stdout'}")
    return count
