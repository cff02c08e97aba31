"""Splitting text that arrives in chunks."""

from collections.abc import Iterable, Iterator

from loguru import logger

from nlsplit.core.splitting.splitter import split
from nlsplit.core.terminators import (
    UNICODE_TERMINATORS,
    Terminator,
    TerminatorMatch,
    TerminatorSet,
    as_terminator_set,
    find_terminator,
)


def _may_continue_in_next_chunk(
    match: TerminatorMatch, buffer: str, terminators: TerminatorSet
) -> bool:
    """Check whether a match at the end of the buffer could grow with more text.

    A CR ending the buffer may be the first half of a CRLF whose LF starts the
    next chunk.
    """
    return (
        match.end == len(buffer)
        and match.terminator is Terminator.CARRIAGE_RETURN
        and Terminator.CRLF in terminators
    )


def split_chunks(
    chunks: Iterable[str],
    terminators: TerminatorSet | Iterable[Terminator] = UNICODE_TERMINATORS,
    keep_terminators: bool = False,
) -> Iterator[str]:
    """Lazily split text supplied as a sequence of chunks.

    Produces the same lines as ``split("".join(chunks), ...)`` without joining
    the chunks. Only each new chunk is searched; the unfinished line is kept
    as a list of pieces and joined once, when its terminator arrives or the
    input ends. A CR ending a chunk is held back while CRLF is active so that
    an LF starting the next chunk completes it.

    Args:
        chunks: Pieces of text in order, e.g. blocks read from a file
        terminators: Terminators treated as line boundaries
        keep_terminators: Whether to keep each line's terminator

    Yields:
        Lines of the concatenated text
    """
    terminators = as_terminator_set(terminators)
    hold_cr = Terminator.CRLF in terminators
    pieces: list[str] = []
    held = ""
    chunk_count = 0

    for chunk in chunks:
        if not chunk:
            continue
        chunk_count += 1
        buffer = held + chunk
        held = ""
        position = 0
        while True:
            match = find_terminator(buffer, terminators, position)
            if match is None or _may_continue_in_next_chunk(match, buffer, terminators):
                break
            pieces.append(buffer[position : match.end if keep_terminators else match.start])
            yield "".join(pieces)
            pieces = []
            position = match.end

        rest = buffer[position:]
        if hold_cr and rest.endswith("\r"):
            rest, held = rest[:-1], "\r"
        if rest:
            pieces.append(rest)

    logger.debug(f"Chunked split consumed {chunk_count} chunks")
    # The carried text holds no active terminator except possibly the held CR
    yield from split("".join(pieces) + held, terminators, keep_terminators)
