"""Line splitting over text buffers and chunk streams."""

from nlsplit.core.splitting.cursor import LineCursor
from nlsplit.core.splitting.splitter import split, split_lines, split_spans
from nlsplit.core.splitting.streaming import split_chunks
from nlsplit.core.splitting.types import Line

__all__ = [
    "Line",
    "LineCursor",
    "split",
    "split_chunks",
    "split_lines",
    "split_spans",
]
