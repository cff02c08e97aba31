"""Tests for debug logging from the splitter and the command-line run."""

import io

from loguru import logger

import nlsplit.__main__ as entry
from nlsplit.core import UNIX_TERMINATORS, split_chunks, split_lines
from nlsplit.utils.logging import setup_logger


def _capture_debug():
    log_capture = io.StringIO()
    handler_id = logger.add(log_capture, level="DEBUG", format="{message}")
    return log_capture, handler_id


def test_library_is_silent_by_default():
    """Log records from nlsplit are dropped until logging is set up."""
    log_capture, handler_id = _capture_debug()
    try:
        split_lines("a\nb")
        assert log_capture.getvalue() == ""
    finally:
        logger.remove(handler_id)


def test_scan_summary_logged_in_debug_mode():
    """A finished scan logs how many lines it produced."""
    setup_logger(verbose=True, debug=True)
    # Add after setup_logger so it doesn't get removed
    log_capture, handler_id = _capture_debug()
    try:
        split_lines("a\nb\nc", UNIX_TERMINATORS)
        log_text = log_capture.getvalue()
        assert "Line scan finished: 3 lines from 5 characters" in log_text, (
            f"Expected scan summary in debug output. Captured messages:\n{log_text}"
        )
    finally:
        logger.remove(handler_id)


def test_chunk_count_logged_in_debug_mode():
    """The chunked splitter logs how many chunks it consumed."""
    setup_logger(debug=True)
    log_capture, handler_id = _capture_debug()
    try:
        list(split_chunks(["a\n", "", "b"]))
        assert "Chunked split consumed 2 chunks" in log_capture.getvalue()
    finally:
        logger.remove(handler_id)


def test_verbose_run_reports_line_count(tmp_path, monkeypatch):
    """A verbose command-line run logs the configuration and the lines written."""
    input_file = tmp_path / "input.txt"
    input_file.write_bytes(b"one\ntwo\n")
    output_file = tmp_path / "out.txt"

    log_capture = io.StringIO()

    # main() calls setup_logger, which removes earlier sinks
    def setup_with_capture(verbose=False, debug=False):
        setup_logger(verbose=verbose, debug=debug)
        logger.add(log_capture, level="INFO", format="{message}")

    monkeypatch.setattr(entry, "setup_logger", setup_with_capture)
    entry.main([str(input_file), "-o", str(output_file), "-v"])

    log_text = log_capture.getvalue()
    assert "Splitting on: LF, CR, CRLF, VT, FF, NEL, LS, PS" in log_text
    assert f"Wrote 2 lines to {output_file}" in log_text


def test_keep_terminators_with_json_warns(tmp_path, monkeypatch):
    """Keeping terminators has no effect on records, so a warning is logged."""
    input_file = tmp_path / "input.txt"
    input_file.write_bytes(b"a\r\nb")
    output_file = tmp_path / "out.json"

    log_capture = io.StringIO()

    def setup_with_capture(verbose=False, debug=False):
        setup_logger(verbose=verbose, debug=debug)
        logger.add(log_capture, level="WARNING", format="{message}")

    monkeypatch.setattr(entry, "setup_logger", setup_with_capture)
    entry.main([str(input_file), "-o", str(output_file), "-f", "json", "-k"])

    assert "--keep-terminators is ignored for json output" in log_capture.getvalue()
    assert '"content": "a"' in output_file.read_text(encoding="utf-8")
