"""End-to-end tests for the nlsplit command line."""

import io
import json
import sys

import pytest
import yaml

from nlsplit.__main__ import main

SAMPLE = "first\r\nsecond\rthird\u2028fourth\n"


def _write_input(tmp_path, text: str = SAMPLE):
    path = tmp_path / "input.txt"
    path.write_bytes(text.encode("utf-8"))
    return path


def test_text_output_one_line_per_line(tmp_path):
    """Default run writes each line followed by LF."""
    input_file = _write_input(tmp_path)
    output_file = tmp_path / "out.txt"

    main([str(input_file), "-o", str(output_file)])

    assert output_file.read_bytes().decode("utf-8") == "first\nsecond\nthird\nfourth\n"


def test_text_output_keeps_terminators(tmp_path):
    """With --keep-terminators the output is byte-for-byte the input."""
    input_file = _write_input(tmp_path)
    output_file = tmp_path / "out.txt"

    main([str(input_file), "-o", str(output_file), "-k", "--chunk-size", "3"])

    assert output_file.read_bytes() == input_file.read_bytes()


def test_unix_preset_leaves_other_terminators_in_lines(tmp_path):
    """Only LF splits with the unix preset."""
    input_file = _write_input(tmp_path)
    output_file = tmp_path / "out.txt"

    main([str(input_file), "-o", str(output_file), "-t", "unix", "-k"])

    assert output_file.read_bytes() == SAMPLE.encode("utf-8")
    with open(output_file, encoding="utf-8", newline="") as f:
        assert f.read().count("\n") == 2  # the LF of CRLF and the final LF


def test_json_output(tmp_path):
    """JSON output lists offsets, content and terminator short names."""
    input_file = _write_input(tmp_path)
    output_file = tmp_path / "out.json"

    main([str(input_file), "-o", str(output_file), "-f", "json", "-t", "ascii"])

    data = json.loads(output_file.read_text(encoding="utf-8"))
    assert data["lines"] == [
        {"index": 0, "start": 0, "end": 7, "content": "first", "terminator": "CRLF"},
        {"index": 1, "start": 7, "end": 14, "content": "second", "terminator": "CR"},
        {
            "index": 2,
            "start": 14,
            "end": 27,
            "content": "third\u2028fourth",
            "terminator": "LF",
        },
    ]


def test_yaml_output(tmp_path):
    """YAML output holds the same records as JSON output."""
    input_file = _write_input(tmp_path, "a\nb")
    output_file = tmp_path / "out.yaml"

    main([str(input_file), "-o", str(output_file), "-f", "yaml"])

    data = yaml.safe_load(output_file.read_text(encoding="utf-8"))
    assert data == {
        "lines": [
            {"index": 0, "start": 0, "end": 2, "content": "a", "terminator": "LF"},
            {"index": 1, "start": 2, "end": 3, "content": "b", "terminator": None},
        ]
    }


def test_config_file(tmp_path):
    """Settings can come from a JSON config file."""
    input_file = _write_input(tmp_path, "a\r\nb\x0cc")
    output_file = tmp_path / "out.txt"
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps(
            {
                "input": str(input_file),
                "output": str(output_file),
                "terminators": ["Form Feed"],
            }
        )
    )

    main(["--config", str(config_file)])

    assert output_file.read_bytes() == b"a\r\nb\nc\n"


def test_list_terminators(capsys):
    """--list-terminators prints every catalog entry and exits."""
    main(["--list-terminators"])

    out = capsys.readouterr().out
    assert "LINE_FEED" in out
    assert "PARAGRAPH_SEPARATOR" in out
    assert len(out.splitlines()) == 8


def test_unknown_terminator_is_usage_error(tmp_path, capsys):
    """An unknown terminator name exits with status 2 and names it."""
    input_file = _write_input(tmp_path)

    with pytest.raises(SystemExit) as exc_info:
        main([str(input_file), "-t", "LF,Bogus"])

    assert exc_info.value.code == 2
    assert "Bogus" in capsys.readouterr().err


def test_missing_input_file_raises(tmp_path):
    """A missing input file propagates the OS error."""
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.txt"), "-o", str(tmp_path / "out.txt")])


def test_output_over_input_is_rejected(tmp_path, monkeypatch):
    """Naming the input file again as output exits without touching it."""
    monkeypatch.chdir(tmp_path)
    input_file = _write_input(tmp_path, "one\ntwo\n")

    with pytest.raises(SystemExit) as exc_info:
        main(["input.txt", "-o", "./input.txt"])

    assert exc_info.value.code == 2
    assert input_file.read_bytes() == b"one\ntwo\n"


def _run_with_stdio(monkeypatch, argv: list[str], data: bytes) -> bytes:
    """Run main() with ``data`` on stdin and return what it wrote to stdout."""
    stdout_bytes = io.BytesIO()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))
    monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(stdout_bytes, encoding="utf-8"))
    main(argv)
    return stdout_bytes.getvalue()


def test_stdin_to_stdout_keeps_crlf(monkeypatch):
    """CRLF passes from stdin to stdout untranslated when keeping terminators."""
    assert _run_with_stdio(monkeypatch, ["-k"], b"a\r\nb\rc") == b"a\r\nb\rc"


def test_dash_selects_stdin_and_stdout(monkeypatch):
    """'-' names stdin as input and stdout as output."""
    output = _run_with_stdio(monkeypatch, ["-", "-o", "-", "-t", "crlf"], b"a\r\nb\rc")
    assert output == b"a\nb\rc\n"
