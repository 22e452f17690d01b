# File: tests/test_logger.py

"""Message routing of the tagged logger."""

import sys

import pytest

from pridecat.core import config as c
from pridecat.shared.logger import PridecatArgumentParser, log


def test_info_defaults_to_stdout(capsys):
    log("info", "hello")
    captured = capsys.readouterr()
    assert "[info]" in captured.out
    assert captured.err == ""


def test_error_goes_to_stderr(capsys):
    log("error", "boom")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "boom" in captured.err


def test_explicit_stream_overrides_routing(capsys):
    log("info", "hint", stream=sys.stderr)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[info]" in captured.err and "hint" in captured.err


def test_parser_error_keeps_stdout_clean(capsys):
    parser = PridecatArgumentParser(prog="pridecat")
    with pytest.raises(SystemExit) as exc:
        parser.error("bad option")
    assert exc.value.code == c.EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "bad option" in captured.err
    assert "pridecat --help" in captured.err
