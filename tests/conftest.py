# File: tests/conftest.py

"""Shared fixtures for the pridecat test suite.

Most engine tests render into an in-memory ``io.BytesIO`` through a
`ColorWriter`; CLI tests drive ``pridecat.main.main`` in-process and read
the captured bytes with ``capsysbinary``.
"""

import io
import sys

import pytest

from pridecat.constants.flags import DEFAULT_CATALOGUE
from pridecat.core.models import Color, Flag, TerminalCapability
from pridecat.logic.cat import engine
from pridecat.logic.cat.palette import PaletteQueue
from pridecat.logic.cat.state import RunConfig
from pridecat.logic.cat.writer import ColorWriter
from pridecat.main import main

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def fg(color: Color) -> bytes:
    return f"\033[38;2;{color.r};{color.g};{color.b}m".encode("ascii")


FG_RESET = b"\033[39m"
BG_RESET = b"\033[49m"


@pytest.fixture
def catalogue():
    return DEFAULT_CATALOGUE


@pytest.fixture
def rgb_palette():
    palette = PaletteQueue()
    palette.append(Flag((RED, GREEN, BLUE), "test flag"))
    return palette


@pytest.fixture
def truecolor_term():
    return TerminalCapability(color_enabled=True, truecolor=True)


@pytest.fixture
def plain_term():
    return TerminalCapability(color_enabled=False)


@pytest.fixture
def render():
    """Run the engine over `sources` and return everything it wrote."""

    def _render(terminal, palette, sources=(None,), stdin=b"", **options):
        out = io.BytesIO()
        config = RunConfig(terminal=terminal, palette=palette, sources=tuple(sources), **options)
        writer = ColorWriter(out, terminal)
        engine.run(config, writer, stdin=io.BytesIO(stdin))
        return out.getvalue()

    return _render


@pytest.fixture
def run_cli(monkeypatch, capsysbinary):
    """Invoke the CLI with `argv` and bytes on stdin; returns (status, stdout, stderr)."""

    def _run(argv, stdin=b""):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(stdin)))
        status = 0
        try:
            main(list(argv))
        except SystemExit as e:
            status = e.code if e.code is not None else 0
        out, err = capsysbinary.readouterr()
        return status, out, err

    return _run
