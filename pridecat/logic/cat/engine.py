#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/engine.py

import sys
from typing import BinaryIO, Iterator, NoReturn, Optional

from pridecat.core import config as c
from pridecat.shared.logger import log
from .renderer import format_line
from .state import RenderState, RunConfig
from .writer import ColorWriter


def _fail(writer: ColorWriter, message: str) -> NoReturn:
    # Put the terminal back before the message so it is not printed in color
    writer.emit_reset()
    writer.flush()
    log("error", message)
    sys.exit(c.EXIT_FAILURE)


def _read_lines(stream: BinaryIO, name: str, writer: ColorWriter) -> Iterator[bytes]:
    while True:
        try:
            raw = stream.readline()
        except OSError as e:
            _fail(writer, f"could not read {name}: {e.strerror or e}")
        if not raw:
            return
        yield raw


def render_stream(
    stream: BinaryIO,
    name: str,
    config: RunConfig,
    state: RenderState,
    writer: ColorWriter,
) -> None:
    """Copy one source to the writer, coloring and formatting every line."""
    for raw in _read_lines(stream, name, writer):
        terminated = raw.endswith(b"\n")
        text = raw[:-1] if terminated else raw
        is_blank = not text

        if config.squeeze_blank and is_blank and state.previous_blank:
            continue

        state.lines += 1
        if is_blank:
            state.blank_lines += 1
        state.previous_blank = is_blank

        writer.write(format_line(config, state, text, terminated))
        # Prime the color of the next line
        writer.emit_color(config.palette.color_at(state.lines))
        writer.end_line()


def run(config: RunConfig, writer: ColorWriter, stdin: Optional[BinaryIO] = None) -> RenderState:
    """Main execution engine: concatenate every source as one colored stream."""
    if stdin is None:
        stdin = sys.stdin.buffer

    state = RenderState()
    writer.emit_color(config.palette.color_at(0))

    try:
        for source in config.sources:
            if source is None:
                render_stream(stdin, "standard input", config, state, writer)
                continue

            try:
                fh = open(source, "rb")
            except OSError as e:
                _fail(writer, f"could not open '{source}' for reading: {e.strerror or e}")

            with fh:
                render_stream(fh, f"'{source}'", config, state, writer)
    finally:
        writer.emit_reset()
        writer.flush()

    return state
