#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/renderer.py

from typing import Optional

from pridecat.core import config as c
from .state import RenderState, RunConfig


def line_number_prefix(config: RunConfig, state: RenderState, is_blank: bool) -> Optional[bytes]:
    """The numbering column for the line just counted in `state`, if any."""
    if config.number_nonblank:
        if is_blank:
            return None
        number = state.lines - state.blank_lines
    elif config.number:
        number = state.lines
    else:
        return None
    return f"{number:>{c.NUMBER_WIDTH}}{c.NUMBER_SEPARATOR}".encode("ascii")


def format_line(config: RunConfig, state: RenderState, text: bytes, terminated: bool) -> bytes:
    """Compose one output line: number, content, end marker, newline."""
    parts = []
    prefix = line_number_prefix(config, state, not text)
    if prefix is not None:
        parts.append(prefix)
    parts.append(text)
    if terminated:
        if config.show_ends:
            parts.append(c.END_MARKER.encode("ascii"))
        parts.append(b"\n")
    return b"".join(parts)
