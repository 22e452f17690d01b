#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/writer.py

from typing import BinaryIO

from pridecat.core import config as c
from pridecat.core import conversions as conv
from pridecat.core.models import Color, TerminalCapability


def color_escape(color: Color, terminal: TerminalCapability) -> str:
    """Escape sequence selecting `color` for text or background, or '' when colors are off."""
    if not terminal.color_enabled:
        return ""

    r, g, b = conv.adjust_for_readability(color, terminal.adjust)

    if terminal.truecolor:
        template = c.BG_TRUECOLOR if terminal.background else c.FG_TRUECOLOR
        return template.format(r=r, g=g, b=b)

    template = c.BG_INDEXED if terminal.background else c.FG_INDEXED
    return template.format(index=conv.rgb_to_cube_index(Color(r, g, b)))


def reset_escape(terminal: TerminalCapability) -> str:
    if not terminal.color_enabled:
        return ""
    return c.BG_RESET if terminal.background else c.FG_RESET


class ColorWriter:
    """
    Ordered byte sink for line content and color escapes.

    Escapes and content share one binary stream, so they reach the terminal
    exactly in the order they were emitted.
    """

    def __init__(self, stream: BinaryIO, terminal: TerminalCapability, line_buffered: bool = False):
        self.stream = stream
        self.terminal = terminal
        self.line_buffered = line_buffered
        self._color_active = False

    def write(self, data: bytes) -> None:
        self.stream.write(data)

    def emit_color(self, color: Color) -> None:
        seq = color_escape(color, self.terminal)
        if seq:
            self.stream.write(seq.encode("ascii"))
            self._color_active = True

    def emit_reset(self) -> None:
        """Restore the default color; a second reset in a row writes nothing."""
        if not self._color_active:
            return
        self._color_active = False
        self.stream.write(reset_escape(self.terminal).encode("ascii"))

    def end_line(self) -> None:
        if self.line_buffered:
            self.stream.flush()

    def flush(self) -> None:
        self.stream.flush()

    def reset_now(self) -> None:
        """
        Reset from an interrupt handler. The handler may run in the middle
        of a write, so failures here are ignored: the process is about to
        exit anyway.
        """
        try:
            self.emit_reset()
            self.stream.flush()
        except (OSError, ValueError, RuntimeError):
            pass
