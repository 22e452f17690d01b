#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/state.py

from dataclasses import dataclass, field
from typing import Optional, Tuple

from pridecat.core.models import TerminalCapability
from .palette import PaletteQueue


@dataclass(frozen=True)
class RunConfig:
    """Everything option parsing decided; read-only while rendering."""

    terminal: TerminalCapability
    palette: PaletteQueue
    # None stands for standard input
    sources: Tuple[Optional[str], ...] = (None,)
    number: bool = False
    number_nonblank: bool = False
    show_ends: bool = False
    squeeze_blank: bool = False


@dataclass
class RenderState:
    """Counters shared by every source of one run."""

    lines: int = 0
    blank_lines: int = 0
    previous_blank: bool = False
