#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/shared/truecolor.py

import os
import sys
from typing import Mapping, Optional

from pridecat.core import config as c


def detect_truecolor(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Guess 24-bit color support from COLORTERM."""
    if sys.platform == "win32":
        return True
    env = os.environ if environ is None else environ
    colorterm = env.get("COLORTERM", "")
    return any(marker in colorterm for marker in c.TRUECOLOR_MARKERS)


def detect_color_support(stream=None) -> bool:
    """Colors are only written to interactive terminals by default."""
    stream = sys.stdout if stream is None else stream
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False
