#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/shared/logger.py

import sys
import argparse
from typing import Optional, TextIO

from pridecat.core import config as c


def log(level: str, message: str, stream: Optional[TextIO] = None) -> None:
    """
    Print a tagged, color-coded message. Info goes to stdout unless a
    stream is given; hints attached to fatal errors pass sys.stderr so
    nothing lands in the data stream.
    """
    level = str(level).lower()
    if stream is None:
        stream = sys.stdout if level == "info" else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class PridecatArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method to use our color-coded logger,
        then exits with status 1 like cat does for bad options.
        """
        log('error', message)
        log('info', f"use '{self.prog} --help' for more information", stream=sys.stderr)
        sys.exit(c.EXIT_FAILURE)
