#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/shared/signals.py

import os
import signal
from typing import Callable, Dict

from pridecat.core import config as c


def make_interrupt_handler(reset: Callable[[], None], exit_func: Callable[[int], None] = os._exit):
    """
    Build a signal handler that restores the terminal color and terminates
    immediately with the signal number as exit status. Buffered output and
    open sources are abandoned.
    """

    def _handler(signum, frame):
        reset()
        exit_func(int(signum))

    return _handler


def install_reset_handlers(reset: Callable[[], None]) -> Dict[int, object]:
    """Register the reset handler for every available interrupt signal.

    Returns the previous handlers so callers can restore them.
    """
    handler = make_interrupt_handler(reset)
    previous = {}
    for name in c.RESET_SIGNALS:
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        previous[signum] = signal.signal(signum, handler)
    return previous


def restore_handlers(previous: Dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)
