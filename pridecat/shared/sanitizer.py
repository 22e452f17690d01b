#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/shared/sanitizer.py

import re


def _sanitize_for_log(value) -> str:
    """
    Collapse whitespace and limit length so user input is safe to show
    in error messages.
    """
    if value is None:
        return ""
    s = re.sub(r"\s+", " ", str(value)).strip()
    if len(s) > 200:
        s = s[:197] + "..."
    return s


def normalize_flag_name(value: str) -> str:
    """
    Turn a "--flag-name" command line token into a catalogue identifier.
    Exactly one "--" prefix is removed; the rest must match an alias or a
    flag name exactly, case included.
    """
    if value is None:
        return ""
    s = str(value)
    return s[2:] if s.startswith("--") else s
