#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/resolver.py

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from pridecat.core import config as c
from pridecat.core.models import FlagCatalogue, TerminalCapability
from pridecat.shared.logger import log
from pridecat.shared.sanitizer import _sanitize_for_log, normalize_flag_name
from pridecat.shared.truecolor import detect_color_support, detect_truecolor
from .palette import PaletteQueue
from .state import RunConfig


def split_end_of_options(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate the option part of argv from the arguments after '--'."""
    argv = list(argv)
    if c.END_OF_OPTIONS in argv:
        idx = argv.index(c.END_OF_OPTIONS)
        return argv[:idx], argv[idx + 1:]
    return argv, []


def _is_flag_token(token: str, parser: argparse.ArgumentParser) -> bool:
    if not token.startswith("--") or token == c.END_OF_OPTIONS:
        return False
    option = token.split("=", 1)[0]
    return option not in parser._option_string_actions


def extract_flag_tokens(
    tokens: Sequence[str], parser: argparse.ArgumentParser
) -> Tuple[List[str], List[str]]:
    """
    Pull '--<flag>' tokens out of the option part of argv.

    Anything starting with '--' that the parser does not know as an option
    is a flag selection. The remaining tokens are returned untouched, in
    order, for argparse.
    """
    flags = []
    rest = []
    for token in tokens:
        if _is_flag_token(token, parser):
            flags.append(token)
        else:
            rest.append(token)
    return flags, rest


def resolve_palette_or_exit(tokens: Sequence[str], catalogue: FlagCatalogue) -> PaletteQueue:
    palette = PaletteQueue()
    for token in tokens:
        flag = catalogue.resolve(normalize_flag_name(token))
        if flag is None:
            log("error", f"unknown flag '{_sanitize_for_log(token)}'")
            log("info", "use 'pridecat --list-flags' to see the available flags", stream=sys.stderr)
            sys.exit(c.EXIT_FAILURE)
        palette.append(flag)
    palette.ensure_default(catalogue)
    return palette


def resolve_terminal(args: argparse.Namespace, stdout=None) -> TerminalCapability:
    """Detected terminal capabilities with the command line overrides applied."""
    color_enabled = getattr(args, "force", False) or detect_color_support(stdout)

    truecolor = getattr(args, "truecolor", None)
    if truecolor is None:
        truecolor = detect_truecolor()

    return TerminalCapability(
        color_enabled=color_enabled,
        truecolor=truecolor,
        background=getattr(args, "background", False),
        adjust=getattr(args, "adjust", None) or c.ADJUST_NONE,
    )


def resolve_sources(
    positional: Sequence[str], literal: Sequence[str] = ()
) -> Tuple[Optional[str], ...]:
    """'-' before '--' means stdin; after '--' every name is a path."""
    sources = [None if name == c.STDIN_NAME else name for name in positional]
    sources.extend(literal)
    if not sources:
        return (None,)
    return tuple(sources)


def resolve_run_config(
    args: argparse.Namespace,
    flag_tokens: Sequence[str],
    literal_sources: Sequence[str],
    catalogue: FlagCatalogue,
    stdout=None,
) -> RunConfig:
    number_nonblank = getattr(args, "number_nonblank", False)
    return RunConfig(
        terminal=resolve_terminal(args, stdout),
        palette=resolve_palette_or_exit(flag_tokens, catalogue),
        sources=resolve_sources(getattr(args, "files", []) or [], literal_sources),
        number=getattr(args, "number", False) or number_nonblank,
        number_nonblank=number_nonblank,
        show_ends=getattr(args, "show_ends", False),
        squeeze_blank=getattr(args, "squeeze_blank", False),
    )
