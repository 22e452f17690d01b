#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/main.py

import argparse
import os
import sys
from typing import List, Optional

from pridecat import __version__
from pridecat.core import config as c
from pridecat.constants.flags import DEFAULT_CATALOGUE
from pridecat.logic.cat import engine
from pridecat.logic.cat.resolver import (
    extract_flag_tokens,
    resolve_run_config,
    split_end_of_options,
)
from pridecat.logic.cat.writer import ColorWriter
from pridecat.logic.help.renderer import render_flag_list, render_help
from pridecat.shared.logger import PridecatArgumentParser
from pridecat.shared.signals import install_reset_handlers, restore_handlers
from pridecat.shared.truecolor import detect_color_support


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for pridecat."""
    parser = PridecatArgumentParser(
        prog="pridecat",
        usage="pridecat [OPTIONS] [--FLAG ...] [FILE ...]",
        description="concatenate files to standard output, one flag color per line",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="show this help message with the flag catalogue and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"pridecat {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "--list-flags",
        nargs="?",
        const="text",
        default=None,
        choices=c.LIST_FORMATS,
        help="list available flags and exit",
    )

    # Color Output Group
    color_group = parser.add_argument_group("color output")
    color_group.add_argument(
        "-b",
        "--background",
        action="store_true",
        help="change the background color instead of the text color",
    )
    color_group.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="force color even when stdout is not a tty",
    )
    color_group.add_argument(
        "-t",
        "--truecolor",
        dest="truecolor",
        action="store_const",
        const=True,
        default=None,
        help="force truecolor output (even if the terminal doesn't seem to support it)",
    )
    color_group.add_argument(
        "-T",
        "--no-truecolor",
        dest="truecolor",
        action="store_const",
        const=False,
        help="force disable truecolor output (even if the terminal does seem to support it)",
    )
    color_group.add_argument(
        "-l",
        "--lighten",
        dest="adjust",
        action="store_const",
        const=c.ADJUST_LIGHTEN,
        default=c.ADJUST_NONE,
        help="lighten colors slightly for improved readability on dark backgrounds",
    )
    color_group.add_argument(
        "-d",
        "--darken",
        dest="adjust",
        action="store_const",
        const=c.ADJUST_DARKEN,
        help="darken colors slightly for improved readability on light backgrounds",
    )

    # Line Formatting Group
    line_group = parser.add_argument_group("line formatting")
    line_group.add_argument(
        "-n",
        "--number",
        action="store_true",
        help="number all output lines",
    )
    line_group.add_argument(
        "-N",
        "--number-nonblank",
        action="store_true",
        help="number nonempty output lines, overrides -n",
    )
    line_group.add_argument(
        "-E",
        "--show-ends",
        action="store_true",
        help="display $ at end of each line",
    )
    line_group.add_argument(
        "-s",
        "--squeeze-blank",
        action="store_true",
        help="suppress repeated empty output lines",
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="files to concatenate; '-' or none reads standard input",
    )
    return parser


def _quiet_broken_pipe() -> None:
    # The reader went away; point stdout at devnull so the final flush is silent
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for pridecat CLI"""
    argv = sys.argv[1:] if argv is None else list(argv)
    catalogue = DEFAULT_CATALOGUE

    parser = get_parser()
    options, literal_sources = split_end_of_options(argv)
    flag_tokens, rest = extract_flag_tokens(options, parser)
    args = parser.parse_intermixed_args(rest)

    if args.list_flags:
        print(render_flag_list(args.list_flags, catalogue))
        sys.exit(c.EXIT_SUCCESS)

    config = resolve_run_config(args, flag_tokens, literal_sources, catalogue)

    if args.help:
        print(render_help(parser, catalogue, config.terminal))
        sys.exit(c.EXIT_SUCCESS)

    writer = ColorWriter(
        sys.stdout.buffer,
        config.terminal,
        line_buffered=detect_color_support(sys.stdout),
    )
    previous = install_reset_handlers(writer.reset_now)
    try:
        engine.run(config, writer)
    except BrokenPipeError:
        _quiet_broken_pipe()
        sys.exit(c.EXIT_FAILURE)
    finally:
        restore_handlers(previous)


if __name__ == "__main__":
    main()
