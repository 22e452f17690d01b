#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/help/renderer.py

import argparse
import dataclasses
import json

from pridecat.core import config as c
from pridecat.core import conversions as conv
from pridecat.core.models import Flag, FlagCatalogue, TerminalCapability
from pridecat.logic.cat.writer import color_escape, reset_escape

EXAMPLES = (
    ("pridecat f - g", "Output f's contents, then stdin, then g's contents."),
    ("pridecat", "Copy stdin to stdout, but with rainbows."),
    ("pridecat --trans --bi", "Alternate between trans and bisexual pride flags."),
    ("pridecat -n -s notes.txt", "Number the lines and squeeze runs of empty lines."),
)


def render_swatch(flag: Flag, terminal: TerminalCapability) -> str:
    """One background-colored cell per flag color; empty when colors are off."""
    if not terminal.color_enabled:
        return ""
    swatch_term = dataclasses.replace(terminal, background=True)
    cells = "".join(f"{color_escape(color, swatch_term)} " for color in flag.colors)
    return f"{cells}{reset_escape(swatch_term)}"


def render_flag_entry(name: str, flag: Flag, catalogue: FlagCatalogue, terminal: TerminalCapability) -> str:
    names = ",".join(f"--{n}" for n in [name] + catalogue.aliases_for(name))
    swatch = render_swatch(flag, terminal)
    head = f"  {names} {swatch}" if swatch else f"  {names}"
    return f"{head}\n      {flag.description}\n"


def render_help(parser: argparse.ArgumentParser, catalogue: FlagCatalogue, terminal: TerminalCapability) -> str:
    """Usage text: the flag catalogue with swatches, the options, then examples."""
    out = [
        f"{c.BOLD_WHITE}pridecat!{c.RESET}" if terminal.color_enabled else "pridecat!",
        "It's like cat but more colorful :)",
        "",
        "Currently available flags:",
    ]
    for name, flag in catalogue:
        out.append(render_flag_entry(name, flag, catalogue, terminal))

    out.append(parser.format_help())

    out.append("examples:")
    width = max(len(cmd) for cmd, _ in EXAMPLES) + 2
    for cmd, text in EXAMPLES:
        out.append(f"  {cmd:<{width}}{text}")
    return "\n".join(out)


def render_flag_list(fmt: str, catalogue: FlagCatalogue) -> str:
    if fmt == "text":
        lines = []
        for name, _ in catalogue:
            aliases = catalogue.aliases_for(name)
            lines.append(f"{name} ({', '.join(aliases)})" if aliases else name)
        return "\n".join(lines)

    data = {}
    for name, flag in catalogue:
        data[name] = {
            "colors": [f"#{conv.rgb_to_hex(*color)}" for color in flag.colors],
            "description": flag.description,
            "aliases": catalogue.aliases_for(name),
        }
    if fmt == "prettyjson":
        return json.dumps(data, indent=4)
    return json.dumps(data)
