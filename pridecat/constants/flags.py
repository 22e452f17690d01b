#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/constants/flags.py

from pridecat.core.models import Color, Flag, FlagCatalogue


def _flag(colors, description: str) -> Flag:
    return Flag(tuple(Color.from_int(rgb) for rgb in colors), description)


FLAGS = {
    "lgbt": _flag(
        (0xE40303, 0xFF8C00, 0xFFED00, 0x008026, 0x004DFF, 0x750787),
        "Classic 6-color rainbow flag popular since 1979",
    ),
    "lgbt-1978": _flag(
        (0xFF69B4, 0xFF0000, 0xFF8E00, 0xFFFF00, 0x008E00, 0x00C0C0, 0x400098, 0x8E008E),
        "Original 8-color rainbow flag designed by Gilbert Baker in 1978",
    ),
    "lgbtpoc": _flag(
        (0x000000, 0x784F17, 0xE40303, 0xFF8C00, 0xFFED00, 0x008026, 0x004DFF, 0x750787),
        "POC-inclusive rainbow flag designed by Philadelphia City Council in 2017",
    ),
    "transgender": _flag(
        (0x5BCEFA, 0xF5A9B8, 0xFFFFFF, 0xF5A9B8, 0x5BCEFA),
        "Transgender pride flag designed by Monica Helms in 1999",
    ),
    "bisexual": _flag(
        (0xD60270, 0xD60270, 0x9B4F96, 0x0038A8, 0x0038A8),
        "Bisexual pride flag designed by Michael Page in 1998",
    ),
    "asexual": _flag(
        (0x000000, 0xA3A3A3, 0xFFFFFF, 0x800080),
        "Asexual pride flag designed by AVEN user 'standup' in 2010",
    ),
    "aromantic": _flag(
        (0x3DA642, 0xA8D379, 0xFFFFFF, 0xA9A9A9, 0x000000),
        "Aromantic pride flag designed by Tumblr user 'cameronwhimsy' in 2014",
    ),
    "pansexual": _flag(
        (0xFF218C, 0xFF218C, 0xFFD800, 0xFFD800, 0x21B1FF, 0x21B1FF),
        "Pansexual pride flag designed by Evie Varney in 2010",
    ),
    "nonbinary": _flag(
        (0xFFF430, 0xFFFFFF, 0x9C59D1, 0x000000),
        "Non-binary pride flag designed by Kye Rowan in 2014",
    ),
    "lipstick-lesbian": _flag(
        (0xA40061, 0xB75592, 0xD063A6, 0xEDEDEB, 0xE4ACCF, 0xC54E54, 0x8A1E04),
        "Lipstick lesbian pride flag designed by Natalie McCray in 2010",
    ),
    # 0xB55590 instead of 0xB55690 so both pinks stay distinct in 256 colors
    "new-lesbian": _flag(
        (0xD52D00, 0xEF7627, 0xFF9A56, 0xFFFFFF, 0xD162A4, 0xB55590, 0xA30262),
        "New lesbian pride flag designed by Emily Gwen in 2018",
    ),
    "community-lesbian": _flag(
        (0xD52D00, 0xFF9A56, 0xFFFFFF, 0xD362A4, 0xA30262),
        "5-color 'Community' variant designed by Tumblr user 'taqwomen' in 2018",
    ),
    "genderqueer": _flag(
        (0xB57EDC, 0xB57EDC, 0xFFFFFF, 0xFFFFFF, 0x4A8123, 0x4A8123),
        "Genderqueer pride flag designed by Marilyn Roxie in 2011",
    ),
    "mlm": _flag(
        (0x078D70, 0x26CEAA, 0x98E8C1, 0xFFFFFF, 0x7BADE2, 0x5049CC, 0x3D1A78),
        "mlm pride flag",
    ),
}

FLAG_ALIASES = {
    "trans": "transgender",
    "bi": "bisexual",
    "ace": "asexual",
    "aro": "aromantic",
    "pan": "pansexual",
    "nb": "nonbinary",
    "enby": "nonbinary",
    "pink-lesbian": "lipstick-lesbian",
    "lesbian": "community-lesbian",
    "les": "community-lesbian",
    "gay": "mlm",
}

DEFAULT_CATALOGUE = FlagCatalogue(FLAGS, FLAG_ALIASES)
