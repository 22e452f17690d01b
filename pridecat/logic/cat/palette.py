#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/logic/cat/palette.py

from typing import Iterator, List

from pridecat.core import config as c
from pridecat.core.models import Color, Flag, FlagCatalogue


class PaletteQueue:
    """
    Colors of the selected flags, concatenated in selection order and read
    back cyclically, one entry per output line.
    """

    def __init__(self) -> None:
        self._colors: List[Color] = []

    def append(self, flag: Flag) -> None:
        self._colors.extend(flag.colors)

    def ensure_default(self, catalogue: FlagCatalogue) -> None:
        """Fall back to the default flag when nothing was selected."""
        if not self._colors:
            self.append(catalogue.flags[c.DEFAULT_FLAG])

    def color_at(self, index: int) -> Color:
        if not self._colors:
            raise IndexError("color requested from an empty palette")
        return self._colors[index % len(self._colors)]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"PaletteQueue({len(self._colors)} colors)"
