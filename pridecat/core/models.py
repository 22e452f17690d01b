#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/core/models.py

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, NamedTuple, Optional, Tuple

from . import config as c


class Color(NamedTuple):
    """An 8-bit-per-channel RGB triple."""

    r: int
    g: int
    b: int

    @classmethod
    def from_int(cls, rgb: int) -> "Color":
        """Unpack a 24-bit 0xRRGGBB integer."""
        if not 0 <= rgb <= c.MAX_DEC:
            raise ValueError(f"color value out of range: {rgb!r}")
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


class Flag(NamedTuple):
    colors: Tuple[Color, ...]
    description: str


@dataclass(frozen=True)
class FlagCatalogue:
    """
    Read-only lookup of the available flags.

    Identifiers given on the command line are first looked up in the alias
    table and then in the flag table, so both canonical names and aliases
    select the same flag.
    """

    flags: Mapping[str, Flag]
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    def canonical_name(self, identifier: str) -> str:
        return self.aliases.get(identifier, identifier)

    def resolve(self, identifier: str) -> Optional[Flag]:
        return self.flags.get(self.canonical_name(identifier))

    def aliases_for(self, name: str) -> List[str]:
        return sorted(alias for alias, target in self.aliases.items() if target == name)

    def names(self) -> List[str]:
        return sorted(self.flags)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.resolve(identifier) is not None

    def __iter__(self) -> Iterator[Tuple[str, Flag]]:
        for name in self.names():
            yield name, self.flags[name]


@dataclass(frozen=True)
class TerminalCapability:
    """What the output terminal can show and how colors are applied to it."""

    color_enabled: bool = False
    truecolor: bool = False
    background: bool = False
    adjust: str = c.ADJUST_NONE

    def __post_init__(self) -> None:
        if self.adjust not in c.ADJUST_MODES:
            raise ValueError(f"unknown readability adjustment: {self.adjust!r}")
