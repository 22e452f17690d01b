#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/core/conversions.py

from . import config as c
from .models import Color


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to hex string."""
    r_clamped = max(0, min(c.RGB_MAX, int(r)))
    g_clamped = max(0, min(c.RGB_MAX, int(g)))
    b_clamped = max(0, min(c.RGB_MAX, int(b)))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def _cube_bucket(channel: int) -> int:
    # floor(channel * 6 / 256), the exact 6-way partition of 0..255
    return (channel * c.CUBE_LEVELS) // c.CHANNEL_RANGE


def rgb_to_cube_index(color: Color) -> int:
    """
    Map a 24-bit color onto the 6x6x6 cube of the 256-color palette.

    This is a bucketing transform, not a nearest-color search: the base
    colors (0-15) and the grayscale ramp (232-255) are never returned, so
    gray inputs land on the cube diagonal.
    """
    r, g, b = color
    return (
        c.CUBE_OFFSET
        + c.CUBE_R_WEIGHT * _cube_bucket(r)
        + c.CUBE_G_WEIGHT * _cube_bucket(g)
        + _cube_bucket(b)
    )


def _scale(channel: int) -> int:
    return (channel * c.ADJUST_SCALE_NUM) // c.ADJUST_SCALE_DEN


def adjust_for_readability(color: Color, mode: str) -> Color:
    """Lighten or darken a color for dark or light terminal backgrounds."""
    if mode == c.ADJUST_NONE:
        return color
    if mode == c.ADJUST_DARKEN:
        return Color(*(_scale(ch) for ch in color))
    if mode == c.ADJUST_LIGHTEN:
        return Color(*(c.LIGHTEN_OFFSET + _scale(ch) for ch in color))
    raise ValueError(f"unknown readability adjustment: {mode!r}")
