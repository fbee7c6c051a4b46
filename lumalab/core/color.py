#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/core/color.py

from typing import NamedTuple, Tuple

from . import config as c
from lumalab.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        return (0, 0, 0)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to hex string, rounding and clamping each channel."""
    r_clamped = max(c.RGB_MIN, min(c.RGB_MAX, int(round(r))))
    g_clamped = max(c.RGB_MIN, min(c.RGB_MAX, int(round(g))))
    b_clamped = max(c.RGB_MIN, min(c.RGB_MAX, int(round(b))))
    return f"{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


class Color(NamedTuple):
    """An 8-bit RGB triple.

    Channels are nominally in [0, 255]; nothing here enforces it.
    """

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, hex_code: str) -> "Color":
        return cls(*hex_to_rgb(hex_code))

    @classmethod
    def from_index(cls, index: int) -> "Color":
        index = max(0, min(c.MAX_DEC, int(index)))
        return cls.from_hex(f"{index:06X}")

    def to_hex(self) -> str:
        return rgb_to_hex(self.red, self.green, self.blue)
