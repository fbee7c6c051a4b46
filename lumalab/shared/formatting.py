#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/shared/formatting.py

from lumalab.core import config as c


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_weight(w: float) -> str:
    return f"{w:.{c.WEIGHT_DECIMALS}f}"


def format_luma(luma: float) -> str:
    return f"{luma:.{c.LUMA_DECIMALS}f}"


def format_weights(r: float, g: float, b: float) -> str:
    return f"weights({format_weight(r)}, {format_weight(g)}, {format_weight(b)})"
