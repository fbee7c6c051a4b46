#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/shared/preview.py

import re

from lumalab.core.color import hex_to_rgb
from lumalab.core import config as c

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def pad_title(title: str, width: int = 18) -> str:
    return title + " " * max(0, width - get_visible_len(title))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = hex_to_rgb(hex_code)
    print(f"{pad_title(title)}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}#{hex_code}{c.RESET}", end=end)


def draw_bar(val: float, max_val: float, r_c: int, g_c: int, b_c: int) -> str:
    """Draw an ANSI-colored bar representation of a value in [0, max_val]."""
    total_len = c.BAR_LENGTH
    percent = min(max(val, 0.0), max_val) / max_val if max_val else 0.0
    filled = max(0, min(total_len, int(total_len * percent)))
    empty = total_len - filled

    color_ansi = f"\033[38;2;{r_c};{g_c};{b_c}m"
    empty_ansi = "\033[90m"

    return (
        f"{color_ansi}{'█' * filled}{c.RESET}"
        f"{empty_ansi}{'░' * empty}{c.RESET}"
    )
