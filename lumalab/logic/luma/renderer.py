#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/logic/luma/renderer.py

import json

from lumalab.core import config as c
from lumalab.core.color import Color, rgb_to_hex
from lumalab.core.model import LumaModel
from lumalab.shared.formatting import format_luma, format_rgb, format_weight
from lumalab.shared.preview import draw_bar, pad_title, print_color_block


def _label(text: str) -> str:
    return pad_title(f"{c.MSG_BOLD_COLORS['info']}{text}{c.RESET}")


def render_luma_info(
    color: Color,
    title: str,
    model: LumaModel,
    luma: float,
    hide_bars: bool = False,
) -> None:
    """Strictly prints luma information. Values must be pre-calculated by the engine."""
    print()
    print_color_block(color.to_hex(), f"{c.BOLD_WHITE}{title}{c.RESET}")
    print(f"{_label('rgb')}{c.BOLD_WHITE}: {format_rgb(*color)}{c.RESET}")

    print(f"\n{_label('model')}{c.BOLD_WHITE}: {model}{c.RESET}")
    for channel, weight in zip(("red", "green", "blue"), model.weights):
        line = f"   {_label(channel)}{c.BOLD_WHITE}: {format_weight(weight)}{c.RESET}"
        if not hide_bars:
            line += f"  {draw_bar(weight, 1.0, *c.CHANNEL_BAR_COLORS[channel])}"
        print(line)

    line = f"\n{_label('luma')}{c.BOLD_WHITE}: {format_luma(luma)}{c.RESET}"
    if not hide_bars:
        line += f"  {draw_bar(luma, float(c.RGB_MAX), c.RGB_MAX, c.RGB_MAX, c.RGB_MAX)}"
    print(line)

    gray = rgb_to_hex(luma, luma, luma)
    print_color_block(gray, f"{c.MSG_BOLD_COLORS['info']}gray{c.RESET}")
    print()


def render_luma_json(color: Color, model: LumaModel, luma: float) -> None:
    payload = {
        "color": f"#{color.to_hex()}",
        "rgb": list(color),
        "model": {
            "red_weight": model.red_weight,
            "green_weight": model.green_weight,
            "blue_weight": model.blue_weight,
            "tolerance": model.tolerance,
        },
        "luma": luma,
    }
    print(json.dumps(payload, indent=2))
