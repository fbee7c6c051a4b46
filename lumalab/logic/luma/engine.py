#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/logic/luma/engine.py

import argparse
import sys

from lumalab.core.errors import InvalidWeightsError
from lumalab.shared.logger import log
from .resolver import resolve_color_input, resolve_model
from .renderer import render_luma_info, render_luma_json


def run(args: argparse.Namespace) -> None:
    """Main execution engine for the luma command"""
    try:
        model = resolve_model(args)
    except InvalidWeightsError as e:
        log("error", str(e))
        sys.exit(2)

    color, title = resolve_color_input(args)
    luma = model.compute_luma(color)

    if getattr(args, "json", False):
        render_luma_json(color, model, luma)
    else:
        render_luma_info(color, title, model, luma, hide_bars=getattr(args, "hide_bars", False))
