#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/logic/luma/resolver.py

import argparse
import random
import sys
from typing import Tuple

from lumalab.core import config as c
from lumalab.core.color import Color
from lumalab.core.model import LumaModel
from lumalab.shared.logger import log


def resolve_color_input(args: argparse.Namespace) -> Tuple[Color, str]:
    """Resolve raw CLI input into a Color and a display title"""

    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        return Color.from_index(random.randint(0, c.MAX_DEC)), "random"
    if args.hex:
        return Color.from_hex(args.hex), "current"
    if args.rgb is not None:
        return Color(*args.rgb), "current"
    if getattr(args, "decimal_index", None) is not None:
        hex_code = args.decimal_index
        return Color.from_hex(hex_code), f"index {int(hex_code, 16)}"

    log(
        "error",
        "one of the arguments -H/--hex -rgb/--red-green-blue -di/--decimal-index -r/--random is required",
    )
    log("info", "use 'lumalab --help' for more information")
    sys.exit(2)


def resolve_model(args: argparse.Namespace) -> LumaModel:
    """
    Build the LumaModel requested on the command line.

    Explicit weights are checked with exact equality unless --tolerance is
    given; presets fall back to PRESET_SUM_TOLERANCE. Raises
    InvalidWeightsError for bad weights.
    """
    tolerance = getattr(args, "tolerance", None)

    if args.weights is not None:
        if tolerance is None:
            tolerance = c.DEFAULT_SUM_TOLERANCE
        return LumaModel(*args.weights, tolerance=tolerance)

    if tolerance is None:
        tolerance = c.PRESET_SUM_TOLERANCE
    return LumaModel.from_preset(args.preset or c.DEFAULT_PRESET, tolerance=tolerance)
