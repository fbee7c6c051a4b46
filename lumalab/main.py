#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/main.py

import argparse
import sys
from typing import List, Optional

from lumalab import __version__
from lumalab.core import config as c
from lumalab.logic.luma import engine
from lumalab.shared.formatting import format_weights
from lumalab.shared.logger import LumalabArgumentParser
from lumalab.shared.sanitizer import INPUT_HANDLERS
from lumalab.shared.truecolor import ensure_truecolor


def get_luma_parser() -> argparse.ArgumentParser:
    """Create argument parser for the luma command."""
    parser = LumalabArgumentParser(
        prog="lumalab",
        description="lumalab: compute the weighted luma of an RGB color",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"lumalab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="list available luma presets and exit",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="6-digit hex color code without # sign",
    )
    color_input_group.add_argument(
        "-rgb",
        "--red-green-blue",
        dest="rgb",
        type=INPUT_HANDLERS["rgb"],
        help='rgb channels in quotes, e.g. "255, 136, 0"',
    )
    color_input_group.add_argument(
        "-di",
        "--decimal-index",
        dest="decimal_index",
        type=INPUT_HANDLERS["decimal_index"],
        help=f"decimal index of the color (0 to {c.MAX_DEC})",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random color",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )

    # Model Group
    model_group = parser.add_argument_group("luma model")
    weights_group = model_group.add_mutually_exclusive_group()
    weights_group.add_argument(
        "-p",
        "--preset",
        type=INPUT_HANDLERS["preset"],
        default=None,
        help=f"named weighting ({', '.join(c.LUMA_PRESETS)}), default {c.DEFAULT_PRESET}",
    )
    weights_group.add_argument(
        "-w",
        "--weights",
        type=INPUT_HANDLERS["weights"],
        default=None,
        help='red, green and blue weights in quotes, e.g. "0.5 0.3 0.2"\n'
             "must be non-negative and sum to 1.0",
    )
    model_group.add_argument(
        "-t",
        "--tolerance",
        type=INPUT_HANDLERS["tolerance"],
        default=None,
        help="allowed |sum - 1.0| for the weights\n"
             f"default: exact for --weights, {c.PRESET_SUM_TOLERANCE} for --preset",
    )

    # Output Group
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="print the result as json",
    )
    output_group.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide visual weight and luma bars",
    )
    return parser


def handle_list_presets() -> None:
    for name, weights in c.LUMA_PRESETS.items():
        marker = " (default)" if name == c.DEFAULT_PRESET else ""
        print(f"{c.BOLD_WHITE}{name:<8}{c.RESET} {format_weights(*weights)}{marker}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for lumalab CLI"""
    parser = get_luma_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.list_presets:
        handle_list_presets()
        sys.exit(0)

    ensure_truecolor()
    engine.run(args)


if __name__ == "__main__":
    main()
