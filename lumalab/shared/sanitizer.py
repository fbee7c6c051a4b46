#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/shared/sanitizer.py

import argparse
import math
import re
from typing import List, Optional, Tuple

from lumalab.core import config as c

# Signed decimal, optional fraction and exponent: "-0.1", ".5", "1e-9"
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes various formats of hex strings into a standard 6-character uppercase hex.
    Handles shorthand formats (e.g., 'F', 'FF', 'FFF') by repeating characters appropriately.
    """
    if value is None:
        return ""
    s = str(value).replace("#", "").replace(" ", "").upper()

    extracted = "".join(re.findall(r"[0-9A-F]", s))

    if not extracted:
        return ""

    L = len(extracted)
    if L == 6:
        return extracted
    if L == 3:
        # 'ABC' becomes 'AABBCC'
        return "".join([ch * 2 for ch in extracted])
    if L == 1:
        return extracted * 6
    if L == 2:
        return extracted * 3
    if L < 6:
        # 'ABCD' becomes 'ABCD00'
        return extracted.ljust(6, "0")

    return extracted[:6]


def _extract_positive_only_int(value: str) -> Optional[int]:
    """
    Extracts a non-negative integer from a string by stripping out
    all non-numeric characters (including minus signs).
    """
    if value is None:
        return None
    digits_only = re.sub(r"[^0-9]", "", str(value))
    if not digits_only:
        return None
    return int(digits_only)


def _extract_floats(value: str) -> List[float]:
    """Pull every signed float literal out of a string, in order."""
    if value is None:
        return []
    return [float(m) for m in _FLOAT_RE.findall(str(value))]


def _extract_alpha_num(value: str) -> str:
    if value is None:
        return ""
    return re.sub(r"[^0-9a-z]", "", str(value).lower())


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    cleaned = normalize_hex(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid hex value: '{raw}'")
    return cleaned


def handle_decimal_index(v: str) -> str:
    """
    Validator for decimal indices. Clamps the value between 0 and MAX_DEC,
    and returns it formatted as a 6-character hex string.
    """
    val = _extract_positive_only_int(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid decimal index: '{raw}'")
    val = min(val, c.MAX_DEC)
    return f"{val:06X}"


def handle_rgb_triplet(v: str) -> Tuple[int, int, int]:
    """
    Validator for "r, g, b" strings. Each channel is rounded and clamped
    to [RGB_MIN, RGB_MAX].
    """
    vals = _extract_floats(v)
    if len(vals) != 3:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"expected three rgb channels, got: '{raw}'")
    return tuple(int(round(max(c.RGB_MIN, min(c.RGB_MAX, x)))) for x in vals)


def handle_weights(v: str) -> Tuple[float, float, float]:
    """
    Validator for "r g b" weight strings. Values are passed through unchanged,
    signs included, so that the model itself reports invalid weights.
    """
    vals = _extract_floats(v)
    if len(vals) != 3:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"expected three weights, got: '{raw}'")
    if not all(math.isfinite(x) for x in vals):
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"weights must be finite numbers, got: '{raw}'")
    return tuple(vals)


def handle_preset(v: str) -> str:
    """Validator for luma preset names."""
    cleaned = _extract_alpha_num(v)
    if cleaned not in c.LUMA_PRESETS:
        raw = _sanitize_for_log(v)
        known = ", ".join(c.LUMA_PRESETS)
        raise argparse.ArgumentTypeError(f"invalid preset: '{raw}' (choose from {known})")
    return cleaned


def handle_tolerance(v: str) -> float:
    """Validator for the weight-sum tolerance; must be a single finite number >= 0."""
    vals = _extract_floats(v)
    if len(vals) != 1 or not math.isfinite(vals[0]) or vals[0] < 0:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid tolerance: '{raw}'")
    return vals[0]


def handle_non_negative_int(max_v: int):
    """
    Factory function returning a validator that extracts a non-negative
    integer and clamps it to max_v.
    """
    def validator(v: str) -> int:
        val = _extract_positive_only_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        return min(val, max_v)
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "decimal_index": handle_decimal_index,
    "rgb": handle_rgb_triplet,
    "weights": handle_weights,
    "preset": handle_preset,
    "tolerance": handle_tolerance,
    "seed": handle_non_negative_int(c.MAX_SEED),
}
