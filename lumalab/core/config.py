#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/core/config.py

# ==========================================
# Luma Weighting Presets
# ==========================================

# Luma coefficients (Source: ITU-R BT.601, BT.709, BT.2020)
LUMA_PRESETS = {
    "bt601": (0.299, 0.587, 0.114),      # SDTV, also the classic JPEG / PAL luma
    "bt709": (0.2126, 0.7152, 0.0722),   # HDTV and sRGB primaries
    "bt2020": (0.2627, 0.6780, 0.0593),  # UHDTV wide gamut
}

DEFAULT_PRESET = "bt709"

# Allowed |sum - 1.0| when validating weights
DEFAULT_SUM_TOLERANCE = 0.0        # Exact equality, reference behavior
PRESET_SUM_TOLERANCE = 1e-12       # 0.299 + 0.587 + 0.114 == 0.9999999999999999

WEIGHT_SUM = 1.0                   # Required total of the three weights
WEIGHT_MIN = 0.0                   # Lower bound for a single weight
WEIGHT_MAX = 1.0                   # Upper bound for a single weight

# ==========================================
# Standard Scaling Constants
# ==========================================

RGB_MIN = 0                        # 8-bit channel floor
RGB_MAX = 255                      # 8-bit channel ceiling
MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_SEED = 999_999_999_999_999_999

LUMA_DECIMALS = 4                  # Precision used when printing luma values
WEIGHT_DECIMALS = 4                # Precision used when printing weights
BAR_LENGTH = 16                    # Width of the ANSI value bars

# ==========================================
# CLI UI
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

CHANNEL_BAR_COLORS = {
    "red": (255, 64, 64),
    "green": (64, 220, 64),
    "blue": (64, 128, 255),
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
