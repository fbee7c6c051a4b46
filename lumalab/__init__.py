#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/__init__.py

__version__ = "0.1.0"

from lumalab.core.color import Color
from lumalab.core.errors import (
    InvalidWeightsError,
    NegativeWeightError,
    UnknownPresetError,
    WeightSumError,
)
from lumalab.core.model import LumaModel

__all__ = [
    "__version__",
    "Color",
    "LumaModel",
    "InvalidWeightsError",
    "NegativeWeightError",
    "WeightSumError",
    "UnknownPresetError",
]
