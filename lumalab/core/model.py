#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/core/model.py

import math
import re
from typing import Sequence, Tuple, Union

from . import config as c
from .errors import (
    InvalidWeightsError,
    NegativeWeightError,
    UnknownPresetError,
    WeightSumError,
)


def _channels(color) -> Tuple[float, float, float]:
    """Read the three channels of a color-like object as floats.

    Anything exposing ``red``/``green``/``blue`` is accepted, as is a plain
    ``(r, g, b)`` sequence.
    """
    if hasattr(color, "red") and hasattr(color, "green") and hasattr(color, "blue"):
        return float(color.red), float(color.green), float(color.blue)
    r, g, b = color
    return float(r), float(g), float(b)


def _preset_key(name: str) -> str:
    return re.sub(r"[^0-9a-z]", "", str(name).lower())


class LumaModel:
    """
    A fixed weighting scheme mapping an RGB color to a luma scalar.

    Formula: luma = Wr * R + Wg * G + Wb * B

    The weights are validated once, at construction: none may be negative
    and they must add up to 1.0. By default the sum is compared with exact
    float equality; pass ``tolerance`` to accept ``abs(sum - 1.0) <= tolerance``
    instead.
    """

    __slots__ = ("_red_weight", "_green_weight", "_blue_weight", "_tolerance")

    def __init__(
        self,
        red_weight: float,
        green_weight: float,
        blue_weight: float,
        tolerance: float = c.DEFAULT_SUM_TOLERANCE,
    ) -> None:
        if not math.isfinite(tolerance) or tolerance < 0:
            raise InvalidWeightsError(f"tolerance must be a finite non-negative number, got {tolerance!r}")

        if red_weight < c.WEIGHT_MIN or green_weight < c.WEIGHT_MIN or blue_weight < c.WEIGHT_MIN:
            raise NegativeWeightError()

        total = red_weight + green_weight + blue_weight
        if tolerance == 0:
            if total != c.WEIGHT_SUM:
                raise WeightSumError()
        elif not abs(total - c.WEIGHT_SUM) <= tolerance:
            raise WeightSumError()

        # only reachable with a positive tolerance
        if red_weight > c.WEIGHT_MAX or green_weight > c.WEIGHT_MAX or blue_weight > c.WEIGHT_MAX:
            raise InvalidWeightsError("weights must each be at most 1.0")

        object.__setattr__(self, "_red_weight", red_weight)
        object.__setattr__(self, "_green_weight", green_weight)
        object.__setattr__(self, "_blue_weight", blue_weight)
        object.__setattr__(self, "_tolerance", tolerance)

    @classmethod
    def from_preset(cls, name: str, tolerance: float = c.PRESET_SUM_TOLERANCE) -> "LumaModel":
        """Build a model from one of the standard weightings in ``config.LUMA_PRESETS``."""
        weights = c.LUMA_PRESETS.get(_preset_key(name))
        if weights is None:
            raise UnknownPresetError(name)
        return cls(*weights, tolerance=tolerance)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def red_weight(self) -> float:
        return self._red_weight

    @property
    def green_weight(self) -> float:
        return self._green_weight

    @property
    def blue_weight(self) -> float:
        return self._blue_weight

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def weights(self) -> Tuple[float, float, float]:
        return (self._red_weight, self._green_weight, self._blue_weight)

    def compute_luma(self, color: Union[Sequence[int], object]) -> float:
        """Weighted sum of the color's channels. Not clamped to [0, 255]."""
        r, g, b = _channels(color)
        return r * self._red_weight + g * self._green_weight + b * self._blue_weight

    def __eq__(self, other):
        if not isinstance(other, LumaModel):
            return NotImplemented
        return self.weights == other.weights and self._tolerance == other._tolerance

    def __hash__(self):
        return hash((self.weights, self._tolerance))

    def __str__(self):
        return (
            f"LumaModel [red_weight={self._red_weight}, "
            f"green_weight={self._green_weight}, blue_weight={self._blue_weight}]"
        )

    def __repr__(self):
        return (
            f"LumaModel({self._red_weight!r}, {self._green_weight!r}, "
            f"{self._blue_weight!r}, tolerance={self._tolerance!r})"
        )
