#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lumalab/core/errors.py


class InvalidWeightsError(ValueError):
    """Raised when a LumaModel cannot be built from the given weights."""


class NegativeWeightError(InvalidWeightsError):
    def __init__(self, message: str = "Cannot have negative weight(s) in luminosity model."):
        super().__init__(message)


class WeightSumError(InvalidWeightsError):
    def __init__(self, message: str = "Sum of weights must be equal to 1.0"):
        super().__init__(message)


class UnknownPresetError(InvalidWeightsError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown luma preset: '{name}'")
