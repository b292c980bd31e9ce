#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/profiles.py

"""
Declarative lightness tables consulted by the ramp generator.

Hue profiles correct dark-mode ramps for hues whose perceived brightness
and sRGB gamut differ from the rest of the wheel. Adding or tuning a band
is a data change here; `find_hue_profile` is the only lookup.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ramplab.core import config as c


@dataclass(frozen=True)
class HueProfile:
    name: str
    hue_min: float
    hue_max: float
    min_saturation: float
    max_saturation: float
    lightness_by_scale: Tuple[float, ...]

    def contains(self, hue: float) -> bool:
        """Inclusive band test; a band with hue_min > hue_max wraps through 0 degrees."""
        hue = hue % c.HUE_MAX
        if self.hue_min <= self.hue_max:
            return self.hue_min <= hue <= self.hue_max
        return hue >= self.hue_min or hue <= self.hue_max

    def lightness(self, scale: int) -> float:
        return self.lightness_by_scale[c.SCALES.index(scale)]

    def clamp_saturation(self, saturation: float) -> float:
        return max(self.min_saturation, min(self.max_saturation, saturation))


HUE_PROFILES = (
    HueProfile(
        name="blue",
        hue_min=200.0,
        hue_max=260.0,
        min_saturation=0.55,
        max_saturation=0.92,
        lightness_by_scale=(0.12, 0.22, 0.32, 0.44, 0.56, 0.66, 0.74, 0.81, 0.87, 0.93, 0.97),
    ),
    HueProfile(
        name="green",
        hue_min=80.0,
        hue_max=160.0,
        min_saturation=0.50,
        max_saturation=0.85,
        lightness_by_scale=(0.14, 0.22, 0.32, 0.44, 0.54, 0.64, 0.72, 0.79, 0.86, 0.92, 0.96),
    ),
    HueProfile(
        name="red-orange",
        hue_min=350.0,
        hue_max=30.0,
        min_saturation=0.60,
        max_saturation=0.90,
        lightness_by_scale=(0.14, 0.24, 0.36, 0.48, 0.58, 0.66, 0.74, 0.81, 0.87, 0.93, 0.97),
    ),
    HueProfile(
        name="purple-magenta",
        hue_min=270.0,
        hue_max=330.0,
        min_saturation=0.50,
        max_saturation=0.88,
        lightness_by_scale=(0.13, 0.23, 0.35, 0.47, 0.57, 0.65, 0.73, 0.80, 0.87, 0.93, 0.97),
    ),
)


def find_hue_profile(hue: float) -> Optional[HueProfile]:
    for profile in HUE_PROFILES:
        if profile.contains(hue):
            return profile
    return None


# Neutral lightness by scale; light ramps read it top-down, dark ramps use the mirror
NEUTRAL_LIGHTNESS: Dict[int, float] = {
    50: 0.98, 100: 0.96, 200: 0.91, 300: 0.84, 400: 0.67, 500: 0.46,
    600: 0.34, 700: 0.26, 800: 0.17, 900: 0.10, 950: 0.03,
}

REVERSED_NEUTRAL_LIGHTNESS: Dict[int, float] = {
    50: 0.03, 100: 0.10, 200: 0.17, 300: 0.26, 400: 0.34, 500: 0.46,
    600: 0.67, 700: 0.84, 800: 0.91, 900: 0.96, 950: 0.98,
}


def neutral_table(mode: str) -> Dict[int, float]:
    return NEUTRAL_LIGHTNESS if mode == c.LIGHT else REVERSED_NEUTRAL_LIGHTNESS


# HSL lightness bins for the anchor scale, as [min, max) per light-mode scale
LIGHT_ANCHOR_BINS: Dict[int, Tuple[float, float]] = {
    50: (0.95, 1.00),
    100: (0.90, 0.95),
    200: (0.80, 0.90),
    300: (0.70, 0.80),
    400: (0.60, 0.70),
    500: (0.50, 0.60),
    600: (0.40, 0.50),
    700: (0.30, 0.40),
    800: (0.20, 0.30),
    900: (0.10, 0.20),
    950: (0.00, 0.10),
}
