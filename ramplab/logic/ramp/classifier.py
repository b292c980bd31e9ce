#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/classifier.py

from dataclasses import dataclass
from typing import Optional, Tuple

from ramplab.core import config as c
from ramplab.core.color import Color, HSL, to_clipped_srgb
from .profiles import HueProfile, find_hue_profile


@dataclass(frozen=True)
class Classification:
    is_grayscale: bool
    is_pure_white: bool
    is_pure_black: bool
    hue_profile: Optional[HueProfile]
    hue: float
    saturation: float
    lightness: float
    oklch: Tuple[float, float, float]

    @property
    def is_green(self) -> bool:
        lo, hi = c.GREEN_HUE_RANGE
        return not self.is_grayscale and lo <= self.hue <= hi


def classify(color: Color) -> Classification:
    """
    Sort a base color into the branch the generator will take.

    Grayscale means HSL saturation below 0.05 or OKLCH chroma below 0.01,
    both read from the sRGB-clipped color. Pure white and pure black are
    grayscale as well; the hue profile is only looked up for chromatic input.
    """
    clipped = to_clipped_srgb(color)
    if clipped.space == HSL:
        h, s, l = clipped.hsl
        oklch = clipped.oklch
    else:
        h, s, l = Color.from_hex(clipped.hex, space=HSL).hsl
        oklch = clipped.oklch

    is_grayscale = s < c.GRAYSCALE_HSL_SATURATION or oklch[1] < c.GRAYSCALE_OKLCH_CHROMA

    return Classification(
        is_grayscale=is_grayscale,
        is_pure_white=clipped.hex == c.PURE_WHITE_HEX,
        is_pure_black=clipped.hex == c.PURE_BLACK_HEX,
        hue_profile=None if is_grayscale else find_hue_profile(h),
        hue=h,
        saturation=s,
        lightness=l,
        oklch=oklch,
    )
