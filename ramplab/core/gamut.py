#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/gamut.py

import math
from typing import Tuple

from . import config as c
from .conversions import oklab_to_rgb_unclamped, oklch_to_oklab
from ramplab.shared.clamping import _clamp255


def _within_tolerance(r: float, g: float, b: float) -> bool:
    return (
        c.RGB_CLAMP_TOLERANCE_LOWER <= r <= c.RGB_CLAMP_TOLERANCE_UPPER
        and c.RGB_CLAMP_TOLERANCE_LOWER <= g <= c.RGB_CLAMP_TOLERANCE_UPPER
        and c.RGB_CLAMP_TOLERANCE_LOWER <= b <= c.RGB_CLAMP_TOLERANCE_UPPER
    )


def oklch_in_gamut(L: float, chroma: float, hue: float) -> bool:
    """True when the OKLCH triplet lands inside sRGB after 8-bit rounding."""
    return _within_tolerance(*oklab_to_rgb_unclamped(*oklch_to_oklab(L, chroma, hue)))


def gamut_map_oklab_to_srgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Map OKLab color to sRGB gamut using chroma clipping."""
    l = max(0.0, min(c.UNIT, l))
    fr, fg, fb = oklab_to_rgb_unclamped(l, a, b)

    if _within_tolerance(fr, fg, fb):
        return _clamp255(fr), _clamp255(fg), _clamp255(fb)

    C = math.hypot(a, b)
    if C < c.EPS:
        return _clamp255(fr), _clamp255(fg), _clamp255(fb)

    h_rad = math.atan2(b, a)
    low, high = 0.0, C
    best_rgb = oklab_to_rgb_unclamped(l, 0.0, 0.0)

    for _ in range(c.GAMUT_MAP_BINARY_SEARCH_ITERATIONS):
        mid_C = (low + high) / c.DIV_2
        new_a = mid_C * math.cos(h_rad)
        new_b = mid_C * math.sin(h_rad)
        tr, tg, tb = oklab_to_rgb_unclamped(l, new_a, new_b)

        if _within_tolerance(tr, tg, tb):
            best_rgb = (tr, tg, tb)
            low = mid_C
        else:
            high = mid_C

    return _clamp255(best_rgb[0]), _clamp255(best_rgb[1]), _clamp255(best_rgb[2])


def gamut_map_oklch_to_srgb(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Map an OKLCH triplet to the nearest in-gamut sRGB color at the same lightness and hue."""
    return gamut_map_oklab_to_srgb(*oklch_to_oklab(L, chroma, hue))
