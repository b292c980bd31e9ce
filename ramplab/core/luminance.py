#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/luminance.py

import functools

from . import config as c
from ramplab.shared.clamping import _clamp01


def _wcag_linear(color_comp: float) -> float:
    """Linearize an 8-bit channel with the WCAG 2.1 threshold."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


@functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)
def get_luminance(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * _wcag_linear(r) +
        c.LUMA_G * _wcag_linear(g) +
        c.LUMA_B * _wcag_linear(b)
    )
