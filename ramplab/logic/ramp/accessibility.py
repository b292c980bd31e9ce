#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/accessibility.py

from typing import Tuple

from ramplab.core import config as c
from ramplab.core.color import BLACK, WHITE, Color, raw_contrast_ratio, to_clipped_srgb
from ramplab.core.contrast import truncate_ratio
from .types import Swatch


def choose_text_color(background: Color) -> Tuple[Color, float]:
    """Pick black or white text, whichever reads stronger; returns (text, raw ratio)."""
    on_black = raw_contrast_ratio(background, BLACK)
    on_white = raw_contrast_ratio(background, WHITE)
    if on_black >= on_white:
        return BLACK, on_black
    return WHITE, on_white


def measure(background: Color, scale: int, minimum: float = c.WCAG_AA_NORMAL) -> Swatch:
    """Build a swatch for `background` as-is, without changing it."""
    text, ratio = choose_text_color(background)
    shown = truncate_ratio(ratio)
    return Swatch(
        scale=scale,
        background=background,
        text_color=text,
        contrast_ratio=shown,
        meets_minimum=shown >= minimum,
    )


def enforce(background: Color, scale: int, minimum: float = c.WCAG_AA_NORMAL) -> Swatch:
    """
    Return a swatch whose background reaches `minimum` against its text color.

    The background is clipped to sRGB first. When the better text color still
    falls short, lightness is moved toward the pole that favours that text by
    a tenth of the remaining distance per step, clipping again before every
    measurement. Hue and chroma are left alone, so grayscale input never picks
    up saturation. When the step budget runs out a fixed safe lightness is
    tried; the strongest candidate is returned, flagged when it still fails.
    """
    clipped = to_clipped_srgb(background)
    best = measure(clipped, scale, minimum)
    if best.meets_minimum:
        return best

    wants_dark = best.text_color == WHITE
    target = 0.0 if wants_dark else c.UNIT
    working = clipped
    for _ in range(c.ACCESSIBILITY_MAX_ITERATIONS):
        working = working.with_lightness(working.l + (target - working.l) * c.ACCESSIBILITY_NUDGE_FRACTION)
        candidate = measure(to_clipped_srgb(working), scale, minimum)
        if candidate.meets_minimum:
            return candidate
        if candidate.contrast_ratio > best.contrast_ratio:
            best = candidate

    forced_l = c.FORCE_LIGHTNESS_WHITE_TEXT if wants_dark else c.FORCE_LIGHTNESS_BLACK_TEXT
    forced = measure(to_clipped_srgb(clipped.with_lightness(forced_l)), scale, minimum)
    if forced.meets_minimum or forced.contrast_ratio > best.contrast_ratio:
        return forced
    return best
