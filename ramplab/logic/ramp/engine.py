#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/engine.py

from typing import List, Optional, Tuple

from ramplab.core import config as c
from ramplab.core.color import Color, HSL
from ramplab.shared.logger import log
from .classifier import Classification, classify
from .continuity import nearest_feasible_anchor
from .profiles import LIGHT_ANCHOR_BINS, neutral_table
from .types import RawRamp, mirror_scale, scale_index


def quantize_anchor(lightness: float, mode: str) -> int:
    """Map HSL lightness to its anchor scale; dark ramps use the mirrored scale."""
    light_scale = c.SCALES[0] if lightness >= c.UNIT else c.SCALES[-1]
    for scale, (lo, hi) in LIGHT_ANCHOR_BINS.items():
        if lo <= lightness < hi:
            light_scale = scale
            break
    return light_scale if mode == c.LIGHT else mirror_scale(light_scale)


def vibrancy_compression(hue: float) -> float:
    lo, hi = c.VIBRANCY_PURPLE_RANGE
    if lo <= hue <= hi:
        return c.VIBRANCY_PURPLE_COMPRESSION
    for lo, hi in c.VIBRANCY_RED_RANGES:
        if lo <= hue <= hi:
            return c.VIBRANCY_RED_COMPRESSION
    return c.VIBRANCY_DEFAULT_COMPRESSION


def interpolate_oklch(c1: Tuple[float, float, float], c2: Tuple[float, float, float], t: float) -> Tuple[float, float, float]:
    """Linear OKLCH interpolation along the shorter hue arc."""
    l1, c1_val, h1 = c1
    l2, c2_val, h2 = c2
    h1, h2 = h1 % c.HUE_MAX, h2 % c.HUE_MAX
    h_diff = h2 - h1
    if h_diff > c.HUE_HALF: h2 -= c.HUE_MAX
    elif h_diff < -c.HUE_HALF: h2 += c.HUE_MAX
    l_new = l1 + t * (l2 - l1)
    c_new = c1_val + t * (c2_val - c1_val)
    h_new = (h1 + t * (h2 - h1)) % c.HUE_MAX
    return l_new, c_new, h_new


def _uniform(start, end) -> List[Color]:
    last = len(c.SCALES) - 1
    return [Color.from_oklch(*interpolate_oklch(start, end, i / last)) for i in range(last + 1)]


def _through_anchor(start, anchor: Color, end, anchor_index: int) -> List[Color]:
    pivot = anchor.oklch
    shades = [Color.from_oklch(*interpolate_oklch(start, pivot, k / anchor_index)) for k in range(anchor_index)]
    shades.append(anchor)
    remaining = len(c.SCALES) - 1 - anchor_index
    shades.extend(Color.from_oklch(*interpolate_oklch(pivot, end, k / remaining)) for k in range(1, remaining + 1))
    return shades


def _pinned_anchor(cls: Classification, mode: str, scale: int) -> int:
    return nearest_feasible_anchor(mode, scale, cls.lightness, cls.is_green, cls.is_grayscale)


def _neutral_ramp(base: Color, mode: str, is_default: bool, cls: Classification) -> RawRamp:
    table = neutral_table(mode)
    pure = cls.is_pure_white or cls.is_pure_black

    if cls.is_pure_white:
        anchor = c.SCALES[0] if mode == c.LIGHT else c.SCALES[-1]
    elif cls.is_pure_black:
        anchor = c.SCALES[-1] if mode == c.LIGHT else c.SCALES[0]
    else:
        anchor = min(c.SCALES, key=lambda s: abs(table[s] - cls.lightness))
        if is_default:
            anchor = _pinned_anchor(cls, mode, anchor)

    shades = []
    for scale in c.SCALES:
        lightness = table[scale]
        if mode == c.DARK and scale != anchor:
            if pure:
                lightness = min(c.NEUTRAL_DARK_CAP, lightness + c.NEUTRAL_DARK_LIFT)
            elif scale <= c.GRAY_DARK_BOOST_MAX_SCALE:
                lightness += c.GRAY_DARK_BOOST
        shades.append(Color.from_hsl(0.0, 0.0, lightness))

    if is_default:
        shades[scale_index(anchor)] = base.to_space(HSL)
    return RawRamp(mode, tuple(shades), anchor, is_default)


def _profile_ramp(base: Color, is_default: bool, cls: Classification) -> RawRamp:
    profile = cls.hue_profile
    saturation = profile.clamp_saturation(cls.saturation)
    shades = [Color.from_hsl(cls.hue, saturation, profile.lightness(scale)) for scale in c.SCALES]

    if is_default:
        anchor = _pinned_anchor(cls, c.DARK, quantize_anchor(cls.lightness, c.DARK))
        shades[scale_index(anchor)] = base.to_space(HSL)
    else:
        anchor = min(c.SCALES, key=lambda s: abs(profile.lightness(s) - cls.lightness))
    return RawRamp(c.DARK, tuple(shades), anchor, is_default)


def _interpolated_ramp(base: Color, mode: str, is_default: bool, vibrancy: int, cls: Classification) -> RawRamp:
    L, C, H = cls.oklch
    vib = max(0, min(c.VIBRANCY_MAX, int(vibrancy))) / c.PERCENT
    chroma = C * (c.UNIT + vib * vibrancy_compression(H))
    bias = c.VIBRANCY_BIAS * vib

    if mode == c.LIGHT:
        l_start, l_end = c.OKLCH_LIGHT_POLE, c.OKLCH_DARK_POLE
    else:
        l_start, l_end = c.OKLCH_DARK_POLE, c.OKLCH_LIGHT_POLE
    start = (l_start, chroma * (c.UNIT - bias), H)
    end = (l_end, chroma * (c.UNIT + bias), H)

    if not is_default:
        shades = _uniform(start, end)
        anchor = min(c.SCALES, key=lambda s: abs(shades[scale_index(s)].l - L))
        return RawRamp(mode, tuple(shades), anchor, False)

    anchor = _pinned_anchor(cls, mode, quantize_anchor(cls.lightness, mode))
    shades = _through_anchor(start, Color.from_hex(base.hex), end, scale_index(anchor))
    if len(shades) != len(c.SCALES):
        log("warning", f"{mode} ramp produced {len(shades)} shades; using a uniform ramp instead")
        shades = _uniform(start, end)
    return RawRamp(mode, tuple(shades), anchor, True)


def generate(
    base: Color,
    mode: str,
    is_default: bool,
    vibrancy: int = 0,
    classification: Optional[Classification] = None,
) -> RawRamp:
    """
    Build the raw eleven shades for one direction.

    Grayscale input (including pure white and black) is filled from the
    neutral tables. Dark ramps for hues inside a profile band use that
    band's lightness table and saturation bounds. Everything else is
    interpolated in OKLCH between a near-white and a near-black pole; the
    default ramp passes through the exact base at its anchor scale.
    """
    cls = classification if classification is not None else classify(base)
    if mode not in c.MODES:
        raise ValueError(f"unknown ramp mode '{mode}'")

    if cls.is_grayscale:
        return _neutral_ramp(base, mode, is_default, cls)
    if mode == c.DARK and cls.hue_profile is not None:
        return _profile_ramp(base, is_default, cls)
    return _interpolated_ramp(base, mode, is_default, vibrancy, cls)
