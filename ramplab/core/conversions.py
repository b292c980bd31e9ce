#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/conversions.py

import functools
import math
from typing import Tuple

from . import config as c
from ramplab.shared.clamping import _clamp01
from ramplab.shared.sanitizer import normalize_hex


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Convert hex string to RGB tuple."""
    h = normalize_hex(hex_code)
    if not h:
        return (0, 0, 0)
    return tuple(int(h[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a '#RRGGBB' string."""
    r_clamped = max(0, min(int(c.RGB_MAX), int(round(r))))
    g_clamped = max(0, min(int(c.RGB_MAX), int(round(g))))
    b_clamped = max(0, min(int(c.RGB_MAX), int(round(b))))
    return f"#{r_clamped:02X}{g_clamped:02X}{b_clamped:02X}"


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL."""
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HSL_BLUE_SECTOR)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, min(s, c.UNIT), L)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB."""
    h = h % c.HUE_MAX
    s = _clamp01(s)
    L = _clamp01(L)
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _signed_cbrt(v: float) -> float:
    return abs(v) ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -(abs(v) ** c.OKLAB_CUBE_ROOT_EXP)


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to OKLab."""
    r_lin = _srgb_to_linear(r)
    g_lin = _srgb_to_linear(g)
    b_lin = _srgb_to_linear(b)

    l_val = c.OKLAB_RGB_TO_LMS_LR * r_lin + c.OKLAB_RGB_TO_LMS_LG * g_lin + c.OKLAB_RGB_TO_LMS_LB * b_lin
    m = c.OKLAB_RGB_TO_LMS_MR * r_lin + c.OKLAB_RGB_TO_LMS_MG * g_lin + c.OKLAB_RGB_TO_LMS_MB * b_lin
    s = c.OKLAB_RGB_TO_LMS_SR * r_lin + c.OKLAB_RGB_TO_LMS_SG * g_lin + c.OKLAB_RGB_TO_LMS_SB * b_lin

    l_ = _signed_cbrt(l_val)
    m_ = _signed_cbrt(m)
    s_ = _signed_cbrt(s)

    ok_l = c.OKLAB_LMS_TO_LAB_LL * l_ + c.OKLAB_LMS_TO_LAB_LM * m_ + c.OKLAB_LMS_TO_LAB_LS * s_
    ok_a = c.OKLAB_LMS_TO_LAB_AL * l_ + c.OKLAB_LMS_TO_LAB_AM * m_ + c.OKLAB_LMS_TO_LAB_AS * s_
    ok_b = c.OKLAB_LMS_TO_LAB_BL * l_ + c.OKLAB_LMS_TO_LAB_BM * m_ + c.OKLAB_LMS_TO_LAB_BS * s_

    return ok_l, ok_a, ok_b


def oklab_to_linear_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to unclamped linear sRGB."""
    l_ = L + c.OKLAB_TO_LMS_PRIME_LA * a + c.OKLAB_TO_LMS_PRIME_LB * b
    m_ = L + c.OKLAB_TO_LMS_PRIME_MA * a + c.OKLAB_TO_LMS_PRIME_MB * b
    s_ = L + c.OKLAB_TO_LMS_PRIME_SA * a + c.OKLAB_TO_LMS_PRIME_SB * b

    l3, m3, s3 = l_**3, m_**3, s_**3

    r_lin = c.OKLAB_LMS_TO_RGB_RL * l3 + c.OKLAB_LMS_TO_RGB_RM * m3 + c.OKLAB_LMS_TO_RGB_RS * s3
    g_lin = c.OKLAB_LMS_TO_RGB_GL * l3 + c.OKLAB_LMS_TO_RGB_GM * m3 + c.OKLAB_LMS_TO_RGB_GS * s3
    b_lin = c.OKLAB_LMS_TO_RGB_BL * l3 + c.OKLAB_LMS_TO_RGB_BM * m3 + c.OKLAB_LMS_TO_RGB_BS * s3
    return r_lin, g_lin, b_lin


def _linear_to_srgb_signed(l_val: float) -> float:
    """Gamma-encode a linear component without clamping negative values to zero."""
    if l_val < 0:
        return -_linear_to_srgb(-l_val)
    return _linear_to_srgb(l_val)


def oklab_to_rgb_unclamped(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to RGB (0-255 scale) without clamping out-of-gamut values."""
    r_lin, g_lin, b_lin = oklab_to_linear_rgb(L, a, b)
    return (
        _linear_to_srgb_signed(r_lin) * c.RGB_MAX,
        _linear_to_srgb_signed(g_lin) * c.RGB_MAX,
        _linear_to_srgb_signed(b_lin) * c.RGB_MAX,
    )


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Tuple[float, float, float]:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to OKLCH conversion."""
    L, a_val, b_val = rgb_to_oklab(r, g, b)
    return oklab_to_oklch(L, a_val, b_val)


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    """Direct HSL to Hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def hex_to_oklch(hex_code: str) -> Tuple[float, float, float]:
    """Direct Hex to OKLCH."""
    return rgb_to_oklch(*hex_to_rgb(hex_code))


# Apply LRU caching to all functions in this module
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)
