#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/shared/string_parser.py

import math
import re
from typing import List, Tuple

from ramplab.core import config as c
from ramplab.core.errors import ParseError
from .clamping import _clamp01
from .naming import get_color_name_hex

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
BARE_TRIPLET_PATTERN = re.compile(r"^\d{1,3}(?:[\s,]+\d{1,3}){0,2}$")
NUMBER_PATTERN = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"


def _normalize_value_string(s: str) -> str:
    """
    Normalizes the input color string to make numerical extraction easier.
    It removes formatting characters (like degrees) and unwraps CSS-like
    function syntaxes (e.g., 'rgb(255, 0, 0)' -> '255 0 0').
    """
    if not s:
        return ""
    s = s.strip()

    # Standardize angle symbols and typographic dashes
    s = s.replace('°', ' ')
    s = s.replace('–', '-')
    s = re.sub(r'deg', ' ', s, flags=re.IGNORECASE)

    # Remove functional wrappers like "rgba(" or "oklch(" at the start, and ")" at the end
    s = re.sub(r'^[a-zA-Z]+\s*\(', '', s, flags=re.IGNORECASE)
    s = s.rstrip(')')

    # Replace common delimiters (commas, slashes) with spaces
    s = s.replace(',', ' ')
    s = s.replace('/', ' ')

    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def _strip_quotes(s: str) -> str:
    s = s.strip()
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def _tokens(s: str, model_name: str, count: int) -> List[str]:
    """Return the first `count` numeric tokens, keeping any trailing '%'."""
    nums = re.findall(NUMBER_PATTERN + "%?", _normalize_value_string(s))
    if len(nums) < count:
        raise ParseError(s, f"invalid {model_name} string")
    return nums[:count]


def _safe_float(token: str, original: str) -> float:
    try:
        v = float(token.rstrip('%'))
    except ValueError:
        raise ParseError(original, "invalid numeric value")
    if not math.isfinite(v):
        raise ParseError(original, "non-finite numeric value")
    return v


def hex_string_to_rgb(s: str) -> Tuple[int, int, int]:
    """Parses 3 or 6 digit hex, with or without '#'."""
    m = HEX_PATTERN.match(s.strip())
    if not m:
        raise ParseError(s, "invalid hex string")
    digits = m.group(1)
    if len(digits) == 3:
        # e.g., 'ABC' becomes 'AABBCC'
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def parse_bare_triplet(s: str) -> Tuple[int, int, int]:
    """
    Parses '255, 100, 50' or '255 100 50' as RGB. Values are clamped to 0-255
    and missing green/blue channels default to 255.
    """
    parts = [p for p in re.split(r"[\s,]+", s.strip()) if p]
    if not parts or len(parts) > 3:
        raise ParseError(s, "invalid rgb triplet")
    values = [max(0, min(int(c.RGB_MAX), int(p))) for p in parts]
    while len(values) < 3:
        values.append(int(c.RGB_MAX))
    return tuple(values)


def parse_rgb_string(s: str) -> Tuple[int, int, int]:
    """Parses RGB strings, scaling float representations (0.0-1.0) to 8-bit integers (0-255)."""
    nums = _tokens(s, "rgb", 3)

    def _to_8bit(token: str) -> int:
        val = _safe_float(token, s)
        if token.endswith('%'):
            v = val / c.PERCENT * c.RGB_MAX
        # Scale up if the value appears to be in the 0.0 - 1.0 float format
        elif 0.0 < val < 1.0:
            v = val * c.RGB_MAX
        else:
            v = val
        return max(0, min(int(c.RGB_MAX), int(round(v))))

    return _to_8bit(nums[0]), _to_8bit(nums[1]), _to_8bit(nums[2])


def parse_hsl_string(s: str) -> Tuple[float, float, float]:
    """
    Extracts hue in degrees plus saturation and lightness as fractions.
    Percentages or values above 1 are divided by 100.
    """
    nums = _tokens(s, "hsl", 3)
    h = _safe_float(nums[0], s) % c.HUE_MAX

    def _fraction(token: str) -> float:
        v = _safe_float(token, s)
        v = v / c.PERCENT if token.endswith('%') or v > 1.0 else v
        return _clamp01(v)

    return h, _fraction(nums[1]), _fraction(nums[2])


def parse_oklch_string(s: str) -> Tuple[float, float, float]:
    """Parses 'oklch(L C H)' with L as fraction or percent and C in absolute units or percent of 0.4."""
    nums = _tokens(s, "oklch", 3)
    L = _safe_float(nums[0], s)
    if nums[0].endswith('%') or L > 1.0:
        L = L / c.PERCENT
    chroma = _safe_float(nums[1], s)
    if nums[1].endswith('%'):
        chroma = chroma / c.PERCENT * c.OKLCH_PERCENT_CHROMA
    h = _safe_float(nums[2], s) % c.HUE_MAX
    return _clamp01(L), max(0.0, chroma), h


def parse_color_string(s: str) -> Tuple[str, Tuple[float, ...]]:
    """
    Resolve any supported input to a tagged component tuple:
    ('rgb', (r, g, b)), ('hsl', (h, s, l)) or ('oklch', (L, C, h)).
    """
    if s is None:
        raise ParseError(s, "missing color")
    text = _strip_quotes(str(s))

    # Empty input means black
    if not text:
        return "rgb", (0, 0, 0)

    if HEX_PATTERN.match(text):
        return "rgb", hex_string_to_rgb(text)

    if BARE_TRIPLET_PATTERN.match(text):
        return "rgb", parse_bare_triplet(text)

    lowered = text.lower()
    if lowered.startswith("oklch"):
        return "oklch", parse_oklch_string(text)
    if lowered.startswith("hsl"):
        return "hsl", parse_hsl_string(text)
    if lowered.startswith("rgb"):
        return "rgb", parse_rgb_string(text)

    named = get_color_name_hex(text)
    if named:
        return "rgb", hex_string_to_rgb(named)

    raise ParseError(s)
