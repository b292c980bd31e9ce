#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/color.py

"""
The tagged color value shared by every stage of the ramp engine.

A Color holds three components labelled by their working space:

    space 'oklch' -> (L, C, h)   perceptual lightness, chroma, hue in degrees
    space 'hsl'   -> (l, s, h)   HSL lightness and saturation as fractions

Every Color also carries the '#RRGGBB' of its sRGB-clipped projection,
computed once at construction. Two colors are equal iff these hex strings
match, so a Color may be used directly as a member of a seen-set.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from . import config as c
from . import conversions as conv
from .contrast import get_contrast_ratio_rgb, truncate_ratio
from .errors import ParseError
from .gamut import gamut_map_oklch_to_srgb, oklch_in_gamut
from .luminance import get_luminance
from ramplab.shared.logger import log
from ramplab.shared.string_parser import parse_color_string

OKLCH = "oklch"
HSL = "hsl"


@dataclass(frozen=True, eq=False)
class Color:
    space: str
    l: float
    c: float
    h: float
    hex: str = field(init=False, repr=False)

    def __post_init__(self):
        if self.space == HSL:
            hex_code = conv.hsl_to_hex(self.h, self.c, self.l)
        elif self.space == OKLCH:
            hex_code = conv.rgb_to_hex(*gamut_map_oklch_to_srgb(self.l, self.c, self.h))
        else:
            raise ValueError(f"unknown color space '{self.space}'")
        object.__setattr__(self, "hex", hex_code)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.hex == other.hex

    def __hash__(self):
        return hash(self.hex)

    # Constructors

    @classmethod
    def from_oklch(cls, L: float, chroma: float, hue: float) -> "Color":
        return cls(OKLCH, float(L), max(0.0, float(chroma)), float(hue) % c.HUE_MAX)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        return cls(
            HSL,
            max(0.0, min(c.UNIT, float(lightness))),
            max(0.0, min(c.UNIT, float(saturation))),
            float(hue) % c.HUE_MAX,
        )

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, space: str = OKLCH) -> "Color":
        if space == HSL:
            return cls.from_hsl(*conv.rgb_to_hsl(r, g, b))
        return cls.from_oklch(*conv.rgb_to_oklch(r, g, b))

    @classmethod
    def from_hex(cls, hex_code: str, space: str = OKLCH) -> "Color":
        return cls.from_rgb(*conv.hex_to_rgb(hex_code), space=space)

    # Views

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return conv.hex_to_rgb(self.hex)

    @property
    def hsl(self) -> Tuple[float, float, float]:
        """(h, s, l); exact for HSL colors, derived from the clipped hex otherwise."""
        if self.space == HSL:
            return (self.h, self.c, self.l)
        return conv.hex_to_hsl(self.hex)

    @property
    def oklch(self) -> Tuple[float, float, float]:
        """(L, C, h); exact for OKLCH colors, derived from the clipped hex otherwise."""
        if self.space == OKLCH:
            return (self.l, self.c, self.h)
        return conv.hex_to_oklch(self.hex)

    @property
    def is_in_gamut(self) -> bool:
        if self.space == HSL:
            return True
        return oklch_in_gamut(self.l, self.c, self.h)

    @property
    def luminance(self) -> float:
        return get_luminance(*self.rgb)

    def with_lightness(self, lightness: float) -> "Color":
        """Same hue and chroma/saturation, new lightness in this color's own space."""
        if self.space == HSL:
            return Color.from_hsl(self.h, self.c, lightness)
        return Color.from_oklch(max(0.0, min(c.UNIT, lightness)), self.c, self.h)

    def to_space(self, space: str) -> "Color":
        """Re-express this color in another space through its clipped hex."""
        if space == self.space:
            return self
        return Color.from_hex(self.hex, space=space)

    def __str__(self) -> str:
        return self.hex


BLACK = Color.from_hex(c.TEXT_BLACK_HEX)
WHITE = Color.from_hex(c.TEXT_WHITE_HEX)


def parse(text: str) -> Color:
    """
    Parse hex (3/6 digits, '#' optional), rgb()/bare triplets, hsl(),
    oklch() or a CSS color name. Raises ParseError on anything else.
    """
    space, values = parse_color_string(text)
    if space == HSL:
        return Color.from_hsl(*values)
    if space == OKLCH:
        return Color.from_oklch(*values)
    return Color.from_rgb(*values)


def parse_or_keep(text: str, last_valid: Optional[Color]) -> Color:
    """Parse `text`, falling back to `last_valid` (or black) when it is not a color."""
    try:
        return parse(text)
    except ParseError as e:
        fallback = last_valid if last_valid is not None else BLACK
        log("warning", f"{e}; keeping {fallback.hex}")
        return fallback


def to_clipped_srgb(color: Color) -> Color:
    """
    Project a color onto the sRGB gamut. OKLCH colors are rebuilt from
    their mapped 8-bit RGB so that stored components match the hex.
    """
    if color.space == HSL:
        return color
    return Color.from_hex(color.hex, space=OKLCH)


def contrast_ratio(a: Color, b: Color) -> float:
    """WCAG 2.1 contrast ratio, truncated to two decimals."""
    return truncate_ratio(raw_contrast_ratio(a, b))


def raw_contrast_ratio(a: Color, b: Color) -> float:
    return get_contrast_ratio_rgb(a.rgb, b.rgb)
