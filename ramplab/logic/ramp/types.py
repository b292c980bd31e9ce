#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/types.py

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Tuple

from ramplab.core import config as c
from ramplab.core.color import Color


@dataclass(frozen=True)
class Swatch:
    scale: int
    background: Color
    text_color: Color
    contrast_ratio: float
    meets_minimum: bool

    @property
    def hex(self) -> str:
        return self.background.hex


@dataclass(frozen=True)
class RawRamp:
    """Generator output: one color per scale, before any accessibility pass."""

    mode: str
    colors: Tuple[Color, ...]
    anchor_scale: int
    pinned: bool

    def __getitem__(self, scale: int) -> Color:
        return self.colors[c.SCALES.index(scale)]

    def __len__(self) -> int:
        return len(self.colors)


@dataclass(frozen=True)
class Ramp:
    """Eleven swatches in scale order. Never mutated; use `with_swatch` to derive."""

    mode: str
    swatches: Tuple[Swatch, ...]

    def __post_init__(self):
        if tuple(s.scale for s in self.swatches) != c.SCALES:
            raise ValueError(f"a {self.mode} ramp needs exactly the scales {c.SCALES}")

    def __getitem__(self, scale: int) -> Swatch:
        return self.swatches[c.SCALES.index(scale)]

    def __iter__(self) -> Iterator[Swatch]:
        return iter(self.swatches)

    def __len__(self) -> int:
        return len(self.swatches)

    def keys(self) -> Tuple[int, ...]:
        return c.SCALES

    @property
    def hexes(self) -> Tuple[str, ...]:
        return tuple(s.background.hex for s in self.swatches)

    def with_swatch(self, swatch: Swatch) -> "Ramp":
        idx = c.SCALES.index(swatch.scale)
        return replace(self, swatches=self.swatches[:idx] + (swatch,) + self.swatches[idx + 1:])

    def as_dict(self) -> Dict[int, str]:
        return {s.scale: s.background.hex for s in self.swatches}


@dataclass(frozen=True)
class RampPair:
    light: Ramp
    dark: Ramp
    base_color: Color
    anchor_scale_light: int
    anchor_scale_dark: int
    default_mode: str = c.LIGHT
    vibrancy: int = 0

    def ramp(self, mode: str) -> Ramp:
        return self.light if mode == c.LIGHT else self.dark

    def anchor_scale(self, mode: str) -> int:
        return self.anchor_scale_light if mode == c.LIGHT else self.anchor_scale_dark

    @property
    def shortfalls(self) -> List[Tuple[str, int, float]]:
        """(mode, scale, ratio) for every swatch below its contrast minimum."""
        found = []
        for ramp in (self.light, self.dark):
            for swatch in ramp:
                if not swatch.meets_minimum:
                    found.append((ramp.mode, swatch.scale, swatch.contrast_ratio))
        return found


def other_mode(mode: str) -> str:
    return c.DARK if mode == c.LIGHT else c.LIGHT


def scale_index(scale: int) -> int:
    return c.SCALES.index(scale)


def mirror_scale(scale: int) -> int:
    """The scale at the mirrored position (50 <-> 950, 500 <-> 500)."""
    return c.SCALES[len(c.SCALES) - 1 - c.SCALES.index(scale)]
