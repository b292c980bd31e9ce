#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/uniqueness.py

"""
Collision resolution across a light/dark pair.

Colliding shades are perturbed by an ordered list of strategies. The
deterministic tiers escalate from lightness, to lightness plus saturation,
to lightness plus saturation plus hue. The randomized tier comes last and
draws from a generator seeded by the collision itself, so the pipeline
stays reproducible, and then scans its lightness band level by level.
Every tier is finite.
"""

import math
import random
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Set, Tuple

from ramplab.core import config as c
from ramplab.core.color import Color
from ramplab.shared.clamping import _clamp
from ramplab.shared.logger import log
from .accessibility import enforce
from .classifier import Classification
from .profiles import HueProfile
from .types import Ramp, Swatch, other_mode


@dataclass(frozen=True)
class Collision:
    mode: str
    scale: int
    color: Color
    grayscale: bool
    profile: Optional[HueProfile]

    @property
    def directions(self) -> Tuple[float, float]:
        """(lightness, saturation) step signs; each ramp pushes a shade toward its own end."""
        if self.mode == c.LIGHT:
            toward_light = self.scale <= c.MID_SCALE
        else:
            toward_light = self.scale >= c.MID_SCALE
        if toward_light:
            return c.UNIQUE_LIGHTNESS_STEP, -c.UNIQUE_SATURATION_STEP
        return -c.UNIQUE_LIGHTNESS_STEP, c.UNIQUE_SATURATION_STEP


def collision_for(mode: str, scale: int, color: Color, classification: Optional[Classification] = None) -> Collision:
    """Describe a clashing shade; near-neutral shades are treated as gray."""
    _, s, _ = color.hsl
    grayscale = (classification is not None and classification.is_grayscale) or s < c.GRAYSCALE_HSL_SATURATION
    profile = classification.hue_profile if classification is not None and mode == c.DARK else None
    return Collision(mode=mode, scale=scale, color=color, grayscale=grayscale, profile=profile)


def perturb(collision: Collision, attempt: int) -> Color:
    h, s, l = collision.color.hsl
    dl, ds = collision.directions

    if collision.grayscale:
        lo, hi = c.UNIQUE_GRAY_L_RANGE
        return Color.from_hsl(0.0, 0.0, _clamp(l + dl * attempt * c.UNIQUE_GRAY_STEP_SCALE, lo, hi))

    lo, hi = c.UNIQUE_COLOR_L_RANGE
    lightness = _clamp(l + dl * attempt, lo, hi)

    saturation = s
    if attempt >= c.UNIQUE_SATURATION_FROM:
        lo, hi = c.UNIQUE_COLOR_S_RANGE
        saturation = _clamp(s + ds * (attempt - c.UNIQUE_SATURATION_OFFSET), lo, hi)
    if collision.profile is not None:
        saturation = collision.profile.clamp_saturation(saturation)

    hue = h
    if attempt >= c.UNIQUE_HUE_FROM:
        hue = h + (attempt - c.UNIQUE_HUE_OFFSET) * c.UNIQUE_HUE_STEP

    return Color.from_hsl(hue, saturation, lightness)


def _random_band(collision: Collision) -> Tuple[float, float]:
    """(low, high) lightness that keeps the shade on its own side of the ramp."""
    if collision.mode == c.LIGHT:
        offset, span = c.RANDOM_LIGHT_BAND if collision.scale <= c.MID_SCALE else c.RANDOM_DARK_BAND
    elif collision.scale >= c.MID_SCALE:
        offset, span = c.RANDOM_GRAY_DARK_RAMP_LIGHT_BAND if collision.grayscale else c.RANDOM_LIGHT_BAND
    else:
        offset, span = c.RANDOM_DARK_BAND
    high = offset + span
    if collision.grayscale:
        high = min(c.RANDOM_GRAY_CAP, high)
    return offset, high


def randomized(collision: Collision) -> Iterator[Color]:
    """
    Seeded draws from the collision's lightness band, then every 8-bit
    lightness level of that band in ascending order. The sequence is finite.
    """
    rng = random.Random(f"{collision.color.hex}-{collision.mode}-{collision.scale}")
    h, s, _ = collision.color.hsl
    low, high = _random_band(collision)

    for _ in range(c.UNIQUENESS_RANDOM_DRAWS):
        lightness = low + rng.random() * (high - low)
        if collision.grayscale:
            yield Color.from_hsl(0.0, 0.0, lightness)
            continue
        hue = h + c.RANDOM_HUE_SHIFT[0] + rng.random() * c.RANDOM_HUE_SHIFT[1]
        saturation = c.RANDOM_SATURATION[0] + rng.random() * c.RANDOM_SATURATION[1]
        if collision.profile is not None:
            saturation = collision.profile.clamp_saturation(saturation)
        yield Color.from_hsl(hue, saturation, lightness)

    if collision.grayscale:
        h = s = 0.0
    elif collision.profile is not None:
        s = collision.profile.clamp_saturation(s)
    for level in range(math.ceil(low * c.RGB_MAX - c.EPS), math.floor(high * c.RGB_MAX + c.EPS) + 1):
        yield Color.from_hsl(h, s, level / c.RGB_MAX)


def _attempts(first: int, last: int) -> Callable[[Collision], Iterator[Color]]:
    def tier(collision: Collision) -> Iterator[Color]:
        for attempt in range(first, last + 1):
            yield perturb(collision, attempt)
    return tier


STRATEGIES: Tuple[Tuple[str, Callable[[Collision], Iterator[Color]]], ...] = (
    ("lightness", _attempts(1, c.UNIQUE_SATURATION_FROM - 1)),
    ("saturation", _attempts(c.UNIQUE_SATURATION_FROM, c.UNIQUE_HUE_FROM - 1)),
    ("hue", _attempts(c.UNIQUE_HUE_FROM, c.UNIQUENESS_MAX_ATTEMPTS)),
    ("random", randomized),
)


def candidates(collision: Collision) -> Iterator[Tuple[str, Color]]:
    """Every replacement the strategies offer, in escalation order."""
    for name, strategy in STRATEGIES:
        for color in strategy(collision):
            yield name, color


def free_candidate(collision: Collision, seen: Set[str], minimum: float = c.WCAG_AA_NORMAL) -> Optional[Swatch]:
    """The first enforced candidate whose hex is not in `seen`, if any."""
    for _, color in candidates(collision):
        swatch = enforce(color, collision.scale, minimum)
        if swatch.hex not in seen:
            return swatch
    return None


def resolve(
    light: Ramp,
    dark: Ramp,
    pinned: Optional[Dict[str, int]] = None,
    classification: Optional[Classification] = None,
    minimum: float = c.WCAG_AA_NORMAL,
    first_mode: str = c.LIGHT,
) -> Tuple[Ramp, Ramp]:
    """
    Make every background hex in the pair distinct.

    Pinned shades are claimed first and never replaced. The remaining shades
    are visited ramp by ramp in scale order, `first_mode` first; a shade
    whose hex was already seen is replaced by the first candidate that is
    still free after accessibility enforcement. A pair that is already
    unique comes back as the very same objects.
    """
    pinned = pinned or {}
    ramps = {c.LIGHT: light, c.DARK: dark}

    seen = set()
    for mode, scale in pinned.items():
        seen.add(ramps[mode][scale].hex)

    for mode in (first_mode, other_mode(first_mode)):
        ramp = ramps[mode]
        for swatch in ramp:
            if pinned.get(mode) == swatch.scale:
                continue
            if swatch.hex not in seen:
                seen.add(swatch.hex)
                continue

            collision = collision_for(mode, swatch.scale, swatch.background, classification)
            replacement = free_candidate(collision, seen, minimum)
            if replacement is None:
                log("warning", f"{mode} {swatch.scale} {swatch.hex} has no free replacement")
                replacement = swatch
            ramp = ramp.with_swatch(replacement)
            seen.add(replacement.hex)
        ramps[mode] = ramp

    return ramps[c.LIGHT], ramps[c.DARK]


def has_collisions(light: Ramp, dark: Ramp) -> bool:
    hexes = light.hexes + dark.hexes
    return len(set(hexes)) != len(hexes)
