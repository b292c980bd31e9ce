#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/pipeline.py

from typing import Optional

from ramplab.core import config as c
from ramplab.core.color import Color, parse_or_keep
from ramplab.shared.logger import log
from . import continuity, uniqueness
from .accessibility import enforce
from .classifier import Classification, classify
from .engine import generate
from .types import RampPair, RawRamp, Ramp, other_mode


def enforce_ramp(raw: RawRamp, minimum: float = c.WCAG_AA_NORMAL) -> Ramp:
    return Ramp(raw.mode, tuple(enforce(color, scale, minimum) for scale, color in zip(c.SCALES, raw.colors)))


def build_ramp_pair(
    base: Color,
    default_mode: str = c.LIGHT,
    vibrancy: int = 0,
    minimum: float = c.WCAG_AA_NORMAL,
    classification: Optional[Classification] = None,
) -> RampPair:
    """
    Run the whole chain for one base color:
    classify -> generate both ramps -> enforce contrast -> resolve collisions
    -> space lightness. The default ramp is finished first and its shades
    are off limits to the other ramp.
    """
    if default_mode not in c.MODES:
        raise ValueError(f"unknown ramp mode '{default_mode}'")
    cls = classification if classification is not None else classify(base)
    secondary_mode = other_mode(default_mode)

    raws = {
        mode: generate(base, mode, mode == default_mode, vibrancy, cls)
        for mode in c.MODES
    }
    enforced = {mode: enforce_ramp(raw, minimum) for mode, raw in raws.items()}

    anchor = raws[default_mode].anchor_scale
    light, dark = uniqueness.resolve(
        enforced[c.LIGHT],
        enforced[c.DARK],
        pinned={default_mode: anchor},
        classification=cls,
        minimum=minimum,
        first_mode=default_mode,
    )
    resolved = {c.LIGHT: light, c.DARK: dark}

    primary = continuity.adjust(resolved[default_mode], cls, pinned_scale=anchor, minimum=minimum)
    secondary = continuity.adjust(resolved[secondary_mode], cls, taken=primary.hexes, minimum=minimum)
    final = {default_mode: primary, secondary_mode: secondary}

    pair = RampPair(
        light=final[c.LIGHT],
        dark=final[c.DARK],
        base_color=base,
        anchor_scale_light=raws[c.LIGHT].anchor_scale,
        anchor_scale_dark=raws[c.DARK].anchor_scale,
        default_mode=default_mode,
        vibrancy=vibrancy,
    )

    for mode, scale, ratio in pair.shortfalls:
        log("warning", f"{mode} {scale} only reaches {ratio:.2f}:1 (needs {minimum:.1f}:1)")
    return pair


def build_ramp_pair_from_string(
    text: str,
    last_valid: Optional[Color] = None,
    default_mode: str = c.LIGHT,
    vibrancy: int = 0,
    minimum: float = c.WCAG_AA_NORMAL,
) -> RampPair:
    """Like `build_ramp_pair`, keeping `last_valid` when `text` does not parse."""
    return build_ramp_pair(parse_or_keep(text, last_valid), default_mode, vibrancy, minimum)
