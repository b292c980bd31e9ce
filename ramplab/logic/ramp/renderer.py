#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/renderer.py

import json
from typing import Any, Dict

from ramplab.core import config as c
from ramplab.core.color import Color
from ramplab.core.contrast import get_wcag_level
from ramplab.shared.formatting import format_colorspace, format_ratio, format_scale
from ramplab.shared.preview import pad_visible, print_color_block, swatch_cell
from .classifier import Classification
from .types import Ramp, RampPair, other_mode


def _label(key: str) -> str:
    return pad_visible(f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}", 18)


def render_color_info(color: Color, title: str, cls: Classification, anchors: Dict[str, int]) -> None:
    """Print what the engine sees in one color."""
    r, g, b = color.rgb
    h, s, l = color.hsl
    L, C, hue = color.oklch

    print()
    print_color_block(color.hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    print()
    print(f"{_label('rgb')}{c.BOLD_WHITE}: {format_colorspace('rgb', r, g, b)}{c.RESET}")
    print(f"{_label('hsl')}{c.BOLD_WHITE}: {format_colorspace('hsl', h, s, l)}{c.RESET}")
    print(f"{_label('oklch')}{c.BOLD_WHITE}: {format_colorspace('oklch', L, C, hue)}{c.RESET}")
    print(f"{_label('luminance')}{c.BOLD_WHITE}: {color.luminance:.6f}{c.RESET}")

    if cls.is_pure_white:
        kind = "pure white"
    elif cls.is_pure_black:
        kind = "pure black"
    elif cls.is_grayscale:
        kind = "grayscale"
    else:
        kind = "chromatic"
    print(f"{_label('class')}{c.BOLD_WHITE}: {kind}{c.RESET}")
    profile = cls.hue_profile.name if cls.hue_profile is not None else "none"
    print(f"{_label('hue profile')}{c.BOLD_WHITE}: {profile}{c.RESET}")
    for mode in c.MODES:
        print(f"{_label(f'{mode} anchor')}{c.BOLD_WHITE}: {anchors[mode]}{c.RESET}")
    print()


def _render_ramp(ramp: Ramp, anchor: int, is_default: bool) -> None:
    heading = f"{ramp.mode} ramp" + (" (default)" if is_default else "")
    print(f"{c.MSG_BOLD_COLORS['info']}{heading}{c.RESET}")
    for swatch in ramp:
        shortfall = not swatch.meets_minimum
        label = format_scale(swatch.scale, swatch.scale == anchor, shortfall)
        if shortfall:
            label = f"{c.MSG_BOLD_COLORS['warning']}{label}{c.RESET}"
        cell = swatch_cell(swatch.hex, swatch.text_color.hex, swatch.hex)
        level = get_wcag_level(swatch.contrast_ratio)
        print(
            f"  {pad_visible(label, 7)} {cell}  "
            f"{c.BOLD_WHITE}{format_ratio(swatch.contrast_ratio):>8}{c.RESET}  {level:<4}  "
            f"text {swatch.text_color.hex}"
        )


def render_ramp_pair(pair: RampPair, title: str) -> None:
    print()
    print_color_block(pair.base_color.hex, f"{c.BOLD_WHITE}{title}{c.RESET}")
    for mode in (pair.default_mode, other_mode(pair.default_mode)):
        print()
        _render_ramp(pair.ramp(mode), pair.anchor_scale(mode), mode == pair.default_mode)
    print()


def ramp_pair_to_dict(pair: RampPair) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "base": pair.base_color.hex,
        "defaultMode": pair.default_mode,
        "vibrancy": pair.vibrancy,
    }
    for mode in c.MODES:
        ramp = pair.ramp(mode)
        out[mode] = {
            "anchor": pair.anchor_scale(mode),
            "swatches": {
                str(s.scale): {
                    "background": s.hex,
                    "text": s.text_color.hex,
                    "contrast": s.contrast_ratio,
                    "meetsMinimum": s.meets_minimum,
                }
                for s in ramp
            },
        }
    return out


def render_ramp_json(pair: RampPair) -> None:
    print(json.dumps(ramp_pair_to_dict(pair), indent=c.JSON_INDENT))
