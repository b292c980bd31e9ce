#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/resolver.py

import argparse
import sys
from typing import Tuple

from ramplab.core import config as c
from ramplab.core.color import Color, parse
from ramplab.core.errors import ParseError
from ramplab.shared.logger import log
from ramplab.shared.naming import get_title_for_hex
from .classifier import classify
from .engine import generate
from .pipeline import build_ramp_pair
from .renderer import render_color_info, render_ramp_json, render_ramp_pair


def resolve_color_or_exit(text: str) -> Tuple[Color, str]:
    """Parse a CLI color and pick a display title for it."""
    try:
        color = parse(text)
    except ParseError as e:
        log("error", str(e))
        sys.exit(2)
    return color, get_title_for_hex(color.hex, "current")


def resolve_inspect_input(args: argparse.Namespace) -> None:
    color, title = resolve_color_or_exit(args.color)
    cls = classify(color)
    anchors = {mode: generate(color, mode, True, 0, cls).anchor_scale for mode in c.MODES}
    render_color_info(color, title, cls, anchors)


def resolve_ramp_input(args: argparse.Namespace) -> None:
    """Orchestrate input resolution and ramp generation."""
    color, title = resolve_color_or_exit(args.color)
    minimum = c.WCAG_AAA_NORMAL if args.aaa else c.WCAG_AA_NORMAL
    pair = build_ramp_pair(color, args.mode, args.vibrancy, minimum)

    if args.json:
        render_ramp_json(pair)
    else:
        render_ramp_pair(pair, title)
