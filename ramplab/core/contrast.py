#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/contrast.py

import math

from . import config as c
from .luminance import get_luminance


def get_contrast_ratio_rgb(c1: tuple, c2: tuple) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two specific RGB colors.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*c1)
    y2 = get_luminance(*c2)

    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def truncate_ratio(ratio: float) -> float:
    """Truncate a contrast ratio to two decimals (4.589 -> 4.58)."""
    return math.floor(ratio * c.CONTRAST_DECIMALS + c.EPS) / c.CONTRAST_DECIMALS


def get_wcag_level(ratio: float) -> str:
    """Map a ratio to the highest normal-text WCAG level it satisfies."""
    if ratio >= c.WCAG_AAA_NORMAL:
        return "AAA"
    if ratio >= c.WCAG_AA_NORMAL:
        return "AA"
    return "Fail"
