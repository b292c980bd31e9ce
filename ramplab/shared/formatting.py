#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%)"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.4f}deg)"

    return ""


def format_ratio(ratio: float) -> str:
    """Contrast ratios are already truncated; show exactly two decimals."""
    return f"{ratio:.2f}:1"


def format_scale(scale: int, anchor: bool = False, shortfall: bool = False) -> str:
    marks = ("*" if anchor else "") + ("!" if shortfall else "")
    return f"{scale}{marks}"
