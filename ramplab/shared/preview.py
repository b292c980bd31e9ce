#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/shared/preview.py

import os
import re
import sys

from ramplab.core.conversions import hex_to_rgb
from ramplab.core import config as c

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def ensure_truecolor() -> None:
    """Ask the terminal for 24-bit color before drawing swatches."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") != "truecolor":
        os.environ["COLORTERM"] = "truecolor"


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def pad_visible(s: str, width: int) -> str:
    return s + " " * max(0, width - get_visible_len(s))


def swatch_cell(background_hex: str, text_hex: str, label: str, width: int = 10) -> str:
    """A fixed-width cell painted in `background_hex` with `label` written in `text_hex`."""
    br, bg, bb = hex_to_rgb(background_hex)
    tr, tg, tb = hex_to_rgb(text_hex)
    return f"\033[48;2;{br};{bg};{bb}m\033[38;2;{tr};{tg};{tb}m{label.center(width)}{c.RESET}"


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = hex_to_rgb(hex_code)
    padding = " " * max(0, 18 - get_visible_len(title))

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{hex_code}{c.RESET}", end=end)
