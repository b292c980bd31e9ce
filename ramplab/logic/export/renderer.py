#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/export/renderer.py

from typing import Any, Dict

from ramplab.core import config as c
from ramplab.shared.preview import print_color_block


def render_export(text: str) -> None:
    print(text)


def render_import_summary(collection_name: str, fmt: str, colors: Dict[str, Dict[str, Any]]) -> None:
    """List each imported color with the shade it is anchored on, per ramp."""
    print()
    print(f"{c.MSG_BOLD_COLORS['info']}collection{c.RESET}        {c.BOLD_WHITE}: {collection_name}{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['info']}format{c.RESET}            {c.BOLD_WHITE}: {fmt}{c.RESET}")
    print(f"{c.MSG_BOLD_COLORS['info']}colors{c.RESET}            {c.BOLD_WHITE}: {len(colors)}{c.RESET}")
    for name, entry in colors.items():
        print()
        for mode in c.MODES:
            ramp = entry[mode]
            if not ramp:
                continue
            scale = entry["anchors"].get(mode) or c.MID_SCALE
            print_color_block(ramp[scale], f"{c.BOLD_WHITE}{name}{c.RESET} {mode} {scale}")
    print()
