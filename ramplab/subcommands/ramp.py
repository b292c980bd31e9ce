#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/subcommands/ramp.py

import argparse
import sys
from ramplab.core import config as c
from ramplab.shared.logger import RamplabArgumentParser
from ramplab.shared.sanitizer import INPUT_HANDLERS
from ramplab.shared.preview import ensure_truecolor
from ramplab.logic.ramp.resolver import resolve_ramp_input

def get_ramp_parser() -> argparse.ArgumentParser:
    """Create argument parser for ramp command."""
    parser = RamplabArgumentParser(
        prog="ramplab ramp",
        description="ramplab ramp: generate accessible light and dark ramps from one color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "color",
        type=INPUT_HANDLERS["color"],
        help="base color: hex, rgb(), hsl(), oklch() or a color name"
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["mode"],
        default=c.LIGHT,
        help="ramp that reproduces the exact input (default: light)"
    )
    parser.add_argument(
        "-V",
        "--vibrancy",
        type=INPUT_HANDLERS["vibrancy"],
        default=0,
        help=f"chroma boost for chromatic colors (default: 0, max: {c.VIBRANCY_MAX})"
    )
    parser.add_argument(
        "--aaa",
        action="store_true",
        help=f"require {c.WCAG_AAA_NORMAL}:1 text contrast instead of {c.WCAG_AA_NORMAL}:1"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the ramp pair as json"
    )

    return parser

def main() -> None:
    """Main entry point for ramp command."""
    parser = get_ramp_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_ramp_input(args)

if __name__ == "__main__":
    main()
