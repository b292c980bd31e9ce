#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/subcommands/export.py

import argparse
import sys
from ramplab.core import config as c
from ramplab.shared.logger import RamplabArgumentParser
from ramplab.shared.sanitizer import INPUT_HANDLERS
from ramplab.logic.export.resolver import resolve_export_input

def get_export_parser() -> argparse.ArgumentParser:
    """Create argument parser for export command."""
    parser = RamplabArgumentParser(
        prog="ramplab export",
        description="ramplab export: write a color collection as Figma variables json",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-e",
        "--entry",
        action="append",
        type=INPUT_HANDLERS["entry"],
        help="use -e NAME=COLOR multiple times for the collection's colors"
    )
    parser.add_argument(
        "-f",
        "--format",
        type=INPUT_HANDLERS["export_format"],
        default=c.FORMAT_THEMED,
        help=f"one of: {', '.join(c.EXPORT_FORMATS)} (default: {c.FORMAT_THEMED})"
    )
    parser.add_argument(
        "-n",
        "--name",
        type=INPUT_HANDLERS["text"],
        default="Colors",
        help="collection name (default: Colors)"
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="file to write instead of stdout"
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=INPUT_HANDLERS["mode"],
        default=c.LIGHT,
        help="ramp that reproduces each exact input (default: light)"
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

    return parser

def main() -> None:
    """Main entry point for export command."""
    parser = get_export_parser()
    args = parser.parse_args(sys.argv[1:])
    resolve_export_input(args)

if __name__ == "__main__":
    main()
