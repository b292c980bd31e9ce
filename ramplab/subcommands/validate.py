#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/subcommands/validate.py

import argparse
import sys
from ramplab.shared.logger import RamplabArgumentParser
from ramplab.shared.preview import ensure_truecolor
from ramplab.logic.export.resolver import resolve_validate_input

def get_validate_parser() -> argparse.ArgumentParser:
    """Create argument parser for validate command."""
    parser = RamplabArgumentParser(
        prog="ramplab validate",
        description="ramplab validate: check an export file and summarise its colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "file",
        help="path to a json export"
    )

    return parser

def main() -> None:
    """Main entry point for validate command."""
    parser = get_validate_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    resolve_validate_input(args)

if __name__ == "__main__":
    main()
