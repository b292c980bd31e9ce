#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/main.py

import argparse
import sys

from ramplab import __version__
from ramplab.logic.ramp.resolver import resolve_inspect_input
from ramplab.subcommands.command_registry import SUBCOMMANDS
from ramplab.shared.naming import handle_list_color_names_action
from ramplab.shared.logger import log, RamplabArgumentParser
from ramplab.shared.sanitizer import INPUT_HANDLERS
from ramplab.shared.preview import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = RamplabArgumentParser(
        prog="ramplab",
        description="ramplab: accessible light and dark color ramps from a single color",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"ramplab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "--list-color-names",
        nargs="?",
        const="text",
        default=None,
        choices=["text", "json", "prettyjson"],
        type=INPUT_HANDLERS["color_name"],
        help="list available color names and exit",
    )
    parser.add_argument(
        "-c",
        "--color",
        type=INPUT_HANDLERS["color"],
        help="color to inspect: hex, rgb(), hsl(), oklch() or a color name",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.list_color_names:
        handle_list_color_names_action(args.list_color_names)
        sys.exit(0)

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser", None)
            if getter is None:
                log("info", f"help for '{name}' not available")
                continue
            getter().print_help()
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    if not args.color:
        log("error", "the argument -c/--color is required")
        log("info", "use 'ramplab --help' for more information")
        sys.exit(2)

    resolve_inspect_input(args)


def main() -> None:
    """Main entry point for ramplab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args()
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
