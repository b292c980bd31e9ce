#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/shared/logger.py

"""
Tagged console messages for ramp generation and export.

Progress lines ('info', 'success') go to stdout next to rendered ramps;
warnings about contrast shortfalls or unsettled shades and every error go
to stderr, so `ramplab ramp --json > out.json` keeps a clean document.
"""

import sys
import argparse

from ramplab.core import config as c

STDOUT_LEVELS = ("info", "success")


def log(level: str, message: str) -> None:
    tag = str(level).lower()
    out = sys.stdout if tag in STDOUT_LEVELS else sys.stderr
    tag_style = c.MSG_BOLD_COLORS.get(tag, c.RESET)
    body_style = c.MSG_COLORS.get(tag, c.RESET)
    out.write(f"{tag_style}[{tag}]{c.RESET} {body_style}{message}{c.RESET}\n")


class RamplabArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors read like every other ramplab message."""

    def error(self, message):
        log("error", f"{self.prog}: {message}")
        sys.exit(2)
