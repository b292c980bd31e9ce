#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/shared/sanitizer.py

import argparse
import re
from typing import Tuple

from ramplab.core import config as c
from ramplab.core.errors import ParseError
from .string_parser import parse_color_string


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes '#abc', 'abc', '#AABBCC' or 'aabbcc' into a 6-character
    uppercase hex string without '#'. Returns '' when the value is not hex.
    """
    if value is None:
        return ""
    s = str(value).strip().replace("#", "").upper()
    if not re.fullmatch(r"[0-9A-F]{3}|[0-9A-F]{6}", s):
        return ""
    if len(s) == 3:
        return "".join(ch * 2 for ch in s)
    return s


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")

    digits_only = "".join(re.findall(r"[0-9]", s))
    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def _extract_alpha_only(value: str) -> str:
    """Extracts only alphabetical characters from a string, lowercasing them."""
    if value is None:
        return ""
    return "".join(re.findall(r"[a-z]", str(value).lower()))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> str:
    """Validator for any supported color string (hex, rgb, hsl, oklch, name)."""
    try:
        parse_color_string(v)
    except ParseError as e:
        raise argparse.ArgumentTypeError(f"invalid color: '{_sanitize_for_log(v)}' ({e.reason})")
    return str(v).strip()


def handle_mode(v: str) -> str:
    """Validator for the default ramp direction."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.MODES:
        raise argparse.ArgumentTypeError(
            f"invalid mode: '{_sanitize_for_log(v)}' (choose from {', '.join(c.MODES)})"
        )
    return cleaned


def handle_export_format(v: str) -> str:
    """
    Validator for export formats. Accepts the wire names plus 'figma-'
    prefixed, dashed and underscored spellings ('figma-themed', 'light-ramp').
    """
    raw = str(v).strip().lower()
    if raw.startswith(c.EXPORT_PREFIX):
        raw = raw[len(c.EXPORT_PREFIX):]
    cleaned = re.sub(r"[\s_\-]+", " ", raw).strip()
    if cleaned == "light" or cleaned == "lightramp":
        cleaned = c.FORMAT_LIGHT_RAMP
    elif cleaned == "dark" or cleaned == "darkramp":
        cleaned = c.FORMAT_DARK_RAMP
    if cleaned not in c.EXPORT_FORMATS:
        raise argparse.ArgumentTypeError(f"invalid export format: '{_sanitize_for_log(v)}'")
    return cleaned


def handle_entry(v: str) -> Tuple[str, str]:
    """Validator for 'NAME=COLOR' collection entries."""
    name, sep, color = str(v).partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"invalid entry: '{_sanitize_for_log(v)}' (expected NAME=COLOR)")
    return name, handle_color(color)


def handle_text(v: str) -> str:
    """Validator for free text such as collection names."""
    cleaned = _sanitize_for_log(v)
    if not cleaned:
        raise argparse.ArgumentTypeError("value must not be empty")
    return cleaned


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# This dictionary maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "color": handle_color,
    "mode": handle_mode,
    "export_format": handle_export_format,
    "entry": handle_entry,
    "text": handle_text,
    "color_name": _extract_alpha_only,
    "vibrancy": handle_int_range(0, c.VIBRANCY_MAX),
}
