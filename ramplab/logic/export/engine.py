#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/export/engine.py

"""
JSON documents for the Figma variables plugin.

    paired      colors[name][scale] = {"Light": hex, "Dark": hex}
    themed      themes["Light" | "Dark"][name][scale or scale*] = hex
    light ramp  colors[name][scale] = hex   (light ramp only)
    dark ramp   colors[name][scale] = hex   (dark ramp only)

Themed documents star the anchor scale of each color once per theme.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from ramplab.core import config as c
from ramplab.core.color import parse
from ramplab.core.errors import ExportFormatError, ParseError
from ramplab.shared.logger import log
from ramplab.logic.ramp.pipeline import build_ramp_pair
from ramplab.logic.ramp.types import RampPair


@dataclass(frozen=True)
class CollectionEntry:
    name: str
    base: str
    default_mode: str = c.LIGHT
    vibrancy: int = 0


@dataclass(frozen=True)
class Collection:
    name: str
    entries: Tuple[CollectionEntry, ...]


def normalize_format(fmt: str) -> str:
    """Strip the 'figma-' prefix and check the name against the known formats."""
    name = str(fmt).strip().lower()
    if name.startswith(c.EXPORT_PREFIX):
        name = name[len(c.EXPORT_PREFIX):]
    if name not in c.EXPORT_FORMATS:
        raise ExportFormatError(f"unknown export format '{fmt}'")
    return name


def build_pairs(collection: Collection, minimum: float = c.WCAG_AA_NORMAL) -> List[Tuple[str, RampPair]]:
    """Run the pipeline for every entry, skipping entries whose base does not parse."""
    pairs = []
    for entry in collection.entries:
        try:
            base = parse(entry.base)
        except ParseError as e:
            log("warning", f"skipping '{entry.name}': {e}")
            continue
        pairs.append((entry.name, build_ramp_pair(base, entry.default_mode, entry.vibrancy, minimum)))
    return pairs


def _scale_key(scale: int, anchor: bool) -> str:
    return f"{scale}{c.ANCHOR_SUFFIX}" if anchor else str(scale)


def build_export_from_pairs(collection_name: str, pairs: Iterable[Tuple[str, RampPair]], fmt: str) -> Dict[str, Any]:
    fmt = normalize_format(fmt)
    output: Dict[str, Any] = {"format": fmt, "collectionName": collection_name}

    if fmt == c.FORMAT_THEMED:
        themes = {c.THEME_LIGHT: {}, c.THEME_DARK: {}}
        for name, pair in pairs:
            for theme, mode in ((c.THEME_LIGHT, c.LIGHT), (c.THEME_DARK, c.DARK)):
                ramp, anchor = pair.ramp(mode), pair.anchor_scale(mode)
                themes[theme][name] = {_scale_key(s.scale, s.scale == anchor): s.hex for s in ramp}
        output["themes"] = themes
        return output

    colors = {}
    for name, pair in pairs:
        if fmt == c.FORMAT_PAIRED:
            colors[name] = {
                str(scale): {c.THEME_LIGHT: pair.light[scale].hex, c.THEME_DARK: pair.dark[scale].hex}
                for scale in c.SCALES
            }
        else:
            ramp = pair.light if fmt == c.FORMAT_LIGHT_RAMP else pair.dark
            colors[name] = {str(s.scale): s.hex for s in ramp}
    output["colors"] = colors
    return output


def build_export(collection: Collection, fmt: str, minimum: float = c.WCAG_AA_NORMAL) -> Dict[str, Any]:
    # Check the format before spending time on the pipeline
    normalize_format(fmt)
    return build_export_from_pairs(collection.name, build_pairs(collection, minimum), fmt)


def dumps_export(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=c.JSON_INDENT)
