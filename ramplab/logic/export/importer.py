#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/export/importer.py

import json
import re
from typing import Any, Dict, Optional, Tuple, Union

from ramplab.core import config as c
from ramplab.core.errors import ExportFormatError
from ramplab.shared.sanitizer import normalize_hex
from .engine import normalize_format

HEX_VALUE_PATTERN = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
SCALE_KEYS = {str(scale): scale for scale in c.SCALES}


def _hex(value: Any, where: str) -> str:
    if not isinstance(value, str) or not HEX_VALUE_PATTERN.match(value.strip()):
        raise ExportFormatError(f"{where}: expected '#RRGGBB', got {value!r}")
    return "#" + normalize_hex(value)


def _mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ExportFormatError(f"{where}: expected an object")
    return value


def _read_ramp(body: Any, where: str, allow_anchor: bool = False) -> Tuple[Dict[int, str], Optional[int]]:
    """Return ({scale: hex}, starred scale) for one color's ramp object."""
    body = _mapping(body, where)
    ramp: Dict[int, str] = {}
    anchors = []
    for key, value in body.items():
        raw = str(key)
        starred = allow_anchor and raw.endswith(c.ANCHOR_SUFFIX)
        if starred:
            raw = raw[:-len(c.ANCHOR_SUFFIX)]
        if raw not in SCALE_KEYS:
            raise ExportFormatError(f"{where}: unknown scale key '{key}'")
        scale = SCALE_KEYS[raw]
        if scale in ramp:
            raise ExportFormatError(f"{where}: scale {scale} appears twice")
        ramp[scale] = _hex(value, f"{where}.{key}")
        if starred:
            anchors.append(scale)

    missing = [s for s in c.SCALES if s not in ramp]
    if missing:
        raise ExportFormatError(f"{where}: missing scales {missing}")
    if allow_anchor and len(anchors) != 1:
        raise ExportFormatError(f"{where}: expected exactly one '{c.ANCHOR_SUFFIX}' scale, found {len(anchors)}")
    return {s: ramp[s] for s in c.SCALES}, (anchors[0] if anchors else None)


def _empty() -> Dict[str, Any]:
    return {"light": {}, "dark": {}, "anchors": {}}


def load_export(source: Union[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Validate an export document and read its colors back.

    Accepts the JSON text or an already-decoded dict. Returns
    {name: {"light": {scale: hex}, "dark": {scale: hex}, "anchors": {mode: scale}}}
    with hex normalized to uppercase '#RRGGBB'. Single-ramp documents leave
    the other ramp empty; only themed documents carry anchors.
    """
    if isinstance(source, str):
        try:
            document = json.loads(source)
        except json.JSONDecodeError as e:
            raise ExportFormatError(f"not valid JSON: {e.msg} (line {e.lineno})") from e
    else:
        document = source

    document = _mapping(document, "document")
    if "format" not in document:
        raise ExportFormatError("document: missing 'format'")
    fmt = normalize_format(document["format"])
    if not isinstance(document.get("collectionName"), str):
        raise ExportFormatError("document: 'collectionName' must be a string")

    result: Dict[str, Dict[str, Any]] = {}

    if fmt == c.FORMAT_THEMED:
        themes = _mapping(document.get("themes"), "themes")
        light = _mapping(themes.get(c.THEME_LIGHT), f"themes.{c.THEME_LIGHT}")
        dark = _mapping(themes.get(c.THEME_DARK), f"themes.{c.THEME_DARK}")
        if set(light) != set(dark):
            raise ExportFormatError("themes: Light and Dark must list the same colors")
        for name in light:
            entry = result.setdefault(name, _empty())
            for mode, theme, body in ((c.LIGHT, c.THEME_LIGHT, light[name]), (c.DARK, c.THEME_DARK, dark[name])):
                ramp, anchor = _read_ramp(body, f"themes.{theme}.{name}", allow_anchor=True)
                entry[mode] = ramp
                entry["anchors"][mode] = anchor
        return result

    colors = _mapping(document.get("colors"), "colors")
    for name, body in colors.items():
        entry = result.setdefault(name, _empty())
        where = f"colors.{name}"
        if fmt == c.FORMAT_PAIRED:
            body = _mapping(body, where)
            light_body, dark_body = {}, {}
            for key, cell in body.items():
                cell = _mapping(cell, f"{where}.{key}")
                if c.THEME_LIGHT not in cell or c.THEME_DARK not in cell:
                    raise ExportFormatError(f"{where}.{key}: expected 'Light' and 'Dark'")
                light_body[key] = cell[c.THEME_LIGHT]
                dark_body[key] = cell[c.THEME_DARK]
            entry[c.LIGHT], _ = _read_ramp(light_body, f"{where}.Light")
            entry[c.DARK], _ = _read_ramp(dark_body, f"{where}.Dark")
        else:
            mode = c.LIGHT if fmt == c.FORMAT_LIGHT_RAMP else c.DARK
            entry[mode], _ = _read_ramp(body, where)
    return result
