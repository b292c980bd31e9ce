#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/export/resolver.py

import argparse
import json
import sys

from ramplab.core import config as c
from ramplab.core.errors import ExportFormatError
from ramplab.shared.logger import log
from .engine import Collection, CollectionEntry, build_export, dumps_export, normalize_format
from .importer import load_export
from .renderer import render_export, render_import_summary


def resolve_export_input(args: argparse.Namespace) -> None:
    """Build the collection from -e entries and write the export document."""
    entries = args.entry or []
    if not entries:
        log("error", "at least one entry is required")
        log("info", "use -e NAME=COLOR multiple times")
        sys.exit(2)
    if len(entries) > c.MAX_ENTRIES:
        log("error", f"a collection holds at most {c.MAX_ENTRIES} colors")
        sys.exit(2)

    names = [name for name, _ in entries]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        log("error", f"duplicate color names: {', '.join(duplicates)}")
        sys.exit(2)

    collection = Collection(
        name=args.name,
        entries=tuple(CollectionEntry(name, color, args.mode, args.vibrancy) for name, color in entries),
    )
    minimum = c.WCAG_AAA_NORMAL if args.aaa else c.WCAG_AA_NORMAL
    text = dumps_export(build_export(collection, args.format, minimum))

    if not args.output:
        render_export(text)
        return
    try:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
    except OSError as e:
        log("error", f"cannot write '{args.output}': {e.strerror}")
        sys.exit(1)
    log("success", f"wrote {args.format} export of '{collection.name}' to {args.output}")


def resolve_validate_input(args: argparse.Namespace) -> None:
    """Load an export file, check it against the schema and summarise it."""
    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        log("error", f"cannot read '{args.file}': {e.strerror}")
        sys.exit(1)

    try:
        document = json.loads(text)
        colors = load_export(document)
    except json.JSONDecodeError as e:
        log("error", f"'{args.file}' is not valid JSON: {e.msg} (line {e.lineno})")
        sys.exit(1)
    except ExportFormatError as e:
        log("error", f"'{args.file}' is not a valid export: {e}")
        sys.exit(1)

    render_import_summary(document["collectionName"], normalize_format(document["format"]), colors)
    log("success", f"'{args.file}' is a valid export")
