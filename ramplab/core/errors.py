#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/core/errors.py


class ParseError(ValueError):
    """Raised when a color string cannot be understood."""

    def __init__(self, value, reason: str = "unrecognized color"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: '{value}'")


class ExportFormatError(ValueError):
    """Raised when an export document does not follow the wire schema."""
