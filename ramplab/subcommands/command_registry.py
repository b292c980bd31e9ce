#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/subcommands/command_registry.py

from . import (
    ramp,
    export,
    validate,
)

SUBCOMMANDS = {
    'ramp': ramp,
    'export': export,
    'validate': validate,
}
