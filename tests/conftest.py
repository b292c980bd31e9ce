"""Shared pytest fixtures for ramplab tests."""

from __future__ import annotations

import pytest

from ramplab.core import config as c
from ramplab.core.color import Color, parse
from ramplab.logic.ramp.pipeline import build_ramp_pair
from ramplab.logic.ramp.types import RampPair

# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def gray() -> Color:
    """Pure mid gray, saturation 0."""
    return parse("#808080")


@pytest.fixture
def white() -> Color:
    return parse("#FFFFFF")


@pytest.fixture
def navy() -> Color:
    """Dark blue inside the blue hue profile (hue about 226)."""
    return parse("#172554")


@pytest.fixture
def red() -> Color:
    return parse("#FF0000")


# ============================================================================
# Ramp Pair Fixtures
# ============================================================================


@pytest.fixture
def gray_pair(gray: Color) -> RampPair:
    return build_ramp_pair(gray, c.LIGHT)


@pytest.fixture
def white_pair(white: Color) -> RampPair:
    return build_ramp_pair(white, c.LIGHT)


@pytest.fixture
def navy_dark_pair(navy: Color) -> RampPair:
    return build_ramp_pair(navy, c.DARK)


@pytest.fixture
def red_pair(red: Color) -> RampPair:
    return build_ramp_pair(red, c.LIGHT)


@pytest.fixture(autouse=True)
def truecolor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI's COLORTERM tweak from leaking between tests."""
    monkeypatch.setenv("COLORTERM", "truecolor")
