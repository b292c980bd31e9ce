"""Tests for classification and raw ramp generation."""

from __future__ import annotations

import pytest

from ramplab.core import config as c
from ramplab.core.color import Color, parse
from ramplab.logic.ramp.classifier import classify
from ramplab.logic.ramp.engine import (
    generate,
    interpolate_oklch,
    quantize_anchor,
    vibrancy_compression,
)
from ramplab.logic.ramp.profiles import find_hue_profile


class TestClassify:
    """Tests for sorting base colors into generator branches."""

    def test_gray(self, gray: Color) -> None:
        cls = classify(gray)
        assert cls.is_grayscale
        assert not cls.is_pure_white and not cls.is_pure_black
        assert cls.hue_profile is None

    def test_pure_white_and_black(self) -> None:
        assert classify(parse("#FFFFFF")).is_pure_white
        assert classify(parse("#000000")).is_pure_black
        assert classify(parse("#FFFFFF")).is_grayscale

    def test_low_saturation_counts_as_gray(self) -> None:
        """Saturation under 0.05 is grayscale even with a hue."""
        assert classify(Color.from_hsl(210, 0.03, 0.5)).is_grayscale

    def test_navy_is_blue_profile(self, navy: Color) -> None:
        cls = classify(navy)
        assert not cls.is_grayscale
        assert cls.hue_profile.name == "blue"
        assert cls.hue == pytest.approx(226.2, abs=0.1)
        assert cls.saturation == pytest.approx(0.570, abs=1e-3)
        assert cls.lightness == pytest.approx(0.2098, abs=1e-3)

    def test_red_wraps_into_red_orange(self, red: Color) -> None:
        assert classify(red).hue_profile.name == "red-orange"

    def test_yellow_has_no_profile(self) -> None:
        assert classify(parse("#FFFF00")).hue_profile is None

    def test_green_flag(self) -> None:
        assert classify(parse("#00FF00")).is_green
        assert not classify(parse("#FF0000")).is_green

    @pytest.mark.parametrize(
        "hue,name",
        [(200.0, "blue"), (260.0, "blue"), (355.0, "red-orange"), (0.0, "red-orange"), (300.0, "purple-magenta")],
    )
    def test_band_edges_are_inclusive(self, hue: float, name: str) -> None:
        assert find_hue_profile(hue).name == name


class TestAnchorAndVibrancy:
    """Tests for anchor quantization and chroma compression."""

    @pytest.mark.parametrize(
        "lightness,mode,scale",
        [
            (0.97, c.LIGHT, 50),
            (0.97, c.DARK, 950),
            (1.0, c.LIGHT, 50),
            (0.5, c.LIGHT, 500),
            (0.05, c.LIGHT, 950),
            (0.05, c.DARK, 50),
            (0.2098, c.DARK, 200),
        ],
    )
    def test_quantize_anchor(self, lightness: float, mode: str, scale: int) -> None:
        assert quantize_anchor(lightness, mode) == scale

    @pytest.mark.parametrize("hue,factor", [(300.0, 0.85), (10.0, 0.95), (345.0, 0.95), (150.0, 1.0)])
    def test_vibrancy_compression(self, hue: float, factor: float) -> None:
        assert vibrancy_compression(hue) == factor

    def test_interpolation_takes_short_hue_arc(self) -> None:
        _, _, h = interpolate_oklch((0.5, 0.1, 350.0), (0.5, 0.1, 10.0), 0.5)
        assert h == pytest.approx(0.0, abs=1e-9) or h == pytest.approx(360.0)


class TestGenerate:
    """Tests for the three generator branches."""

    def test_unknown_mode(self, red: Color) -> None:
        with pytest.raises(ValueError):
            generate(red, "sepia", True)

    def test_default_ramp_pins_base(self, red: Color) -> None:
        raw = generate(red, c.LIGHT, True)
        assert len(raw) == len(c.SCALES)
        assert raw.pinned
        assert raw.anchor_scale == 500
        assert raw[500].hex == "#FF0000"

    def test_secondary_ramp_is_not_pinned(self, red: Color) -> None:
        raw = generate(red, c.LIGHT, False)
        assert len(raw) == len(c.SCALES)
        assert not raw.pinned

    def test_gray_uses_neutral_table(self, gray: Color) -> None:
        raw = generate(gray, c.DARK, False)
        assert raw.anchor_scale == 500
        for color in raw.colors:
            h, s, _ = color.hsl
            assert (h, s) == (0.0, 0.0)
        # Dark scales up to 400 are lifted for gray input
        assert raw[50].hsl[2] == pytest.approx(0.05)

    def test_white_dark_ramp_lifts_away_from_anchor(self, white: Color) -> None:
        raw = generate(white, c.DARK, False)
        assert raw.anchor_scale == 950
        assert raw[950].hsl[2] == pytest.approx(0.98)
        assert raw[900].hsl[2] == pytest.approx(0.975)

    def test_profile_dark_ramp(self, navy: Color) -> None:
        raw = generate(navy, c.DARK, True)
        assert raw.anchor_scale == 200
        assert raw[200].hex == "#172554"
        for scale in c.SCALES:
            if scale != 200:
                assert raw[scale].hsl[1] >= 0.55
                assert raw[scale].hsl[2] == pytest.approx(classify(navy).hue_profile.lightness(scale))

    def test_profile_dark_secondary_anchor(self, navy: Color) -> None:
        """The secondary anchor is the table entry closest to the base lightness."""
        assert generate(navy, c.DARK, False).anchor_scale == 100

    def test_vibrancy_raises_chroma(self, red: Color) -> None:
        """Full vibrancy gives every interpolated shade more chroma than none."""
        plain = generate(red, c.LIGHT, True, vibrancy=0)
        vivid = generate(red, c.LIGHT, True, vibrancy=100)
        assert vivid.anchor_scale == plain.anchor_scale
        for scale in c.SCALES:
            if scale == plain.anchor_scale:
                assert vivid[scale].hex == plain[scale].hex
            else:
                assert vivid[scale].c > plain[scale].c

    def test_vibrancy_is_clamped(self, red: Color) -> None:
        assert generate(red, c.LIGHT, False, vibrancy=500) == generate(red, c.LIGHT, False, vibrancy=100)
