"""Tests for contrast enforcement, collision resolution and lightness spacing."""

from __future__ import annotations

import pytest

from ramplab.core import config as c
from ramplab.core.color import BLACK, WHITE, Color, parse
from ramplab.logic.ramp import continuity, uniqueness
from ramplab.logic.ramp.accessibility import choose_text_color, enforce, measure
from ramplab.logic.ramp.classifier import classify
from ramplab.logic.ramp.engine import generate
from ramplab.logic.ramp.pipeline import enforce_ramp
from ramplab.logic.ramp.profiles import find_hue_profile
from ramplab.logic.ramp.uniqueness import Collision, perturb, randomized


class TestAccessibility:
    """Tests for text color choice and contrast enforcement."""

    def test_text_on_white_is_black(self) -> None:
        text, ratio = choose_text_color(WHITE)
        assert text == BLACK
        assert ratio == pytest.approx(21.0)

    def test_text_on_black_is_white(self) -> None:
        assert choose_text_color(BLACK)[0] == WHITE

    def test_measure_does_not_touch_background(self) -> None:
        bg = parse("#777777")
        swatch = measure(bg, 500)
        assert swatch.background is bg
        assert swatch.meets_minimum == (swatch.contrast_ratio >= c.WCAG_AA_NORMAL)

    def test_passing_color_is_kept(self) -> None:
        swatch = enforce(Color.from_hex("#777777", space="hsl"), 500)
        assert swatch.hex == "#777777"
        assert swatch.meets_minimum

    def test_nudges_toward_contrast(self) -> None:
        """AAA on mid gray lightens the background and keeps it gray."""
        bg = Color.from_hex("#777777", space="hsl")
        swatch = enforce(bg, 500, c.WCAG_AAA_NORMAL)
        assert swatch.meets_minimum
        assert swatch.contrast_ratio >= c.WCAG_AAA_NORMAL
        assert swatch.text_color == BLACK
        assert swatch.background.hsl[1] == 0.0
        assert swatch.background.hsl[2] > bg.hsl[2]

    def test_impossible_minimum_is_flagged(self) -> None:
        swatch = enforce(parse("#777777"), 500, 30.0)
        assert not swatch.meets_minimum
        assert swatch.contrast_ratio < 30.0


class TestPerturb:
    """Tests for the deterministic perturbation tiers."""

    def _collision(self, mode: str = c.LIGHT, scale: int = 100, **kwargs) -> Collision:
        defaults = dict(color=Color.from_hsl(200, 0.5, 0.5), grayscale=False, profile=None)
        defaults.update(kwargs)
        return Collision(mode=mode, scale=scale, **defaults)

    def test_strategy_order(self) -> None:
        assert [name for name, _ in uniqueness.STRATEGIES] == ["lightness", "saturation", "hue", "random"]

    def test_lightness_tier(self) -> None:
        h, s, l = perturb(self._collision(), 1).hsl
        assert (h, s) == pytest.approx((200.0, 0.5))
        assert l == pytest.approx(0.6)

    def test_saturation_tier(self) -> None:
        _, s, l = perturb(self._collision(), 4).hsl
        assert l == pytest.approx(0.9)
        assert s == pytest.approx(0.3)

    def test_hue_tier_clamps(self) -> None:
        h, s, l = perturb(self._collision(), 7).hsl
        assert h == pytest.approx(210.0)
        assert s == pytest.approx(0.05)
        assert l == pytest.approx(0.95)

    def test_dark_ramp_high_scale_moves_lighter(self) -> None:
        _, s, l = perturb(self._collision(c.DARK, 700), 4).hsl
        assert l > 0.5
        assert s < 0.5

    def test_light_ramp_high_scale_moves_darker(self) -> None:
        _, s, l = perturb(self._collision(c.LIGHT, 700), 4).hsl
        assert l < 0.5
        assert s > 0.5

    def test_gray_steps_are_small(self) -> None:
        collision = self._collision(c.DARK, 200, color=Color.from_hsl(0, 0, 0.5), grayscale=True)
        assert perturb(collision, 3).hsl == pytest.approx((0.0, 0.0, 0.497))

    def test_profile_bounds_saturation(self) -> None:
        collision = self._collision(c.DARK, 700, profile=find_hue_profile(220))
        assert perturb(collision, 7).hsl[1] >= 0.55


class TestRandomized:
    """Tests for the seeded last-resort tier."""

    def _take(self, collision: Collision, n: int = 5):
        draws = randomized(collision)
        return [next(draws) for _ in range(n)]

    def test_reproducible(self) -> None:
        collision = Collision(c.LIGHT, 100, Color.from_hsl(30, 0.6, 0.5), False, None)
        assert self._take(collision) == self._take(collision)

    def test_light_top_band(self) -> None:
        collision = Collision(c.LIGHT, 100, Color.from_hsl(30, 0.6, 0.5), False, None)
        for color in self._take(collision, 20):
            assert 0.8 <= color.hsl[2] <= 0.95

    def test_dark_low_band(self) -> None:
        collision = Collision(c.DARK, 100, Color.from_hsl(30, 0.6, 0.5), False, None)
        for color in self._take(collision, 20):
            assert 0.1 <= color.hsl[2] <= 0.3

    def test_gray_dark_top_band_is_capped(self) -> None:
        collision = Collision(c.DARK, 700, Color.from_hsl(0, 0, 0.5), True, None)
        for color in self._take(collision, 20):
            h, s, l = color.hsl
            assert (h, s) == (0.0, 0.0)
            assert 0.7 <= l <= 0.985

    def test_profile_clamps_random_saturation(self) -> None:
        collision = Collision(c.DARK, 100, Color.from_hsl(220, 0.6, 0.5), False, find_hue_profile(220))
        for color in self._take(collision, 20):
            assert 0.55 <= color.hsl[1] <= 0.92

    def test_draws_end_with_a_band_scan(self) -> None:
        collision = Collision(c.DARK, 700, Color.from_hsl(0, 0, 0.5), True, None)
        draws = list(randomized(collision))
        scan = draws[c.UNIQUENESS_RANDOM_DRAWS:]
        levels = [round(color.hsl[2] * 255) for color in scan]
        assert levels == list(range(179, 250))
        assert len({color.hex for color in scan}) == len(scan)

    def test_every_candidate_taken_gives_none(self) -> None:
        collision = Collision(c.LIGHT, 100, Color.from_hsl(0, 0, 0.9), True, None)
        seen = {enforce(color, 100).hex for _, color in uniqueness.candidates(collision)}
        assert uniqueness.free_candidate(collision, seen) is None


class TestResolve:
    """Tests for cross-ramp collision resolution."""

    def _gray_ramps(self, gray: Color):
        cls = classify(gray)
        light = enforce_ramp(generate(gray, c.LIGHT, True, classification=cls))
        dark = enforce_ramp(generate(gray, c.DARK, False, classification=cls))
        return cls, light, dark

    def test_gray_tables_collide_before_resolution(self, gray: Color) -> None:
        _, light, dark = self._gray_ramps(gray)
        assert uniqueness.has_collisions(light, dark)

    def test_resolution_removes_collisions(self, gray: Color) -> None:
        cls, light, dark = self._gray_ramps(gray)
        new_light, new_dark = uniqueness.resolve(light, dark, {c.LIGHT: 500}, cls)
        assert not uniqueness.has_collisions(new_light, new_dark)
        assert new_light[500].hex == gray.hex
        for swatch in new_dark:
            assert swatch.background.hsl[:2] == (0.0, 0.0)

    def test_first_ramp_keeps_its_shades(self, gray: Color) -> None:
        cls, light, dark = self._gray_ramps(gray)
        new_light, _ = uniqueness.resolve(light, dark, {c.LIGHT: 500}, cls)
        assert new_light is light

    def test_unique_pair_is_returned_unchanged(self, red_pair) -> None:
        light, dark = uniqueness.resolve(red_pair.light, red_pair.dark, {c.LIGHT: 500})
        assert light is red_pair.light
        assert dark is red_pair.dark


class TestContinuity:
    """Tests for lightness spacing."""

    def test_space_lightness_pushes_up_from_pin(self) -> None:
        result = continuity.space_lightness([0.1, 0.2, 0.5, 0.52, 0.9], [0.1] * 4, 1.0, pinned=2)
        assert result == pytest.approx([0.1, 0.2, 0.5, 0.6, 0.9])

    def test_space_lightness_caps_the_top(self) -> None:
        result = continuity.space_lightness([0.5, 0.55, 0.6], [0.2, 0.2], 0.8)
        assert result == pytest.approx([0.4, 0.6, 0.8])

    def test_pinned_top_is_never_capped(self) -> None:
        result = continuity.space_lightness([0.1, 0.5, 0.99], [0.1, 0.1], 0.9, pinned=2)
        assert result == pytest.approx([0.1, 0.5, 0.99])

    def test_space_lightness_lifts_sunken_shades(self) -> None:
        """Shades already far under the pin's chain are lifted onto it, never pushed below zero."""
        result = continuity.space_lightness([0.0, 0.0, 0.05, 0.6], [0.1] * 3, 1.0, pinned=3)
        assert result == pytest.approx([0.0, 0.1, 0.2, 0.6])

    def test_floors_below_the_pin_give_way(self) -> None:
        result = continuity.space_lightness([0.5, 0.8, 0.85], [0.1, 0.1], 1.0, pinned=2, floors=[0.0, 0.9, 0.95])
        assert result == pytest.approx([0.5, 0.75, 0.85])

    def test_floors_above_the_pin_hold(self) -> None:
        result = continuity.space_lightness([0.2, 0.3, 0.4], [0.1, 0.1], 1.0, pinned=0, floors=[0.0, 0.9, 0.95])
        assert result == pytest.approx([0.2, 0.9, 1.0])

    def test_bounds_reject_a_pin_too_close_to_the_floor(self) -> None:
        lo, hi = continuity.lightness_bounds([0.1] * 3, [0.0] * 4, 1.0, pinned=3, pin=0.25)
        assert lo[0] == 0.0
        assert hi[0] == pytest.approx(-0.05)

    def test_required_gaps(self) -> None:
        gaps = continuity.required_gaps(c.DARK)
        assert gaps[0] == 0.07
        assert gaps[-1] == 0.05
        assert continuity.required_gaps(c.LIGHT, green=True) == [0.05] * 10

    @pytest.mark.parametrize(
        "mode,scale,lightness,feasible",
        [
            (c.LIGHT, 500, 0.5, True),
            (c.LIGHT, 50, 0.5, False),
            (c.LIGHT, 950, 0.5, False),
            (c.DARK, 950, 1.0, True),
            (c.DARK, 900, 0.95, False),
        ],
    )
    def test_anchor_feasibility(self, mode: str, scale: int, lightness: float, feasible: bool) -> None:
        assert continuity.is_anchor_feasible(mode, scale, lightness) is feasible

    def test_nearest_feasible_anchor(self) -> None:
        assert continuity.nearest_feasible_anchor(c.DARK, 900, 0.95) == 950
        assert continuity.nearest_feasible_anchor(c.LIGHT, 500, 0.5) == 500

    def test_adjust_spaces_gray_dark_ramp(self, gray: Color) -> None:
        cls = classify(gray)
        dark = enforce_ramp(generate(gray, c.DARK, False, classification=cls))
        adjusted = continuity.adjust(dark, cls)
        assert continuity.is_spaced(adjusted)
        assert adjusted[900].background.hsl[2] >= 0.90
        assert adjusted[950].background.hsl[2] >= 0.95
        assert adjusted[950].background.hsl[2] <= 0.985 + 1e-9

    def test_adjust_keeps_pinned_shade(self, navy: Color) -> None:
        cls = classify(navy)
        dark = enforce_ramp(generate(navy, c.DARK, True, classification=cls))
        adjusted = continuity.adjust(dark, cls, pinned_scale=200)
        assert adjusted[200].hex == "#172554"
        assert continuity.is_spaced(adjusted)

    def test_adjust_settles_taken_hexes(self, gray: Color) -> None:
        """A shade whose hex is already taken moves to a free neighbor."""
        cls = classify(gray)
        dark = continuity.adjust(enforce_ramp(generate(gray, c.DARK, False, classification=cls)), cls)
        taken = (dark[500].hex,)
        again = continuity.adjust(dark, cls, taken=taken)
        assert again[500].hex not in taken
        assert continuity.is_spaced(again)

    def test_is_spaced_rejects_flat_ramp(self, gray: Color) -> None:
        flat = enforce_ramp(generate(gray, c.DARK, False))
        flat = flat.with_swatch(measure(flat[100].background, 200))
        assert not continuity.is_spaced(flat)

    def test_adjust_escalates_when_no_neighbor_is_free(self, gray: Color) -> None:
        """With every nearby gray taken, shades fall back to the collision strategies."""
        cls = classify(gray)
        dark = continuity.adjust(enforce_ramp(generate(gray, c.DARK, False, classification=cls)), cls)
        middle = dark[500].background.hsl[2]
        reach = range(-c.SETTLE_MAX_LEVELS, c.SETTLE_MAX_LEVELS + 1)
        taken = {Color.from_hsl(0.0, 0.0, middle + k / c.RGB_MAX).hex for k in reach}
        again = continuity.adjust(dark, cls, taken=taken)
        assert not set(again.hexes) & taken
        assert len(set(again.hexes)) == 11

    @pytest.mark.parametrize(
        "text,mode,vibrancy",
        [("#FFFF66", c.LIGHT, 0), ("#FFB266", c.LIGHT, 0), ("#E8B27D", c.LIGHT, 100), ("#A68059", c.DARK, 100)],
    )
    def test_adjust_keeps_dark_ends_off_the_floor(self, text: str, mode: str, vibrancy: int) -> None:
        """Contrast-darkened shades below a light anchor are spaced up from zero, not clamped at it."""
        base = parse(text)
        cls = classify(base)
        raw = generate(base, mode, True, vibrancy, cls)
        adjusted = continuity.adjust(enforce_ramp(raw), cls, pinned_scale=raw.anchor_scale)
        assert adjusted[raw.anchor_scale].hex == base.hex
        assert continuity.is_spaced(adjusted, cls.is_green)
        assert len(set(adjusted.hexes)) == 11
