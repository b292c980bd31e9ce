#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: ramplab/logic/ramp/continuity.py

"""
Lightness spacing for finished ramps.

Every ramp is handled in ascending-lightness order: dark ramps read
50 -> 950, light ramps read 950 -> 50. Adjacent shades must differ in HSL
lightness by at least their minimum delta; the spacing passes leave a
small margin on top of it so that later one-level moves can still be made
without breaking the guarantee.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ramplab.core import config as c
from ramplab.core.color import Color, HSL, raw_contrast_ratio
from ramplab.shared.logger import log
from . import uniqueness
from .accessibility import measure
from .classifier import Classification
from .types import Ramp

TOLERANCE = 1e-9


def ascending_scales(mode: str) -> Tuple[int, ...]:
    return c.SCALES if mode == c.DARK else tuple(reversed(c.SCALES))


def min_delta(lower_scale: int, green: bool = False) -> float:
    """Required lightness gap between `lower_scale` and the scale after it."""
    if green:
        return c.GREEN_MIN_LIGHTNESS_DELTA
    return c.MIN_LIGHTNESS_DELTAS[lower_scale]


def required_gaps(mode: str, green: bool = False) -> List[float]:
    """Minimum gaps between consecutive shades in ascending-lightness order."""
    seq = ascending_scales(mode)
    return [min_delta(min(a, b), green) for a, b in zip(seq, seq[1:])]


def spacing_gaps(mode: str, green: bool = False) -> List[float]:
    return [gap + c.SPACING_MARGIN for gap in required_gaps(mode, green)]


def floor_for(mode: str, scale: int) -> float:
    if mode == c.DARK and scale == 950:
        return c.DARK_950_MIN_LIGHTNESS
    if mode == c.DARK and scale == 900:
        return c.DARK_900_MIN_LIGHTNESS
    return c.LIGHTNESS_FLOOR


def ceiling_for(mode: str, grayscale: bool) -> float:
    if mode == c.LIGHT:
        return c.LIGHT_CEILING
    return c.DARK_CEILING_GRAY if grayscale else c.DARK_CEILING_COLOR


def floors_for(mode: str) -> List[float]:
    return [floor_for(mode, scale) for scale in ascending_scales(mode)]


def lightness_bounds(
    gaps: List[float],
    floors: List[float],
    ceiling: float,
    pinned: Optional[int] = None,
    pin: Optional[float] = None,
) -> Tuple[List[float], List[float]]:
    """
    Lowest and highest lightness each position may take while every gap
    still fits between the floor, the pin and the ceiling.

    Floors below the pin give way to the pin's own chain, down to the
    lightness floor; floors above it are hard. A ramp is feasible when
    every low bound is at most its high bound.
    """
    n = len(floors)
    hi = [0.0] * n
    for i in range(n - 1, -1, -1):
        if i == pinned:
            hi[i] = pin
        elif i == n - 1:
            hi[i] = ceiling
        else:
            hi[i] = min(ceiling, hi[i + 1] - gaps[i])

    lo = [0.0] * n
    for i in range(n):
        if i == pinned:
            lo[i] = pin
            continue
        floor = floors[i]
        if pinned is not None and i < pinned:
            floor = max(c.LIGHTNESS_FLOOR, min(floor, hi[i]))
        lo[i] = floor if i == 0 else max(floor, lo[i - 1] + gaps[i - 1])
    return lo, hi


def _fits_bounds(lo: List[float], hi: List[float]) -> bool:
    return all(low <= high + TOLERANCE for low, high in zip(lo, hi))


def is_anchor_feasible(mode: str, scale: int, lightness: float, green: bool = False, grayscale: bool = False) -> bool:
    """
    True when a shade pinned at `scale` with `lightness` leaves room for the
    spaced shades on both sides: nothing below may drop under the lightness
    floor and nothing above may pass its own floor or the ceiling.
    """
    p = ascending_scales(mode).index(scale)
    lo, hi = lightness_bounds(spacing_gaps(mode, green), floors_for(mode), ceiling_for(mode, grayscale), p, lightness)
    return _fits_bounds(lo, hi)


def nearest_feasible_anchor(mode: str, scale: int, lightness: float, green: bool = False, grayscale: bool = False) -> int:
    """The feasible scale closest to `scale`, preferring the lighter side on ties."""
    idx = c.SCALES.index(scale)
    order = sorted(range(len(c.SCALES)), key=lambda i: (abs(i - idx), -i if mode == c.DARK else i))
    for i in order:
        if is_anchor_feasible(mode, c.SCALES[i], lightness, green, grayscale):
            return c.SCALES[i]
    log("warning", f"no {mode} scale can hold lightness {lightness:.3f} with full spacing; keeping {scale}")
    return scale


def space_lightness(
    values: List[float],
    gaps: List[float],
    ceiling: float,
    pinned: Optional[int] = None,
    floors: Optional[List[float]] = None,
) -> List[float]:
    """
    Push ascending lightness values apart. Each value is first held inside
    its bounds, then a single upward sweep opens every gap that is still
    too narrow. The pinned value never moves.
    """
    n = len(values)
    if floors is None:
        floors = [c.LIGHTNESS_FLOOR] * n
    pin = values[pinned] if pinned is not None else None
    lo, hi = lightness_bounds(gaps, floors, ceiling, pinned, pin)

    ls = [values[i] if i == pinned else min(max(values[i], lo[i]), hi[i]) for i in range(n)]
    for i in range(1, n):
        if i != pinned:
            ls[i] = max(ls[i], ls[i - 1] + gaps[i - 1])
    return ls


def _reposition_dark_100(ls: List[float]) -> None:
    # Dark order puts 50, 100, 200 at positions 0, 1, 2
    l50, l100, l200 = ls[0], ls[1], ls[2]
    lo = l50 + c.DARK_100_MIN_SEPARATION
    hi = l200 - c.DARK_100_MIN_SEPARATION
    if lo >= hi:
        return
    target = max(lo, min(hi, l50 + (l200 - l50) * c.DARK_100_POSITION))
    if abs(target - l100) > c.DARK_100_MIN_CHANGE:
        ls[1] = target


def _repair_light_950(colors: Dict[int, Color], grayscale: bool) -> Color:
    """Darken light 950 until it reads stronger than 900 against the page background."""
    page = Color.from_hex(c.LIGHT_MODE_BG_HEX, space=HSL)
    current = colors[950]
    target = raw_contrast_ratio(colors[900], page)
    if raw_contrast_ratio(current, page) > target:
        return current

    h, s, l = current.hsl
    candidate = current
    for attempt in range(c.LIGHT_950_MAX_ATTEMPTS):
        l = min(l, max(c.LIGHT_950_MIN_LIGHTNESS, l - (c.LIGHT_950_L_STEP[0] + c.LIGHT_950_L_STEP[1] * attempt)))
        if not grayscale:
            s = min(c.UNIT, s + c.LIGHT_950_S_STEP[0] + c.LIGHT_950_S_STEP[1] * attempt)
        candidate = Color.from_hsl(h, s, l)
        if raw_contrast_ratio(candidate, page) > target:
            return candidate
    log("warning", f"light 950 {candidate.hex} still reads no stronger than 900 {colors[900].hex}")
    return candidate


def _fits(ls: List[float], i: int, value: float, gaps: List[float], floor: float, ceiling: float) -> bool:
    if value < max(0.0, min(floor, ls[i])) - TOLERANCE or value > max(ceiling, ls[i]) + TOLERANCE:
        return False
    if i > 0 and value - ls[i - 1] < gaps[i - 1] - TOLERANCE:
        return False
    if i < len(ls) - 1 and ls[i + 1] - value < gaps[i] - TOLERANCE:
        return False
    return True


def _level_offsets() -> Iterator[int]:
    for levels in range(1, c.SETTLE_MAX_LEVELS + 1):
        yield levels
        yield -levels


def _settle(
    color: Color, i: int, ls: List[float], gaps: List[float], floor: float, ceiling: float, seen: Set[str], grayscale: bool
) -> Optional[Color]:
    """Nudge a colliding shade by a few degrees of hue or a few levels of lightness."""
    h, s, l = color.hsl
    if not grayscale and s > 0.0:
        for step in c.SETTLE_HUE_STEPS:
            candidate = Color.from_hsl(h + step, s, l)
            if candidate.hex not in seen:
                return candidate
    for levels in _level_offsets():
        value = l + levels / c.RGB_MAX
        if not _fits(ls, i, value, gaps, floor, ceiling):
            continue
        candidate = Color.from_hsl(h, s, value)
        if candidate.hex not in seen:
            return candidate
    return None


def _escalate(
    collision: uniqueness.Collision, i: int, ls: List[float], gaps: List[float], floor: float, ceiling: float, seen: Set[str]
) -> Optional[Color]:
    """Fall back to the collision strategies, preferring a replacement that keeps the gaps."""
    free = [color for _, color in uniqueness.candidates(collision) if color.hex not in seen]
    for color in free:
        if _fits(ls, i, color.hsl[2], gaps, floor, ceiling):
            return color
    if not free:
        return None
    log("warning", f"{collision.mode} {collision.scale} {collision.color.hex} only frees up at {free[0].hex}, outside its gap")
    return free[0]


def adjust(
    ramp: Ramp,
    classification: Classification,
    pinned_scale: Optional[int] = None,
    taken: Iterable[str] = (),
    minimum: float = c.WCAG_AA_NORMAL,
) -> Ramp:
    """
    Return a new ramp whose shades are strictly ordered and spaced.

    The pinned shade is never moved. Shades that land on a hex already in
    `taken` (or already used in this ramp) are settled onto a free neighbor,
    or failing that onto the first free collision-strategy candidate.
    Every swatch is re-measured for contrast afterwards.
    """
    mode = ramp.mode
    grayscale = classification.is_grayscale
    seq = ascending_scales(mode)
    colors = {swatch.scale: swatch.background.to_space(HSL) for swatch in ramp}
    p = seq.index(pinned_scale) if pinned_scale is not None else None

    ls = [colors[scale].l for scale in seq]
    if mode == c.DARK and pinned_scale != 100:
        _reposition_dark_100(ls)

    gaps = spacing_gaps(mode, classification.is_green)
    floors = floors_for(mode)
    ceiling = ceiling_for(mode, grayscale)
    if p is not None and not _fits_bounds(*lightness_bounds(gaps, floors, ceiling, p, ls[p])):
        log("warning", f"{mode} {pinned_scale} at lightness {ls[p]:.3f} leaves too little room for full spacing")
    ls = space_lightness(ls, gaps, ceiling, p, floors)

    for i, scale in enumerate(seq):
        if i != p and abs(ls[i] - colors[scale].l) > c.EPS:
            colors[scale] = colors[scale].with_lightness(ls[i])

    # Only lowers 950, the darkest light shade, so its gap to 900 can only widen
    if mode == c.LIGHT and pinned_scale != 950:
        colors[950] = _repair_light_950(colors, grayscale)

    # Settling only has to respect the true deltas, not the margin
    true_gaps = required_gaps(mode, classification.is_green)
    final_ls = [colors[scale].l for scale in seq]
    seen = set(taken)
    if pinned_scale is not None:
        seen.add(colors[pinned_scale].hex)

    for i, scale in enumerate(seq):
        if i == p:
            continue
        color = colors[scale]
        if color.hex in seen:
            settled = _settle(color, i, final_ls, true_gaps, floors[i], ceiling, seen, grayscale)
            if settled is None:
                collision = uniqueness.collision_for(mode, scale, color, classification)
                settled = _escalate(collision, i, final_ls, true_gaps, floors[i], ceiling, seen)
            if settled is None:
                log("warning", f"{mode} {scale} {color.hex} collides and every replacement is taken")
            else:
                color = settled
                colors[scale] = color
                final_ls[i] = color.hsl[2]
        seen.add(color.hex)

    return Ramp(mode, tuple(measure(colors[scale], scale, minimum) for scale in c.SCALES))


def is_spaced(ramp: Ramp, green: bool = False) -> bool:
    """True when every adjacent pair meets its minimum lightness gap."""
    seq = ascending_scales(ramp.mode)
    ls = [ramp[scale].background.hsl[2] for scale in seq]
    gaps = required_gaps(ramp.mode, green)
    return all(ls[i + 1] - ls[i] >= gaps[i] - TOLERANCE for i in range(len(gaps)))
