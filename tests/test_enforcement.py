"""Tests for minimum contrast enforcement."""

import itertools

import pytest

import cellcolor.design.enforcement as enforcement
from cellcolor.design import Color, color_contrast_ratio
from cellcolor.design.contrast import rgb_relative_luminance
from cellcolor.design.enforcement import (
    ensure_contrast_ratio,
    increase_luminance,
    reduce_luminance,
)
from config.settings import MAX_ENFORCEMENT_ITERATIONS


def _lum(color: Color) -> float:
    return rgb_relative_luminance(color.rgba >> 8)


def test_no_adjustment_when_ratio_met(black, white):
    assert ensure_contrast_ratio(black, white, 4.5) is None
    assert ensure_contrast_ratio(white, black, 21.0 - 1e-9) is None


def test_no_adjustment_on_exact_ratio():
    bg = Color.from_channels(30, 30, 30)
    fg = Color.from_channels(140, 140, 140)
    exact = color_contrast_ratio(bg, fg)
    assert ensure_contrast_ratio(bg, fg, exact) is None


def test_darker_foreground_gets_darker(white):
    fg = Color.from_channels(200, 200, 200)
    out = ensure_contrast_ratio(white, fg, 4.5)
    assert out is not None
    assert color_contrast_ratio(white, out) >= 4.5
    assert _lum(out) < _lum(fg)
    assert all(c <= 200 for c in (out.r, out.g, out.b))
    assert out.a == 255


def test_lighter_foreground_gets_lighter():
    bg = Color.from_channels(20, 20, 60)
    fg = Color.from_channels(60, 60, 90)
    out = ensure_contrast_ratio(bg, fg, 7.0)
    assert out is not None
    assert color_contrast_ratio(bg, out) >= 7.0
    assert _lum(out) > _lum(fg) > _lum(bg)


def test_unreachable_target_saturates_white(black):
    fg = Color.from_channels(100, 100, 100)
    out = ensure_contrast_ratio(black, fg, 25)
    assert out == Color("#ffffff", 0xFFFFFFFF)


def test_unreachable_target_near_white_terminates(black):
    # floor((255 - 250) * 0.1) == 0; channels must still advance to 255
    fg = Color.from_channels(250, 250, 250)
    assert increase_luminance(black, fg, 25).css == "#ffffff"


def test_unreachable_target_saturates_black(white):
    fg = Color.from_channels(100, 100, 100)
    out = ensure_contrast_ratio(white, fg, 25)
    assert out == Color("#000000", 0x000000FF)


def test_never_crosses_background():
    bg = Color.from_channels(128, 128, 128)
    darker = Color.from_channels(120, 120, 120)
    lighter = Color.from_channels(136, 136, 136)
    assert _lum(ensure_contrast_ratio(bg, darker, 25)) < _lum(bg)
    assert _lum(ensure_contrast_ratio(bg, lighter, 25)) > _lum(bg)


def test_reduce_monotonic_in_target(white):
    fg = Color.from_channels(240, 200, 180)
    lums = [_lum(reduce_luminance(white, fg, ratio)) for ratio in (2.0, 3.0, 4.5, 7.0, 12.0, 21.0)]
    assert lums == sorted(lums, reverse=True)
    assert lums[0] < _lum(fg)


def test_increase_monotonic_in_target(black):
    fg = Color.from_channels(10, 40, 20)
    lums = [_lum(increase_luminance(black, fg, ratio)) for ratio in (2.0, 3.0, 4.5, 7.0, 12.0, 21.0)]
    assert lums == sorted(lums)
    assert lums[0] > _lum(fg)


_GRID = (0, 1, 9, 10, 128, 245, 246, 247, 250, 253, 254, 255)


def _record_luminance(monkeypatch) -> list:
    seen: list = []
    original = enforcement._fg_luminance

    def recorder(r, g, b, legacy):
        value = original(r, g, b, legacy)
        seen.append(value)
        return value

    monkeypatch.setattr(enforcement, "_fg_luminance", recorder)
    return seen


@pytest.mark.parametrize("legacy", [False, True])
@pytest.mark.parametrize(
    "fn, bg, sign",
    [
        (reduce_luminance, (255, 255, 255), -1),
        (increase_luminance, (0, 0, 0), 1),
    ],
)
def test_each_step_moves_away_from_background(monkeypatch, fn, bg, sign, legacy):
    seen = _record_luminance(monkeypatch)
    background = Color.from_channels(*bg)
    for rgb in itertools.product(_GRID, repeat=3):
        seen.clear()
        fn(background, Color.from_channels(*rgb), 25, legacy_channel_order=legacy)
        assert len(seen) - 1 <= MAX_ENFORCEMENT_ITERATIONS, rgb
        for before, after in zip(seen, seen[1:]):
            assert (after - before) * sign > 0, rgb


def test_iteration_cap_stops_loop(monkeypatch, white):
    seen = _record_luminance(monkeypatch)
    monkeypatch.setattr(enforcement, "MAX_ENFORCEMENT_ITERATIONS", 2)
    out = reduce_luminance(white, Color.from_channels(200, 200, 200), 25)
    assert len(seen) == 3
    assert out.r == out.g == out.b > 0


def test_inputs_not_mutated(white):
    fg = Color.from_channels(200, 200, 200)
    reduce_luminance(white, fg, 7.0)
    assert fg == Color("#c8c8c8", 0xC8C8C8FF)
    assert white == Color("#ffffff", 0xFFFFFFFF)


def test_legacy_channel_order_converges_differently(black):
    fg = Color.from_channels(0, 0, 120)
    canonical = increase_luminance(black, fg, 4.5, legacy_channel_order=False)
    legacy = increase_luminance(black, fg, 4.5, legacy_channel_order=True)
    assert legacy.css == "#303091"
    assert canonical != legacy
    assert color_contrast_ratio(black, canonical) >= 4.5
    # The swapped weighting stops early; the true ratio falls short
    assert color_contrast_ratio(black, legacy) < 4.5


def test_legacy_order_default_from_settings(monkeypatch, black):
    monkeypatch.setattr(enforcement, "LEGACY_LUMINANCE_ORDER", True)
    fg = Color.from_channels(0, 0, 120)
    assert ensure_contrast_ratio(black, fg, 4.5).css == "#303091"


def test_grey_unaffected_by_channel_order(white):
    fg = Color.from_channels(200, 200, 200)
    assert reduce_luminance(white, fg, 4.5, legacy_channel_order=True) == reduce_luminance(
        white, fg, 4.5, legacy_channel_order=False
    )
