"""Minimum contrast enforcement for foreground colors.

Given a background, a foreground and a target WCAG contrast ratio, nudge the
foreground away from the background until the target is met:

- foreground darker than background  -> darken further (`reduce_luminance`)
- otherwise                          -> brighten further (`increase_luminance`)

The foreground never crosses over the background's luminance. Adjustment is a
naive per-channel 10% step rather than an HSL round trip, which keeps each
iteration cheap. Both loops stop at channel bounds, so the returned color may
still fall short of an unreachable target (anything above 21, or a mid-grey
background with a high target).

Public API:
    ensure_contrast_ratio(bg, fg, ratio) -> Color | None
    reduce_luminance(bg, fg, ratio) -> Color
    increase_luminance(bg, fg, ratio) -> Color

Channel order:
    Older renderers recomputed the foreground luminance inside the loops with
    green and blue swapped, i.e. ``rgb_relative_luminance2(r, b, g)``. This
    weights the blue channel with the green coefficient and can change where
    the loop stops. Canonical order is the default; pass
    ``legacy_channel_order=True`` (or set CELLCOLOR_LEGACY_LUMINANCE_ORDER)
    to reproduce the historical output exactly. The direction decision in
    `ensure_contrast_ratio` always uses canonical order.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from config.settings import LEGACY_LUMINANCE_ORDER, MAX_ENFORCEMENT_ITERATIONS

from .contrast import contrast_ratio, rgb_relative_luminance, rgb_relative_luminance2
from .representation import Color, to_css, to_rgba

__all__ = [
    "ensure_contrast_ratio",
    "reduce_luminance",
    "increase_luminance",
]

_logger = logging.getLogger(__name__)


def _rgb(color: Color) -> Tuple[int, int, int]:
    return (color.rgba >> 24) & 0xFF, (color.rgba >> 16) & 0xFF, (color.rgba >> 8) & 0xFF


def _fg_luminance(r: int, g: int, b: int, legacy: bool) -> float:
    if legacy:
        return rgb_relative_luminance2(r, b, g)
    return rgb_relative_luminance2(r, g, b)


def _resolve_order(legacy_channel_order: Optional[bool]) -> bool:
    return LEGACY_LUMINANCE_ORDER if legacy_channel_order is None else legacy_channel_order


def ensure_contrast_ratio(
    bg: Color, fg: Color, ratio: float, *, legacy_channel_order: Optional[bool] = None
) -> Optional[Color]:
    """Return an adjusted foreground, or None if `fg` already meets `ratio`.

    None means "keep the original foreground"; it is not an error.
    """
    bg_l = rgb_relative_luminance(bg.rgba >> 8)
    fg_l = rgb_relative_luminance(fg.rgba >> 8)
    cr = contrast_ratio(bg_l, fg_l)
    if cr >= ratio:
        return None
    if fg_l < bg_l:
        return reduce_luminance(bg, fg, ratio, legacy_channel_order=legacy_channel_order)
    return increase_luminance(bg, fg, ratio, legacy_channel_order=legacy_channel_order)


def reduce_luminance(
    bg: Color, fg: Color, ratio: float, *, legacy_channel_order: Optional[bool] = None
) -> Color:
    legacy = _resolve_order(legacy_channel_order)
    bg_l = rgb_relative_luminance2(*_rgb(bg))
    fg_r, fg_g, fg_b = _rgb(fg)
    cr = contrast_ratio(_fg_luminance(fg_r, fg_g, fg_b, legacy), bg_l)
    steps = 0
    while (
        cr < ratio
        and (fg_r > 0 or fg_g > 0 or fg_b > 0)
        and steps < MAX_ENFORCEMENT_ITERATIONS
    ):
        # Darken by 10% (ceil) until the ratio is hit
        fg_r -= max(0, math.ceil(fg_r * 0.1))
        fg_g -= max(0, math.ceil(fg_g * 0.1))
        fg_b -= max(0, math.ceil(fg_b * 0.1))
        cr = contrast_ratio(_fg_luminance(fg_r, fg_g, fg_b, legacy), bg_l)
        steps += 1
    _log_result("reduce", steps, cr, ratio)
    return Color(to_css(fg_r, fg_g, fg_b), to_rgba(fg_r, fg_g, fg_b))


def _brighten(c: int) -> int:
    # Step never drops below 1, otherwise 246..254 would stall short of 255
    return min(0xFF, c + max(1, math.floor((255 - c) * 0.1)))


def increase_luminance(
    bg: Color, fg: Color, ratio: float, *, legacy_channel_order: Optional[bool] = None
) -> Color:
    legacy = _resolve_order(legacy_channel_order)
    bg_l = rgb_relative_luminance2(*_rgb(bg))
    fg_r, fg_g, fg_b = _rgb(fg)
    cr = contrast_ratio(_fg_luminance(fg_r, fg_g, fg_b, legacy), bg_l)
    steps = 0
    while (
        cr < ratio
        and (fg_r < 0xFF or fg_g < 0xFF or fg_b < 0xFF)
        and steps < MAX_ENFORCEMENT_ITERATIONS
    ):
        fg_r = _brighten(fg_r)
        fg_g = _brighten(fg_g)
        fg_b = _brighten(fg_b)
        cr = contrast_ratio(_fg_luminance(fg_r, fg_g, fg_b, legacy), bg_l)
        steps += 1
    _log_result("increase", steps, cr, ratio)
    return Color(to_css(fg_r, fg_g, fg_b), to_rgba(fg_r, fg_g, fg_b))


def _log_result(direction: str, steps: int, cr: float, ratio: float) -> None:
    if cr < ratio:
        _logger.debug(
            "%s_luminance hit channel bounds after %d steps (ratio %.2f < %.2f)",
            direction,
            steps,
            cr,
            ratio,
        )
    else:
        _logger.debug("%s_luminance reached %.2f in %d steps", direction, cr, steps)
