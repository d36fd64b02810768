"""Single-layer alpha compositing for cell colors.

A translucent foreground is flattened onto an opaque background using the
foreground's alpha byte as the interpolation factor. The result is always
opaque. Blending is performed directly on sRGB channel values; stacking
several translucent layers with gamma correction is out of scope.

Public API:
    blend(bg, fg) -> Color
"""

from __future__ import annotations

import math

from .representation import Color, to_css, to_rgba

__all__ = ["blend"]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def blend(bg: Color, fg: Color) -> Color:
    """Composite `fg` over `bg`.

    A fully opaque foreground is returned as-is (same object), otherwise a new
    opaque Color is built from the interpolated channels.
    """
    a = (fg.rgba & 0xFF) / 255
    if a == 1:
        return fg
    fg_r = (fg.rgba >> 24) & 0xFF
    fg_g = (fg.rgba >> 16) & 0xFF
    fg_b = (fg.rgba >> 8) & 0xFF
    bg_r = (bg.rgba >> 24) & 0xFF
    bg_g = (bg.rgba >> 16) & 0xFF
    bg_b = (bg.rgba >> 8) & 0xFF
    r = bg_r + _round_half_up((fg_r - bg_r) * a)
    g = bg_g + _round_half_up((fg_g - bg_g) * a)
    b = bg_b + _round_half_up((fg_b - bg_b) * a)
    return Color(to_css(r, g, b), to_rgba(r, g, b))
