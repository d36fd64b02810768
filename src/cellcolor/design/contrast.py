"""WCAG 2.0 luminance and contrast ratio.

Public API:
- rgb_relative_luminance2(r, g, b) -> float
- rgb_relative_luminance(rgb: int) -> float
- contrast_ratio(l1, l2) -> float
- color_contrast_ratio(c1: Color, c2: Color) -> float

`rgb_relative_luminance` expects a 24-bit ``0xRRGGBB`` value, i.e. a packed
color with its alpha byte shifted out (``color.rgba >> 8``).

See https://www.w3.org/TR/WCAG20/#relativeluminancedef and
https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

from __future__ import annotations

from .representation import Color

__all__ = [
    "rgb_relative_luminance",
    "rgb_relative_luminance2",
    "contrast_ratio",
    "color_contrast_ratio",
]


def _linear_channel(c: float) -> float:
    c = c / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def rgb_relative_luminance2(r: int, g: int, b: int) -> float:
    # Rec. 709 coefficients used by WCAG
    return _linear_channel(r) * 0.2126 + _linear_channel(g) * 0.7152 + _linear_channel(b) * 0.0722


def rgb_relative_luminance(rgb: int) -> float:
    return rgb_relative_luminance2((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


def contrast_ratio(l1: float, l2: float) -> float:
    """Return the contrast ratio of two relative luminances (1..21)."""
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def color_contrast_ratio(c1: Color, c2: Color) -> float:
    return contrast_ratio(
        rgb_relative_luminance(c1.rgba >> 8), rgb_relative_luminance(c2.rgba >> 8)
    )
