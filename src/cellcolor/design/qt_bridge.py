"""Conversions between `Color` and PyQt6 `QColor` for the painting layer.

`QColor` construction does not require a running QApplication, so these
helpers are safe to call from headless code and tests.
"""

from __future__ import annotations

from PyQt6.QtGui import QColor

from .representation import Color, to_css, to_rgba

__all__ = ["to_qcolor", "from_qcolor"]


def to_qcolor(color: Color) -> QColor:
    """Return a QColor carrying all four packed channels, alpha included."""
    rgba = color.rgba
    return QColor((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)


def from_qcolor(qcolor: QColor) -> Color:
    r, g, b, a = qcolor.red(), qcolor.green(), qcolor.blue(), qcolor.alpha()
    return Color(to_css(r, g, b), to_rgba(r, g, b, a))
