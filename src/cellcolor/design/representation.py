"""Color representation helpers.

A color travels through the renderer in two synchronized forms:

- packed: unsigned 32-bit int laid out ``[R:8][G:8][B:8][A:8]`` (MSB first)
- css:    ``#rrggbb`` string carrying only the RGB channels

The css form never reflects alpha; callers that care about translucency must
read it from the packed value.

Public API:
    Color(css, rgba)
    to_padded_hex(channel) -> str
    to_css(r, g, b) -> str
    to_rgba(r, g, b, a=255) -> int
    from_css(css) -> Color          (permissive, never raises)
    is_valid_css(css) -> bool
    parse_css(css) -> Color         (strict, raises ColorFormatError)

`from_css` intentionally performs no validation. Input coming from user
configuration should go through `parse_css` (or be checked with
`is_valid_css`) at the boundary instead of relying on silent correction.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "Color",
    "ColorFormatError",
    "to_padded_hex",
    "to_css",
    "to_rgba",
    "from_css",
    "is_valid_css",
    "parse_css",
]

_logger = logging.getLogger(__name__)

_UINT32 = 0xFFFFFFFF
_CSS_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
# Lenient integer prefix: whitespace, optional sign, optional 0x, hex digits
_LEADING_HEX_RE = re.compile(r"^\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_HEX_ERR = "Color must be a #RRGGBB hex string: {value!r}"


class ColorFormatError(ValueError):
    """Raised by `parse_css` when a string is not ``#`` + 6 hex digits."""


@dataclass(frozen=True)
class Color:
    css: str
    rgba: int

    @property
    def r(self) -> int:
        return (self.rgba >> 24) & 0xFF

    @property
    def g(self) -> int:
        return (self.rgba >> 16) & 0xFF

    @property
    def b(self) -> int:
        return (self.rgba >> 8) & 0xFF

    @property
    def a(self) -> int:
        return self.rgba & 0xFF

    def channels(self) -> Tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    @classmethod
    def from_channels(cls, r: int, g: int, b: int, a: int = 0xFF) -> "Color":
        return cls(to_css(r, g, b), to_rgba(r, g, b, a))

    @classmethod
    def from_css(cls, css: str) -> "Color":
        return from_css(css)


def to_padded_hex(c: int) -> str:
    s = format(c, "x")
    return "0" + s if len(s) < 2 else s


def to_css(r: int, g: int, b: int) -> str:
    return f"#{to_padded_hex(r)}{to_padded_hex(g)}{to_padded_hex(b)}"


def to_rgba(r: int, g: int, b: int, a: int = 0xFF) -> int:
    return (r << 24 | g << 16 | b << 8 | a) & _UINT32


def _lenient_hex(text: str) -> int:
    """Parse leading hex digits of `text`; 0 when there are none."""
    m = _LEADING_HEX_RE.match(text)
    if not m:
        return 0
    value = int(m.group(2), 16)
    return -value if m.group(1) == "-" else value


def from_css(css: str) -> Color:
    """Build a Color from ``#rrggbb`` forcing an opaque alpha byte.

    The string is stored verbatim. Malformed input is not rejected: digits
    are read up to the first non-hex character and a string without any hex
    digits packs to ``0x000000ff``. Validate beforehand when that matters.
    """
    parsed = _lenient_hex(css[1:])
    if not _CSS_RE.match(css):
        _logger.debug("from_css received non-canonical input %r", css)
    return Color(css, ((parsed << 8) | 0xFF) & _UINT32)


def is_valid_css(css: object) -> bool:
    return isinstance(css, str) and bool(_CSS_RE.match(css))


def parse_css(css: str) -> Color:
    """Strict counterpart of `from_css` for untrusted input.

    The css form of the result is normalized to lowercase.
    """
    if not is_valid_css(css):
        raise ColorFormatError(_HEX_ERR.format(value=css))
    return from_css(css.lower())
