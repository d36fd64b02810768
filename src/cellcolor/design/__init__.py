"""Color design helpers for cell rendering.

Contains packed/hex color representation, alpha compositing, WCAG contrast
computation and minimum-contrast enforcement. The Qt bridge lives in
`cellcolor.design.qt_bridge` and is not imported here so the pure helpers
stay usable without PyQt6 loaded.
"""

from .representation import (  # noqa: F401
    Color,
    ColorFormatError,
    to_padded_hex,
    to_css,
    to_rgba,
    from_css,
    is_valid_css,
    parse_css,
)
from .compositing import blend  # noqa: F401
from .contrast import (  # noqa: F401
    rgb_relative_luminance,
    rgb_relative_luminance2,
    contrast_ratio,
    color_contrast_ratio,
)
from .enforcement import (  # noqa: F401
    ensure_contrast_ratio,
    reduce_luminance,
    increase_luminance,
)

__all__ = [
    "Color",
    "ColorFormatError",
    "to_padded_hex",
    "to_css",
    "to_rgba",
    "from_css",
    "is_valid_css",
    "parse_css",
    "blend",
    "rgb_relative_luminance",
    "rgb_relative_luminance2",
    "contrast_ratio",
    "color_contrast_ratio",
    "ensure_contrast_ratio",
    "reduce_luminance",
    "increase_luminance",
]
