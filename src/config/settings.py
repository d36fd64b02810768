"""Global configuration and constants for color computation."""

from __future__ import annotations

import os
from typing import Final


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# WCAG AA threshold for normal-size text
DEFAULT_MIN_CONTRAST_RATIO: Final = _env_float("CELLCOLOR_MIN_CONTRAST", 4.5)

# Reproduce historical (R, B, G) luminance ordering inside enforcement loops
LEGACY_LUMINANCE_ORDER: Final = _env_flag("CELLCOLOR_LEGACY_LUMINANCE_ORDER")

# Hard cap on enforcement loop iterations; channel bounds stop the loops well before it
MAX_ENFORCEMENT_ITERATIONS: Final = 256
