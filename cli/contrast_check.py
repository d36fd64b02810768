"""Contrast check CLI.

Reports the WCAG contrast ratio of a foreground/background pair and, when it
falls short of the target, the adjusted foreground the renderer would use.

Features:
 - Strict validation of both colors (``#rrggbb``); malformed input exits 2.
 - Emits either human-readable text or JSON (via `--json`).
 - `--legacy-order` reproduces the historical green/blue swapped convergence;
   `--no-legacy-order` overrides CELLCOLOR_LEGACY_LUMINANCE_ORDER.
 - Exit code 0 when the final pair meets the target, else 1.

Example:
  contrast-check "#1e1e1e" "#3a3a3a" --ratio 4.5 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from cellcolor.design import (
    ColorFormatError,
    color_contrast_ratio,
    ensure_contrast_ratio,
    parse_css,
)
from config.settings import DEFAULT_MIN_CONTRAST_RATIO, LEGACY_LUMINANCE_ORDER


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check and enforce a minimum foreground contrast ratio")
    p.add_argument("background", help="Background color as #rrggbb")
    p.add_argument("foreground", help="Foreground color as #rrggbb")
    p.add_argument(
        "--ratio",
        type=float,
        default=DEFAULT_MIN_CONTRAST_RATIO,
        help=f"Target contrast ratio (default: {DEFAULT_MIN_CONTRAST_RATIO})",
    )
    p.add_argument(
        "--legacy-order",
        action=argparse.BooleanOptionalAction,
        default=LEGACY_LUMINANCE_ORDER,
        help="Use the historical (R, B, G) luminance order while adjusting",
    )
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def check_pair(bg_css: str, fg_css: str, target: float, *, legacy: bool = False) -> Dict[str, Any]:
    bg = parse_css(bg_css)
    fg = parse_css(fg_css)
    ratio = color_contrast_ratio(bg, fg)
    adjusted = ensure_contrast_ratio(bg, fg, target, legacy_channel_order=legacy)
    final = adjusted if adjusted is not None else fg
    final_ratio = color_contrast_ratio(bg, final)
    return {
        "background": bg.css,
        "foreground": fg.css,
        "ratio": round(ratio, 4),
        "target": target,
        "adjusted": adjusted.css if adjusted is not None else None,
        "adjusted_ratio": round(final_ratio, 4),
        "met": final_ratio >= target,
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        result = check_pair(args.background, args.foreground, args.ratio, legacy=args.legacy_order)
    except ColorFormatError as exc:
        print(f"Invalid color: {exc}", file=sys.stderr)
        return 2
    exit_code = 0 if result["met"] else 1
    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print(f"Background: {result['background']}  Foreground: {result['foreground']}")
        print(f"  Contrast: {result['ratio']:.2f} (target {result['target']:.2f})")
        if result["adjusted"] is None:
            print("  No adjustment needed")
        else:
            print(f"  Adjusted foreground: {result['adjusted']} ({result['adjusted_ratio']:.2f})")
        if not result["met"]:
            print("  ! Target not reachable within channel bounds")
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
