# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Relative luminance and WCAG contrast ratios.

Thresholds used across the token resolver:
- 4.5:1  body text (WCAG AA)
- 3.0:1  borders and UI components
- 7.0:1  enhanced text (WCAG AAA)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from rampforge.color.colorspace import parse_hex
from rampforge.schema.tokens import BLACK_HEX, WHITE_HEX

# Relative luminance weights (Rec. 709 primaries)
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

AA_RATIO = 4.5
AAA_RATIO = 7.0


def luminance(hex_color: str) -> float:
    """
    Relative luminance of a hex color, 0.0 (black) to 1.0 (white).

    Uses the WCAG 2.x linearization (0.03928 threshold, 2.4 gamma).
    Unparseable input counts as black.
    """
    srgb = parse_hex(hex_color)
    if srgb is None:
        return 0.0
    linear = np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )
    return float(linear @ _LUMINANCE_WEIGHTS)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    WCAG contrast ratio between two hex colors.

    Symmetric in its arguments; 1.0 for equal luminance, 21.0 for
    black on white.
    """
    l1 = luminance(color1)
    l2 = luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


@dataclass(frozen=True, slots=True)
class ContrastChoice:
    """Black or white foreground and its contrast against a background."""
    color: str
    ratio: float


def best_contrast_color(bg_color: str) -> ContrastChoice:
    """Pick pure black or white, whichever contrasts more with ``bg_color``."""
    white = contrast_ratio(bg_color, WHITE_HEX)
    black = contrast_ratio(bg_color, BLACK_HEX)
    if white > black:
        return ContrastChoice(color=WHITE_HEX, ratio=white)
    return ContrastChoice(color=BLACK_HEX, ratio=black)


def wcag_level(ratio: float) -> str:
    """"AAA", "AA" or "" for a text contrast ratio."""
    if ratio >= AAA_RATIO:
        return "AAA"
    if ratio >= AA_RATIO:
        return "AA"
    return ""
