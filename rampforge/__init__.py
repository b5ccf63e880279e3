# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Rampforge -- Color ramp and semantic design-token generator.

Turns one seed color into a perceptually spaced ramp, lets callers
reshape it with per-channel curves, and assigns UI roles to ramp entries
under WCAG contrast rules.

Quick start::

    from rampforge import build_palette, GenerationParameters

    p = build_palette(GenerationParameters(base_color="#6366F1", steps=12))
    p.ramp                                  # tuple of ColorStop
    p.token_indices["brandContentOnPrimary"]
    p.to_json()
"""

from __future__ import annotations

__version__ = "1.0.0"

from rampforge.build import build_palette
from rampforge.color import (
    contrast_ratio,
    generate_ramp,
    hex_to_oklch,
    oklch_to_hex,
)
from rampforge.curves import CurveEditor, drag_update, resample_points, spline_samples
from rampforge.schema import (
    OKLCH,
    SPECIAL_BLACK_INDEX,
    SPECIAL_WHITE_INDEX,
    Channel,
    ColorStop,
    CurvePoint,
    GenerationParameters,
    Palette,
)
from rampforge.tokens import resolve_semantic_tokens

__all__ = [
    # Core API
    "build_palette",
    "generate_ramp",
    "resolve_semantic_tokens",
    "hex_to_oklch",
    "oklch_to_hex",
    "contrast_ratio",
    # Curves
    "resample_points",
    "drag_update",
    "spline_samples",
    "CurveEditor",
    # Types (commonly needed)
    "OKLCH",
    "ColorStop",
    "Channel",
    "CurvePoint",
    "GenerationParameters",
    "Palette",
    "SPECIAL_BLACK_INDEX",
    "SPECIAL_WHITE_INDEX",
    # Version
    "__version__",
]
