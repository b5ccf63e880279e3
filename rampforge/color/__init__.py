# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Perceptual color math and ramp generation.

All operations are pure and deterministic.
"""

from rampforge.color.colorspace import hex_to_oklch, normalize_hue, oklch_to_hex
from rampforge.color.contrast import (
    best_contrast_color,
    contrast_ratio,
    luminance,
    wcag_level,
)
from rampforge.color.ramp import (
    RampConfig,
    apply_curve_overrides,
    generate_ramp,
    points_from_ramp,
    ramp_vibrance,
    step_label,
)

__all__ = [
    "hex_to_oklch",
    "oklch_to_hex",
    "normalize_hue",
    "luminance",
    "contrast_ratio",
    "best_contrast_color",
    "wcag_level",
    "RampConfig",
    "generate_ramp",
    "apply_curve_overrides",
    "points_from_ramp",
    "ramp_vibrance",
    "step_label",
]
