# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Schema definitions for ramps, curves and semantic tokens.

All types in this module are immutable (frozen dataclasses).
A ramp is regenerated rather than edited; a token table is validated
once when it is built.
"""

from rampforge.schema.ramp import (
    MAX_STEPS,
    MIN_STEPS,
    OKLCH,
    Channel,
    ColorStop,
    CurvePoint,
    GenerationParameters,
    is_valid_hex,
)
from rampforge.schema.tokens import (
    BLACK_HEX,
    SPECIAL_BLACK_INDEX,
    SPECIAL_WHITE_INDEX,
    WHITE_HEX,
    BorderAccessible,
    ClosestBaseColor,
    ContentOnPrimary,
    DarkestWithContrast,
    DesignTokens,
    DisabledContentColor,
    LightestWithContrast,
    SemanticTokenSpec,
    ShiftStep,
    Strategy,
    TokenResolution,
    TokenTable,
    TokenTableError,
    UseSameIndex,
    is_special_index,
)
from rampforge.schema.palette import SCHEMA_VERSION, Palette

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Ramp types
    "OKLCH",
    "ColorStop",
    "Channel",
    "CurvePoint",
    "GenerationParameters",
    "MIN_STEPS",
    "MAX_STEPS",
    "is_valid_hex",
    # Token sentinels
    "SPECIAL_BLACK_INDEX",
    "SPECIAL_WHITE_INDEX",
    "BLACK_HEX",
    "WHITE_HEX",
    "is_special_index",
    # Strategy variants
    "Strategy",
    "ClosestBaseColor",
    "LightestWithContrast",
    "DarkestWithContrast",
    "DisabledContentColor",
    "ShiftStep",
    "UseSameIndex",
    "BorderAccessible",
    "ContentOnPrimary",
    # Token tables and results
    "SemanticTokenSpec",
    "TokenTable",
    "TokenTableError",
    "TokenResolution",
    "DesignTokens",
    # Top-level container
    "Palette",
]
