# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Built-in token tables.

NEUTRAL_TOKENS are fixed system colors that brand tokens are measured
against. BRAND_TOKENS assigns each brand role a ramp index; it is a
TokenTable, so an entry that references a later token fails at import.

Contrast targets:
- 4.5:1 for text roles
- 3.0:1 for the accessible border
- 1.2-2.2:1 band for disabled content (visible but muted)
"""

from __future__ import annotations

from rampforge.schema.tokens import (
    BorderAccessible,
    ClosestBaseColor,
    ContentOnPrimary,
    DarkestWithContrast,
    DisabledContentColor,
    LightestWithContrast,
    SemanticTokenSpec,
    ShiftStep,
    TokenTable,
)


NEUTRAL_TOKENS: dict[str, str] = {
    "backgroundPrimary": "#FFFFFF",
    "backgroundSecondary": "#F3F3F3",
    "backgroundTertiary": "#E8E8E8",
    "contentPrimary": "#000000",
    "contentSecondary": "#4B4B4B",
    "contentTertiary": "#5E5E5E",
}


BRAND_TOKENS = TokenTable(specs=(
    SemanticTokenSpec(
        name="brandBackgroundPrimary",
        strategy=ClosestBaseColor(),
    ),
    SemanticTokenSpec(
        name="brandBackgroundSecondary",
        strategy=LightestWithContrast(
            contrast_against=NEUTRAL_TOKENS["contentTertiary"],
            ratio=4.5,
        ),
    ),
    SemanticTokenSpec(
        name="brandBackgroundDisabled",
        strategy=ShiftStep(relative_to="brandBackgroundSecondary", offset=1),
    ),
    SemanticTokenSpec(
        name="brandContentPrimary",
        strategy=DarkestWithContrast(
            contrast_against=NEUTRAL_TOKENS["backgroundSecondary"],
            ratio=4.5,
        ),
    ),
    SemanticTokenSpec(
        name="brandContentOnSecondary",
        strategy=DarkestWithContrast(
            contrast_against_token="brandBackgroundSecondary",
            ratio=4.5,
        ),
    ),
    SemanticTokenSpec(
        name="brandContentDisabled",
        strategy=DisabledContentColor(
            background_token="brandBackgroundDisabled",
            fallback_token="brandContentOnSecondary",
        ),
    ),
    SemanticTokenSpec(
        name="brandBorderAccessible",
        strategy=BorderAccessible(
            reference_token="brandBackgroundPrimary",
            ratio=3.0,
            contrast_against=NEUTRAL_TOKENS["backgroundTertiary"],
        ),
    ),
    SemanticTokenSpec(
        name="brandBorderSubtle",
        strategy=ShiftStep(relative_to="brandBackgroundSecondary", offset=-2),
    ),
    SemanticTokenSpec(
        name="brandContentOnPrimary",
        strategy=ContentOnPrimary(background_token="brandBackgroundPrimary"),
    ),
))
