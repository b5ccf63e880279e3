# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Concrete token colors from resolved indices."""

from __future__ import annotations

from typing import Optional, Sequence

from rampforge.schema.ramp import ColorStop
from rampforge.schema.tokens import DesignTokens, TokenTable
from rampforge.tokens.resolver import resolve_semantic_tokens, token_hex
from rampforge.tokens.table import NEUTRAL_TOKENS


def design_tokens_from_indices(
    ramp: Sequence[ColorStop],
    indices: dict[str, int],
) -> DesignTokens:
    """Map resolved indices to hex colors and attach the neutral tokens."""
    brand = {name: token_hex(ramp, index) for name, index in indices.items()}
    return DesignTokens(brand=brand, neutral=dict(NEUTRAL_TOKENS))


def compute_design_tokens(
    ramp: Sequence[ColorStop],
    base_color: str,
    table: Optional[TokenTable] = None,
) -> DesignTokens:
    """Resolve ``table`` against ``ramp`` and return brand + neutral colors."""
    indices = resolve_semantic_tokens(ramp, base_color, table)
    return design_tokens_from_indices(ramp, indices)
