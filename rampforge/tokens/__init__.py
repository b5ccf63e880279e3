# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Semantic token assignment.

Picks ramp entries for UI roles (backgrounds, content, borders, disabled
states) from a declarative strategy table, searching for WCAG contrast
targets and falling back to documented defaults when none is met.
"""

from rampforge.tokens.table import BRAND_TOKENS, NEUTRAL_TOKENS
from rampforge.tokens.resolver import (
    resolve_semantic_tokens,
    resolve_strategy,
    resolve_token_details,
    token_hex,
)
from rampforge.tokens.design import compute_design_tokens, design_tokens_from_indices

__all__ = [
    "BRAND_TOKENS",
    "NEUTRAL_TOKENS",
    "resolve_semantic_tokens",
    "resolve_token_details",
    "resolve_strategy",
    "token_hex",
    "compute_design_tokens",
    "design_tokens_from_indices",
]
