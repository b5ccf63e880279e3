# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Main palette building API.

This is the primary entry point: parameters (and optional curve edits)
in, a complete Palette out. Nothing is cached or updated in place; call
it again whenever any input changes.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from rampforge.schema import CurvePoint, GenerationParameters, Palette, TokenTable
from rampforge.color.ramp import RampConfig, apply_curve_overrides, generate_ramp
from rampforge.tokens.design import design_tokens_from_indices
from rampforge.tokens.resolver import resolve_semantic_tokens

logger = logging.getLogger(__name__)


def build_palette(
    params: Optional[GenerationParameters] = None,
    *,
    lightness: Optional[Sequence[CurvePoint]] = None,
    chroma: Optional[Sequence[CurvePoint]] = None,
    hue: Optional[Sequence[CurvePoint]] = None,
    table: Optional[TokenTable] = None,
    config: Optional[RampConfig] = None,
) -> Palette:
    """
    Generate a ramp and resolve its semantic tokens.

    Args:
        params: Generation parameters (defaults if None)
        lightness: Optional lightness curve points overriding the ramp
        chroma: Optional chroma curve points overriding the ramp
        hue: Optional hue curve points overriding the ramp
        table: Token table (BRAND_TOKENS if None)
        config: Ramp shape constants (defaults if None)

    Returns:
        Palette with the final ramp, token indices and token colors

    Example:
        >>> from rampforge import build_palette, GenerationParameters
        >>> p = build_palette(GenerationParameters(base_color="#6366F1", steps=12))
        >>> len(p.ramp)
        12
    """
    params = params or GenerationParameters()

    ramp = generate_ramp(
        params.base_color,
        params.steps,
        vibrance=params.vibrance,
        hue_torsion=params.hue_torsion,
        contrast=params.contrast,
        config=config,
    )

    if lightness is not None or chroma is not None or hue is not None:
        ramp = apply_curve_overrides(
            ramp, lightness=lightness, chroma=chroma, hue=hue, config=config,
        )

    indices = resolve_semantic_tokens(ramp, params.base_color, table)
    logger.debug("Built %d-step palette for %s", len(ramp), params.base_color)

    return Palette(
        parameters=params,
        ramp=ramp,
        token_indices=indices,
        design_tokens=design_tokens_from_indices(ramp, indices),
    )
