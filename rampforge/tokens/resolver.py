# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Semantic token resolution.

Walks a TokenTable in declaration order and picks a ramp index for every
token. Each strategy is a search with a defined fallback, so a ramp of
any length >= 1 always yields an index (or a black/white sentinel) for
every token. Fallbacks are reported through TokenResolution.used_fallback
and logged at DEBUG; they are never raised.

Ramp indices are assumed to run from darkest (0) to lightest (len - 1),
the order generate_ramp produces.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from rampforge.schema.ramp import ColorStop
from rampforge.schema.tokens import (
    BLACK_HEX,
    SPECIAL_BLACK_INDEX,
    SPECIAL_WHITE_INDEX,
    WHITE_HEX,
    BorderAccessible,
    ClosestBaseColor,
    ContentOnPrimary,
    DarkestWithContrast,
    DisabledContentColor,
    LightestWithContrast,
    ShiftStep,
    Strategy,
    TokenResolution,
    TokenTable,
    UseSameIndex,
)
from rampforge.color.colorspace import hex_to_oklch
from rampforge.color.contrast import contrast_ratio
from rampforge.tokens.table import BRAND_TOKENS

logger = logging.getLogger(__name__)


# =============================================================================
# Index Helpers
# =============================================================================


def token_hex(ramp: Sequence[ColorStop], index: int) -> str:
    """
    Color of a resolved index.

    Sentinels map to pure black/white. An index outside the ramp (only
    possible with an empty ramp) reads as white.
    """
    if index == SPECIAL_BLACK_INDEX:
        return BLACK_HEX
    if index == SPECIAL_WHITE_INDEX:
        return WHITE_HEX
    if 0 <= index < len(ramp):
        return ramp[index].hex
    return WHITE_HEX


def _anchor(ramp: Sequence[ColorStop], index: int) -> int:
    """Ramp position to search outward from; sentinels sit at the ends."""
    if index == SPECIAL_BLACK_INDEX:
        return 0
    if index == SPECIAL_WHITE_INDEX:
        return len(ramp) - 1
    return max(0, min(len(ramp) - 1, index))


def _outward(start: int, length: int) -> Iterator[int]:
    """start, start-1, start+1, start-2, start+2, ... within [0, length)."""
    yield start
    left, right = start - 1, start + 1
    while left >= 0 or right < length:
        if left >= 0:
            yield left
            left -= 1
        if right < length:
            yield right
            right += 1


# =============================================================================
# Strategies
# =============================================================================


def closest_to_base(ramp: Sequence[ColorStop], base_color: str) -> int:
    """
    Index with the smallest weighted OKLCH distance to ``base_color``.

    distance = 2·ΔL + 1.5·ΔC + Δh/360, with Δh wrapped to at most 180°.
    Ties keep the lower index.
    """
    target = hex_to_oklch(base_color)
    best_index = 0
    best_diff = float("inf")
    for i, stop in enumerate(ramp):
        l_diff = abs(stop.oklch.l - target.l)
        c_diff = abs(stop.oklch.c - target.c)
        h_diff = abs(stop.oklch.h - target.h)
        if h_diff > 180.0:
            h_diff = 360.0 - h_diff
        diff = l_diff * 2.0 + c_diff * 1.5 + h_diff / 360.0
        if diff < best_diff:
            best_diff = diff
            best_index = i
    return best_index


def lightest_with_contrast(
    ramp: Sequence[ColorStop],
    against: str,
    ratio: float,
) -> TokenResolution:
    """First index scanning ascending that reaches ``ratio``; else the last."""
    for i, stop in enumerate(ramp):
        if contrast_ratio(stop.hex, against) >= ratio:
            return TokenResolution(index=i)
    return TokenResolution(index=len(ramp) - 1, used_fallback=True)


def darkest_with_contrast(
    ramp: Sequence[ColorStop],
    against: str,
    ratio: float,
) -> TokenResolution:
    """First index scanning descending that reaches ``ratio``; else 0."""
    for i in range(len(ramp) - 1, -1, -1):
        if contrast_ratio(ramp[i].hex, against) >= ratio:
            return TokenResolution(index=i)
    return TokenResolution(index=0, used_fallback=True)


def disabled_content(
    ramp: Sequence[ColorStop],
    background: str,
    fallback_index: int,
    band: tuple[float, float] = (1.2, 2.2),
) -> TokenResolution:
    """
    First index (ascending) whose contrast against ``background`` lies in
    ``band``.

    Without an in-band entry, the index whose contrast is numerically
    closest to the band wins; ``fallback_index`` wins ties.
    """
    low, high = band

    def distance(hex_color: str) -> float:
        ratio = contrast_ratio(hex_color, background)
        if ratio < low:
            return low - ratio
        if ratio > high:
            return ratio - high
        return 0.0

    for i, stop in enumerate(ramp):
        if distance(stop.hex) == 0.0:
            return TokenResolution(index=i)

    best_index = fallback_index
    best_distance = distance(token_hex(ramp, fallback_index))
    for i, stop in enumerate(ramp):
        d = distance(stop.hex)
        if d < best_distance:
            best_distance = d
            best_index = i
    return TokenResolution(index=best_index, used_fallback=True)


def shift_step(ramp: Sequence[ColorStop], reference_index: int, offset: int) -> int:
    """``reference_index + offset`` clamped to the ramp."""
    return max(0, min(len(ramp) - 1, reference_index + offset))


def border_accessible(
    ramp: Sequence[ColorStop],
    reference_index: int,
    against: str,
    ratio: float,
) -> TokenResolution:
    """
    The reference index if it already reaches ``ratio`` against
    ``against``; otherwise the nearest index found expanding outward
    (left first at each distance). Falls back to the reference index.
    """
    if contrast_ratio(token_hex(ramp, reference_index), against) >= ratio:
        return TokenResolution(index=reference_index)

    start = _anchor(ramp, reference_index)
    for i in _outward(start, len(ramp)):
        if i == reference_index:
            continue
        if contrast_ratio(ramp[i].hex, against) >= ratio:
            return TokenResolution(index=i)
    return TokenResolution(index=reference_index, used_fallback=True)


def content_on_background(
    ramp: Sequence[ColorStop],
    background_index: int,
    preferred_ratio: float = 5.0,
    minimum_ratio: float = 4.5,
) -> TokenResolution:
    """
    Foreground index for a background token.

    1. Ramp entries outward from the background (itself, then ±1, ±2, …)
       reaching ``preferred_ratio``.
    2. Pure black or white reaching ``minimum_ratio``; black only when its
       ratio is strictly higher than white's.
    3. The background's own index (foreground == background).
    """
    background = token_hex(ramp, background_index)

    if ramp:
        for i in _outward(_anchor(ramp, background_index), len(ramp)):
            if contrast_ratio(ramp[i].hex, background) >= preferred_ratio:
                return TokenResolution(index=i)

    black = contrast_ratio(BLACK_HEX, background)
    white = contrast_ratio(WHITE_HEX, background)
    if black > white and black >= minimum_ratio:
        return TokenResolution(index=SPECIAL_BLACK_INDEX)
    if white >= minimum_ratio:
        return TokenResolution(index=SPECIAL_WHITE_INDEX)

    return TokenResolution(index=background_index, used_fallback=True)


# =============================================================================
# Dispatch
# =============================================================================


def resolve_strategy(
    strategy: Strategy,
    ramp: Sequence[ColorStop],
    known: dict[str, int],
    base_color: str,
) -> TokenResolution:
    """
    Pick the index for one strategy.

    ``known`` holds the indices of every token declared earlier in the
    table; a validated TokenTable guarantees references are present.
    """
    if isinstance(strategy, ClosestBaseColor):
        return TokenResolution(index=closest_to_base(ramp, base_color))

    elif isinstance(strategy, LightestWithContrast):
        return lightest_with_contrast(ramp, strategy.contrast_against, strategy.ratio)

    elif isinstance(strategy, DarkestWithContrast):
        against = strategy.contrast_against or WHITE_HEX
        if strategy.contrast_against_token is not None:
            against = token_hex(ramp, known[strategy.contrast_against_token])
        return darkest_with_contrast(ramp, against, strategy.ratio)

    elif isinstance(strategy, DisabledContentColor):
        background = token_hex(ramp, known[strategy.background_token])
        return disabled_content(
            ramp, background, known[strategy.fallback_token], strategy.band,
        )

    elif isinstance(strategy, ShiftStep):
        return TokenResolution(
            index=shift_step(ramp, known[strategy.relative_to], strategy.offset)
        )

    elif isinstance(strategy, UseSameIndex):
        return TokenResolution(index=known[strategy.reference_token])

    elif isinstance(strategy, BorderAccessible):
        return border_accessible(
            ramp,
            known[strategy.reference_token],
            strategy.contrast_against,
            strategy.ratio,
        )

    elif isinstance(strategy, ContentOnPrimary):
        return content_on_background(
            ramp,
            known[strategy.background_token],
            strategy.preferred_ratio,
            strategy.minimum_ratio,
        )

    raise TypeError(f"Unknown token strategy: {type(strategy).__name__}")


def resolve_token_details(
    ramp: Sequence[ColorStop],
    base_color: str,
    table: Optional[TokenTable] = None,
) -> dict[str, TokenResolution]:
    """
    Resolve every token in ``table`` (BRAND_TOKENS by default).

    Returns:
        Token name → TokenResolution, in table order
    """
    if table is None:
        table = BRAND_TOKENS
    known: dict[str, int] = {}
    details: dict[str, TokenResolution] = {}

    if not ramp:
        logger.debug("Resolving %d tokens against an empty ramp", len(table))

    for spec in table:
        if not ramp:
            resolution = TokenResolution(index=0, used_fallback=True)
        else:
            resolution = resolve_strategy(spec.strategy, ramp, known, base_color)
        if resolution.used_fallback:
            logger.debug(
                "Token %s (%s) fell back to index %d",
                spec.name, spec.strategy.kind, resolution.index,
            )
        known[spec.name] = resolution.index
        details[spec.name] = resolution

    return details


def resolve_semantic_tokens(
    ramp: Sequence[ColorStop],
    base_color: str,
    table: Optional[TokenTable] = None,
) -> dict[str, int]:
    """
    Resolve every token in ``table`` to a ramp index or sentinel.

    Usage:
        ramp = generate_ramp("#6366F1", 12)
        indices = resolve_semantic_tokens(ramp, "#6366F1")
        ramp[indices["brandBackgroundPrimary"]].hex
    """
    details = resolve_token_details(ramp, base_color, table)
    return {name: r.index for name, r in details.items()}
