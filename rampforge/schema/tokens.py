# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Semantic token schema.

A token table is an ordered tuple of ``SemanticTokenSpec``. Each spec
names a UI role and carries one strategy variant describing how the
role picks its ramp index. Some strategies read other tokens, so the
table order is also the resolution order: a token may only reference
names declared before it. ``TokenTable`` checks this once, at
construction.

Resolved tokens are plain ramp indices, or one of two sentinels meaning
"pure black" / "pure white" when no ramp entry satisfies a contrast rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


# =============================================================================
# Sentinels
# =============================================================================

SPECIAL_BLACK_INDEX = -2
SPECIAL_WHITE_INDEX = -3

BLACK_HEX = "#000000"
WHITE_HEX = "#FFFFFF"


def is_special_index(index: int) -> bool:
    """True if ``index`` is one of the black/white sentinels."""
    return index in (SPECIAL_BLACK_INDEX, SPECIAL_WHITE_INDEX)


# =============================================================================
# Strategy Variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClosestBaseColor:
    """Ramp entry nearest to the seed color in weighted OKLCH distance."""
    kind: ClassVar[str] = "closest-base-color"

    def references(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class LightestWithContrast:
    """First entry scanning ascending that reaches ``ratio`` against a hex."""
    contrast_against: str
    ratio: float
    kind: ClassVar[str] = "lightest-with-contrast"

    def references(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class DarkestWithContrast:
    """
    First entry scanning descending that reaches ``ratio``.

    The comparison color is ``contrast_against_token``'s resolved color
    when set, else ``contrast_against``, else white.
    """
    ratio: float
    contrast_against: Optional[str] = None
    contrast_against_token: Optional[str] = None
    kind: ClassVar[str] = "darkest-with-contrast"

    def references(self) -> tuple[str, ...]:
        if self.contrast_against_token is None:
            return ()
        return (self.contrast_against_token,)


@dataclass(frozen=True, slots=True)
class DisabledContentColor:
    """Entry whose contrast against a background falls in a muted band."""
    background_token: str
    fallback_token: str
    band: tuple[float, float] = (1.2, 2.2)
    kind: ClassVar[str] = "disabled-content-color"

    def references(self) -> tuple[str, ...]:
        return (self.background_token, self.fallback_token)


@dataclass(frozen=True, slots=True)
class ShiftStep:
    """Another token's index moved by ``offset``, clamped to the ramp."""
    relative_to: str
    offset: int
    kind: ClassVar[str] = "shift-step"

    def references(self) -> tuple[str, ...]:
        return (self.relative_to,)


@dataclass(frozen=True, slots=True)
class UseSameIndex:
    """Another token's index, verbatim."""
    reference_token: str
    kind: ClassVar[str] = "use-same-index"

    def references(self) -> tuple[str, ...]:
        return (self.reference_token,)


@dataclass(frozen=True, slots=True)
class BorderAccessible:
    """Nearest entry to a reference token reaching ``ratio`` against a hex."""
    reference_token: str
    ratio: float
    contrast_against: str
    kind: ClassVar[str] = "border-accessible"

    def references(self) -> tuple[str, ...]:
        return (self.reference_token,)


@dataclass(frozen=True, slots=True)
class ContentOnPrimary:
    """
    Foreground for a background token.

    Prefers a ramp entry at ``preferred_ratio``, then pure black/white at
    ``minimum_ratio``, then the background's own index.
    """
    background_token: str
    preferred_ratio: float = 5.0
    minimum_ratio: float = 4.5
    kind: ClassVar[str] = "content-on-primary"

    def references(self) -> tuple[str, ...]:
        return (self.background_token,)


Strategy = Union[
    ClosestBaseColor,
    LightestWithContrast,
    DarkestWithContrast,
    DisabledContentColor,
    ShiftStep,
    UseSameIndex,
    BorderAccessible,
    ContentOnPrimary,
]


# =============================================================================
# Token Table
# =============================================================================


class TokenTableError(ValueError):
    """A token table is not in a valid resolution order."""


@dataclass(frozen=True, slots=True)
class SemanticTokenSpec:
    """
    One semantic role and how it is assigned.

    Attributes:
        name: Token name (e.g., "brandBackgroundPrimary")
        strategy: Strategy variant used to pick the ramp index
    """
    name: str
    strategy: Strategy

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Token name cannot be empty")


@dataclass(frozen=True, slots=True)
class TokenTable:
    """
    Ordered, validated sequence of token specs.

    Construction fails with ``TokenTableError`` if a name repeats or if a
    strategy references a token that is not declared earlier in the table
    (which also rules out cycles and self-references).
    """
    specs: tuple[SemanticTokenSpec, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for spec in self.specs:
            if spec.name in seen:
                raise TokenTableError(f"Duplicate token '{spec.name}'")
            for ref in spec.strategy.references():
                if ref not in seen:
                    raise TokenTableError(
                        f"Token '{spec.name}' references '{ref}' "
                        f"before it is declared"
                    )
            seen.add(spec.name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self.specs)

    def __iter__(self):
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)


# =============================================================================
# Resolution Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class TokenResolution:
    """
    Outcome of resolving one token.

    Attributes:
        index: Ramp index or a black/white sentinel
        used_fallback: True when no candidate met the strategy's contrast
            rule and its documented fallback was taken instead
    """
    index: int
    used_fallback: bool = False


@dataclass(frozen=True, slots=True)
class DesignTokens:
    """
    Concrete token colors.

    Attributes:
        brand: Brand token name → hex, in table order
        neutral: Fixed neutral token name → hex
    """
    brand: dict[str, str]
    neutral: dict[str, str]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"brand": dict(self.brand), "neutral": dict(self.neutral)}

    @classmethod
    def from_dict(cls, data: dict) -> DesignTokens:
        """Deserialize from dictionary."""
        return cls(brand=dict(data["brand"]), neutral=dict(data["neutral"]))
