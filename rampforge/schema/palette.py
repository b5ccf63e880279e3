# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Top-level palette container.

A ``Palette`` is everything produced for one parameter set: the final
ramp, the resolved token indices and the concrete token colors. It is
rebuilt from scratch on every parameter or curve change.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

from rampforge.schema.ramp import ColorStop, GenerationParameters
from rampforge.schema.tokens import DesignTokens


SCHEMA_VERSION = "1.0"


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Complete output for one parameter set.

    Attributes:
        parameters: Parameters the ramp was generated from
        ramp: Final color stops (after curve overrides), in step order
        token_indices: Token name → ramp index or black/white sentinel
        design_tokens: Token name → hex, plus the fixed neutral tokens
        version: Schema version

    Usage:
        palette = build_palette(GenerationParameters(base_color="#6366F1"))
        palette.token_hex("brandBackgroundPrimary")
        palette.to_json()
    """
    parameters: GenerationParameters
    ramp: tuple[ColorStop, ...]
    token_indices: dict[str, int]
    design_tokens: DesignTokens
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate palette structure."""
        if len(self.ramp) != self.parameters.steps:
            raise ValueError(
                f"Ramp has {len(self.ramp)} stops, "
                f"parameters ask for {self.parameters.steps}"
            )
        missing = set(self.token_indices) - set(self.design_tokens.brand)
        if missing:
            raise ValueError(f"Tokens without colors: {sorted(missing)}")

    @property
    def hexes(self) -> tuple[str, ...]:
        """Ramp hex values in step order."""
        return tuple(stop.hex for stop in self.ramp)

    def token_hex(self, name: str) -> str:
        """Resolved color for a brand or neutral token."""
        if name in self.design_tokens.brand:
            return self.design_tokens.brand[name]
        if name in self.design_tokens.neutral:
            return self.design_tokens.neutral[name]
        raise KeyError(f"No token named '{name}'")

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "parameters": self.parameters.to_dict(),
            "ramp": [stop.to_dict() for stop in self.ramp],
            "token_indices": dict(self.token_indices),
            "design_tokens": self.design_tokens.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            parameters=GenerationParameters.from_dict(data["parameters"]),
            ramp=tuple(ColorStop.from_dict(s) for s in data["ramp"]),
            token_indices=dict(data["token_indices"]),
            design_tokens=DesignTokens.from_dict(data["design_tokens"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> Palette:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
