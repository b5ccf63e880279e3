# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Ramp schema: color stops, curve points and generation parameters.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same parameters → same ramp
- Serializable: JSON-ready via to_dict / from_dict

OKLCH Color Space:
- l (Lightness): 0.0 = black, 1.0 = white
- c (Chroma): 0.0 = gray, ~0.37 = max saturation in sRGB
- h (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈265=blue/indigo)

A ramp is a plain ``tuple[ColorStop, ...]``. Index positions are stable
across regeneration as long as the step count does not change.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Limits
# =============================================================================

MIN_STEPS = 4
MAX_STEPS = 20

_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_valid_hex(value: object) -> bool:
    """True for strings shaped like '#RRGGBB' (either case)."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class OKLCH:
    """
    A single color in OKLCH color space.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (0.0 = neutral gray)
        h: Hue in degrees, normalized to [0, 360)
    """
    l: float
    c: float
    h: float = 0.0

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.l}")
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> OKLCH:
        """Deserialize from dictionary."""
        return cls(l=data["l"], c=data["c"], h=data.get("h", 0.0))


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    One entry of a ramp.

    ``hex`` and ``oklch`` describe the same color; ``hex`` is the
    gamut-clipped rendering of ``oklch``. Stops are replaced, never edited.

    Attributes:
        hex: Hex string like "#4F46E5"
        oklch: Perceptual coordinates the hex was rendered from
    """
    hex: str
    oklch: OKLCH

    def __post_init__(self) -> None:
        if not is_valid_hex(self.hex):
            raise ValueError(f"Stop hex must look like '#RRGGBB', got {self.hex!r}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"hex": self.hex, "oklch": self.oklch.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        return cls(hex=data["hex"], oklch=OKLCH.from_dict(data["oklch"]))


# =============================================================================
# Curve Types
# =============================================================================


class Channel(Enum):
    """
    Editable ramp channels and the value domain of their curve points.

    Curve values are expressed in UI units, not raw OKLCH units:
    lightness in percent, chroma in percent of the chroma ceiling,
    hue in degrees.
    """
    LIGHTNESS = "lightness"
    CHROMA = "chroma"
    HUE = "hue"

    @property
    def min_value(self) -> float:
        return _CHANNEL_DOMAINS[self][0]

    @property
    def max_value(self) -> float:
        return _CHANNEL_DOMAINS[self][1]

    def clamp(self, value: float) -> float:
        """Clamp a curve value into this channel's domain."""
        return max(self.min_value, min(self.max_value, value))


_CHANNEL_DOMAINS = {
    Channel.LIGHTNESS: (15.0, 95.0),
    Channel.CHROMA: (0.0, 100.0),
    Channel.HUE: (0.0, 360.0),
}


@dataclass(frozen=True, slots=True)
class CurvePoint:
    """
    A draggable control point on a channel curve.

    Attributes:
        step: Ramp index the point sits on
        value: Value in the channel's domain
    """
    step: int
    value: float

    def __post_init__(self) -> None:
        if self.step < 0:
            raise ValueError(f"Step must be >= 0, got {self.step}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"step": self.step, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> CurvePoint:
        """Deserialize from dictionary."""
        return cls(step=data["step"], value=data["value"])


# =============================================================================
# Generation Parameters
# =============================================================================


@dataclass(frozen=True, slots=True)
class GenerationParameters:
    """
    Everything the ramp generator needs, owned by the hosting session.

    The generator is a pure function of these values plus optional curve
    overrides. Ranges are enforced here so the core can assume them.

    Attributes:
        base_color: Seed color as '#RRGGBB'
        steps: Ramp length (4-20)
        vibrance: 0.0 = pastel, 1.0 = vivid
        hue_torsion: 0.0 = cool bend, 0.5 = none, 1.0 = warm bend
        contrast: 0.0 = flat, 0.5 = default, 1.0 = high
    """
    base_color: str = "#6366F1"
    steps: int = 12
    vibrance: float = 0.5
    hue_torsion: float = 0.5
    contrast: float = 0.5

    def __post_init__(self) -> None:
        """Validate parameter ranges."""
        if not is_valid_hex(self.base_color):
            raise ValueError(
                f"Base color must look like '#RRGGBB', got {self.base_color!r}"
            )
        if not MIN_STEPS <= self.steps <= MAX_STEPS:
            raise ValueError(
                f"Steps must be {MIN_STEPS}-{MAX_STEPS}, got {self.steps}"
            )
        for name in ("vibrance", "hue_torsion", "contrast"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be 0-1, got {value}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "base_color": self.base_color,
            "steps": self.steps,
            "vibrance": self.vibrance,
            "hue_torsion": self.hue_torsion,
            "contrast": self.contrast,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GenerationParameters:
        """Deserialize from dictionary, filling missing fields with defaults."""
        return cls(**{k: v for k, v in data.items() if k in _PARAMETER_FIELDS})


_PARAMETER_FIELDS = ("base_color", "steps", "vibrance", "hue_torsion", "contrast")
