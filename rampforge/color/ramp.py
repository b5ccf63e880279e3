# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Ramp generation.

A ramp is an ordered tuple of ColorStop spanning a lightness range,
derived from one seed color:

- Lightness follows a concave power curve from 0.15 to 0.95, which puts
  more distinguishable steps at the light end where the eye resolves
  lightness differences more finely.
- Chroma peaks mid-ramp and falls off toward both lightness extremes.
- Hue is bent locally near the dark and light ends ("hue torsion") by two
  Gaussian windows, giving a warm/cool split without rotating the whole
  ramp.

Curve overrides replace one channel per stop with values read from a
curve editor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from rampforge.schema.ramp import OKLCH, Channel, ColorStop, CurvePoint
from rampforge.color.colorspace import (
    hex_to_oklch,
    normalize_hue,
    oklch_array_to_hex,
)
from rampforge.curves.points import resample_points


@dataclass(frozen=True)
class RampConfig:
    """Shape constants for ramp generation."""

    # Lightness range (avoids pure black/white)
    lightness_min: float = 0.15
    lightness_max: float = 0.95

    # t ** exponent; < 1 spends more steps on the light end
    lightness_exponent: float = 0.7

    # How strongly the contrast parameter moves the exponent away from
    # lightness_exponent (0.5 contrast = no change)
    contrast_sensitivity: float = 0.6

    # Vibrance 0..1 maps linearly onto this chroma multiplier range
    vibrance_min: float = 0.2
    vibrance_max: float = 2.0

    # chroma_factor = 1 - |0.5 - l| * chroma_falloff
    chroma_falloff: float = 1.5

    # Practical OKLCH chroma ceiling for in-gamut sRGB across most hues
    chroma_ceiling: float = 0.4

    # Torsion window centers as fractions of the ramp
    dark_window: float = 0.2
    light_window: float = 0.8

    # Max hue bend in degrees at full torsion
    torsion_degrees: float = 12.0


def lightness_exponent(
    contrast: Optional[float] = None,
    config: Optional[RampConfig] = None,
) -> float:
    """
    Exponent of the lightness power curve.

    ``contrast=None`` or 0.5 gives the configured exponent (0.7 by
    default). Higher contrast lowers the exponent, pulling mid steps
    toward the light end; the curve stays monotonic for any contrast
    in [0, 1].
    """
    cfg = config or RampConfig()
    if contrast is None:
        return cfg.lightness_exponent
    return cfg.lightness_exponent * (1.0 + (0.5 - contrast) * cfg.contrast_sensitivity)


def _round_half_up(x: float) -> int:
    return int(np.floor(x + 0.5))


def torsion_weights(
    steps: int,
    config: Optional[RampConfig] = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Gaussian window weights for the dark and light torsion regions.

    Windows sit on the integer steps nearest 20% and 80% through the
    ramp, with sigma = (steps / 2) / 3, evaluated at each step's integer
    distance from the window center.

    Returns:
        (dark_weights, light_weights), each of shape (steps,)
    """
    cfg = config or RampConfig()
    positions = np.arange(steps, dtype=np.float64)
    sigma = (steps / 2.0) / 3.0
    span = max(steps - 1, 0)

    def window(center_fraction: float) -> NDArray[np.float64]:
        center = _round_half_up(center_fraction * span)
        distance = np.abs(positions - center)
        return np.exp(-(distance ** 2) / (2.0 * sigma ** 2))

    return window(cfg.dark_window), window(cfg.light_window)


def generate_ramp(
    base_color: str,
    steps: int,
    vibrance: float = 0.5,
    hue_torsion: float = 0.5,
    contrast: Optional[float] = None,
    config: Optional[RampConfig] = None,
) -> tuple[ColorStop, ...]:
    """
    Generate a color ramp from a seed color.

    Pure function: identical arguments give identical ramps.

    Args:
        base_color: Seed color as '#RRGGBB'. Malformed input falls back to
            a neutral gray seed (see hex_to_oklch).
        steps: Number of stops. Callers enforce 4-20; 1 is tolerated and
            anything below 1 yields an empty ramp.
        vibrance: 0.0 = pastel, 1.0 = vivid (chroma multiplier 0.2-2.0)
        hue_torsion: 0.5 = no bend; below/above bends the ends in
            opposite directions by up to 12 degrees
        contrast: Optional lightness-curve shaping (see lightness_exponent)
        config: Shape constants (uses defaults if None)

    Returns:
        Tuple of ColorStop, lightest-last, length ``steps``
    """
    cfg = config or RampConfig()
    if steps < 1:
        return ()

    base = hex_to_oklch(base_color)

    multiplier = cfg.vibrance_min + vibrance * (cfg.vibrance_max - cfg.vibrance_min)
    max_chroma = base.c * multiplier

    # [-1, 1], zero at the slider's midpoint
    torsion = (hue_torsion - 0.5) * 2.0

    positions = np.arange(steps, dtype=np.float64)
    t = positions / (steps - 1) if steps > 1 else np.zeros(1)

    # Lightness
    normalized = np.power(t, lightness_exponent(contrast, cfg))
    l = cfg.lightness_min + (cfg.lightness_max - cfg.lightness_min) * normalized

    # Chroma
    chroma_factor = np.clip(1.0 - np.abs(0.5 - l) * cfg.chroma_falloff, 0.0, 1.0)
    c = np.clip(max_chroma * chroma_factor, 0.0, cfg.chroma_ceiling)

    # Hue
    dark, light = torsion_weights(steps, cfg)
    h = normalize_hue(base.h + (dark - light) * torsion * cfg.torsion_degrees)

    lch = np.stack([l, c, h], axis=-1)
    hexes = oklch_array_to_hex(lch)

    return tuple(
        ColorStop(hex=hex_value, oklch=OKLCH(l=float(L), c=float(C), h=float(H)))
        for hex_value, (L, C, H) in zip(hexes, lch)
    )


# =============================================================================
# Curve Overrides
# =============================================================================


def channel_value(stop: ColorStop, channel: Channel, config: Optional[RampConfig] = None) -> float:
    """Read one stop's channel in curve units (clamped to the channel domain)."""
    cfg = config or RampConfig()
    if channel is Channel.LIGHTNESS:
        value = stop.oklch.l * 100.0
    elif channel is Channel.CHROMA:
        value = stop.oklch.c / cfg.chroma_ceiling * 100.0
    else:
        value = stop.oklch.h
    return channel.clamp(value)


def points_from_ramp(
    ramp: Sequence[ColorStop],
    channel: Channel,
    config: Optional[RampConfig] = None,
) -> tuple[CurvePoint, ...]:
    """One curve point per stop, seeded from the ramp's own values."""
    return tuple(
        CurvePoint(step=i, value=channel_value(stop, channel, config))
        for i, stop in enumerate(ramp)
    )


def _curve_values(points: Sequence[CurvePoint], count: int) -> list[float]:
    if len(points) != count:
        points = resample_points(points, count)
    return [p.value for p in sorted(points, key=lambda p: p.step)]


def apply_curve_overrides(
    ramp: Sequence[ColorStop],
    lightness: Optional[Sequence[CurvePoint]] = None,
    chroma: Optional[Sequence[CurvePoint]] = None,
    hue: Optional[Sequence[CurvePoint]] = None,
    config: Optional[RampConfig] = None,
) -> tuple[ColorStop, ...]:
    """
    Rebuild a ramp with channels taken from curve points.

    Curve units map to OKLCH as: lightness percent → l, chroma percent of
    the chroma ceiling → c, hue degrees → h. Point sets whose length
    differs from the ramp are resampled first. Channels left as None keep
    the ramp's values. Always returns new stops.
    """
    cfg = config or RampConfig()
    count = len(ramp)
    if count == 0:
        return ()

    lch = np.array(
        [[s.oklch.l, s.oklch.c, s.oklch.h] for s in ramp],
        dtype=np.float64,
    )
    if lightness is not None:
        values = _curve_values(lightness, count)
        lch[:, 0] = np.clip(np.asarray(values) / 100.0, 0.0, 1.0)
    if chroma is not None:
        values = _curve_values(chroma, count)
        lch[:, 1] = np.clip(np.asarray(values) / 100.0, 0.0, 1.0) * cfg.chroma_ceiling
    if hue is not None:
        lch[:, 2] = normalize_hue(np.asarray(_curve_values(hue, count)))

    hexes = oklch_array_to_hex(lch)
    return tuple(
        ColorStop(hex=hex_value, oklch=OKLCH(l=float(L), c=float(C), h=float(H)))
        for hex_value, (L, C, H) in zip(hexes, lch)
    )


# =============================================================================
# Ramp Summaries
# =============================================================================


def ramp_vibrance(ramp: Sequence[ColorStop], config: Optional[RampConfig] = None) -> float:
    """Mean chroma as a fraction of the chroma ceiling, capped at 1.0."""
    if not ramp:
        return 0.0
    cfg = config or RampConfig()
    mean_chroma = sum(stop.oklch.c for stop in ramp) / len(ramp)
    return min(mean_chroma / cfg.chroma_ceiling, 1.0)


def step_label(index: int) -> int:
    """Scale name for a ramp index: 50, 100, 200, 300, ..."""
    if index == 0:
        return 50
    return index * 100
