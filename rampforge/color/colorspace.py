# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → OKLab → OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

The array functions accept any shape (..., 3). The hex helpers at the
bottom never raise: a text field mid-edit is a normal state for the
caller, so malformed input is logged and answered with a fixed default.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from rampforge.schema.ramp import OKLCH, is_valid_hex

logger = logging.getLogger(__name__)

# Returned for unparseable hex input
NEUTRAL_OKLCH = OKLCH(l=0.5, c=0.0, h=0.0)
# Returned when an OKLCH value cannot be rendered
FALLBACK_HEX = "#000000"

# Below this chroma the hue angle is numerical noise
ACHROMATIC_CHROMA = 1e-6


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    linear = np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )
    return linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut values are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # Signed cube root keeps out-of-gamut inputs finite
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values, unclipped
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def normalize_hue(h):
    """
    Wrap hue degrees into [0, 360).

    Works on floats and arrays. ``-1e-15 % 360`` rounds to 360.0 in
    floating point, so that case is folded back to 0.
    """
    wrapped = np.mod(h, 360.0)
    wrapped = np.where(wrapped >= 360.0, 0.0, wrapped)
    if np.ndim(wrapped) == 0:
        return float(wrapped)
    return wrapped


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H).
        H is in degrees [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = normalize_hue(np.degrees(np.arctan2(b, a)))

    return np.stack([L, C, np.asarray(H, dtype=np.float64)], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H), H in degrees

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H)
        - L: Lightness [0, 1]
        - C: Chroma [0, ~0.37 for sRGB gamut]
        - H: Hue in degrees [0, 360)
    """
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return oklab_to_oklch(lab)


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Lightness is clamped to [0, 1] and chroma to >= 0 before conversion;
    the result is clipped to the sRGB cube (no other gamut mapping).
    """
    lch = np.array(lch, dtype=np.float64)
    lch[..., 0] = np.clip(lch[..., 0], 0.0, 1.0)
    lch[..., 1] = np.maximum(lch[..., 1], 0.0)
    lab = oklch_to_oklab(lch)
    linear = oklab_to_linear_rgb(lab)
    return linear_to_srgb(linear)


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """Format one sRGB triple [0,1] as '#RRGGBB'."""
    r, g, b = (np.clip(srgb, 0.0, 1.0) * 255).round().astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# Hex ↔ OKLCH
# =============================================================================


def parse_hex(hex_color: object) -> Optional[NDArray[np.float64]]:
    """
    Parse '#RRGGBB' into sRGB floats [0,1].

    Returns None (and logs a warning) for anything else.
    """
    if not is_valid_hex(hex_color):
        logger.warning("Invalid hex color %r", hex_color)
        return None
    digits = hex_color[1:]
    channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    return np.array(channels, dtype=np.float64) / 255.0


def hex_to_oklch(hex_color: str) -> OKLCH:
    """
    Convert a hex color string to OKLCH.

    Args:
        hex_color: Hex string like "#6366F1"

    Returns:
        OKLCH with hue in [0, 360). Achromatic colors get hue 0.
        Malformed input returns NEUTRAL_OKLCH (l=0.5, c=0, h=0).
    """
    srgb = parse_hex(hex_color)
    if srgb is None:
        return NEUTRAL_OKLCH

    L, C, H = (float(v) for v in srgb_to_oklch(srgb))
    if C < ACHROMATIC_CHROMA:
        C, H = 0.0, 0.0

    return OKLCH(l=min(max(L, 0.0), 1.0), c=C, h=H)


def oklch_to_hex(l: float, c: float, h: float) -> str:
    """
    Convert OKLCH values to a hex color string.

    Values need not be in range: lightness and chroma are clamped, hue is
    wrapped, and out-of-gamut colors are clipped to the sRGB cube.
    Non-finite components are logged and rendered as FALLBACK_HEX.

    Args:
        l: Lightness [0, 1]
        c: Chroma [0, ~0.4]
        h: Hue in degrees

    Returns:
        Hex string like "#4F46E5"
    """
    if not all(math.isfinite(v) for v in (l, c, h)):
        logger.warning("Cannot render non-finite OKLCH(%r, %r, %r)", l, c, h)
        return FALLBACK_HEX

    lch = np.array([l, c, normalize_hue(h)], dtype=np.float64)
    return srgb_to_hex(oklch_to_srgb(lch))


def oklch_array_to_hex(lch: NDArray[np.float64]) -> list[str]:
    """Vectorized oklch_to_hex for an (N, 3) array of finite values."""
    srgb = oklch_to_srgb(lch)
    return [srgb_to_hex(row) for row in srgb.reshape(-1, 3)]
