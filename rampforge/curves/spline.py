# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Catmull-Rom spline through curve points, for drawing only.

The ramp itself never reads the spline; it uses the control point values
directly. The spline gives the editor a smooth line between them.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from rampforge.schema.ramp import CurvePoint

# Cardinal spline tension (0.5 = Catmull-Rom)
TENSION = 0.5


def _basis(t: NDArray[np.float64], tension: float = TENSION) -> NDArray[np.float64]:
    """
    Cardinal spline basis weights for parameters ``t``.

    Returns:
        Array of shape (len(t), 4): weights for p0, p1, p2, p3
    """
    s = tension
    t2 = t * t
    t3 = t2 * t
    return np.stack([
        -s * t3 + 2 * s * t2 - s * t,
        (2 - s) * t3 + (s - 3) * t2 + 1,
        (s - 2) * t3 + (3 - 2 * s) * t2 + s * t,
        s * t3 - s * t2,
    ], axis=-1)


def spline_samples(
    points: Sequence[CurvePoint],
    segments: int = 50,
) -> list[tuple[float, float]]:
    """
    Sample a Catmull-Rom curve through the control points.

    The first and last points are duplicated as virtual neighbors so the
    curve starts and ends exactly on them.

    Args:
        points: Control points (sorted by step before sampling)
        segments: Samples per span between adjacent control points

    Returns:
        (x, y) pairs with x in step units and y in channel units:
        ``segments`` samples per span followed by the last control point.
        Fewer than two points are returned as-is.
    """
    ordered = sorted(points, key=lambda p: p.step)
    coords = np.array([[p.step, p.value] for p in ordered], dtype=np.float64)
    if len(coords) < 2 or segments < 1:
        return [(float(x), float(y)) for x, y in coords]

    padded = np.vstack([coords[:1], coords, coords[-1:]])
    weights = _basis(np.arange(segments, dtype=np.float64) / segments)

    samples = []
    for i in range(len(coords) - 1):
        window = padded[i:i + 4]
        samples.append(weights @ window)
    samples.append(coords[-1:])

    curve = np.vstack(samples)
    return [(float(x), float(y)) for x, y in curve]
