# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Curve point operations.

Each ramp channel has one control point per ramp index. Two operations
keep that set in shape:

- Resampling, when the step count changes (piecewise-linear).
- Drag updates, when one point moves: neighbors follow with a raised
  cosine falloff over a quarter of the curve, so edits stay local.
"""

from __future__ import annotations

import math
from typing import Sequence

from rampforge.schema.ramp import Channel, CurvePoint

# Value used when resampling an empty point set
DEFAULT_VALUE = 50.0


def resample_points(
    points: Sequence[CurvePoint],
    count: int,
) -> tuple[CurvePoint, ...]:
    """
    Resample a curve to ``count`` evenly spaced points.

    New index i sits at position i / (count - 1) * (len(points) - 1) along
    the old (step-sorted) points and is linearly interpolated between the
    two bracketing values. With 0 or 1 old points every new point takes
    the single value (or DEFAULT_VALUE).

    Args:
        points: Existing control points, any order
        count: New number of points

    Returns:
        ``count`` points with steps 0..count-1
    """
    if count <= 0:
        return ()

    ordered = sorted(points, key=lambda p: p.step)
    if len(ordered) <= 1:
        value = ordered[0].value if ordered else DEFAULT_VALUE
        return tuple(CurvePoint(step=i, value=value) for i in range(count))

    last = len(ordered) - 1
    resampled = []
    for i in range(count):
        position = i / (count - 1) * last if count > 1 else 0.0
        lo = min(int(math.floor(position)), last)
        hi = min(lo + 1, last)
        frac = position - lo
        value = ordered[lo].value + (ordered[hi].value - ordered[lo].value) * frac
        resampled.append(CurvePoint(step=i, value=value))
    return tuple(resampled)


def influence(dragged_index: int, current_index: int, total_points: int) -> float:
    """
    How strongly a drag at ``dragged_index`` moves ``current_index``.

    Raised cosine over ceil(total_points / 4) indices: 1.0 at the dragged
    point, falling to 0.0 at the edge of the range and beyond.
    """
    distance = abs(current_index - dragged_index)
    max_distance = math.ceil(total_points / 4)
    if max_distance == 0 or distance > max_distance:
        return 0.0
    return math.cos(distance / max_distance * math.pi * 0.5)


def drag_update(
    points: Sequence[CurvePoint],
    dragged_index: int,
    new_value: float,
    channel: Channel,
) -> tuple[CurvePoint, ...]:
    """
    Move one point and let its neighbors follow.

    ``points`` must be the snapshot taken when the drag started, not the
    result of the previous move; every move is computed against the same
    originals so a gesture never accumulates drift.

    Args:
        points: Point set at drag start
        dragged_index: Position of the dragged point in ``points``
        new_value: Target value for the dragged point
        channel: Channel whose domain clamps every result

    Returns:
        New point set, same length and steps
    """
    total = len(points)
    if not 0 <= dragged_index < total:
        raise IndexError(f"Dragged index {dragged_index} out of range for {total} points")

    delta = new_value - points[dragged_index].value
    updated = []
    for j, p in enumerate(points):
        if j == dragged_index:
            value = new_value
        else:
            value = p.value + delta * influence(dragged_index, j, total)
        updated.append(CurvePoint(step=p.step, value=channel.clamp(value)))
    return tuple(updated)


def default_points(channel: Channel, steps: int) -> tuple[CurvePoint, ...]:
    """
    A starting curve for a channel: a straight line across its domain for
    lightness and chroma, flat zero for hue.
    """
    if channel is Channel.HUE:
        ends = (CurvePoint(0, 0.0), CurvePoint(1, 0.0))
    elif channel is Channel.LIGHTNESS:
        ends = (CurvePoint(0, 20.0), CurvePoint(1, 90.0))
    else:
        ends = (CurvePoint(0, 10.0), CurvePoint(1, 80.0))
    return resample_points(ends, steps)
