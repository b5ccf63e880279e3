# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Curve editing for ramp channels.

Control point resampling, local drag updates, spline sampling for
display, and the per-channel editor state machine.
"""

from rampforge.curves.points import (
    default_points,
    drag_update,
    influence,
    resample_points,
)
from rampforge.curves.spline import spline_samples
from rampforge.curves.editor import CurveEditor, Dragging, Idle

__all__ = [
    "resample_points",
    "influence",
    "drag_update",
    "default_points",
    "spline_samples",
    "CurveEditor",
    "Idle",
    "Dragging",
]
