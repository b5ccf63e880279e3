# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Curve editor model.

One ``CurveEditor`` per channel. It has two states:

    Idle ──press(hit)──▶ Dragging(index, snapshot)
     ▲                          │
     └──────── release ◀────────┘   (pointer up, leave or cancel)

While dragging, every move is computed from the snapshot taken at press
time, so repeated moves within one gesture do not compound. The
snapshot is dropped on release and is never shared between editors.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from rampforge.schema.ramp import Channel, CurvePoint
from rampforge.curves.points import drag_update, resample_points
from rampforge.curves.spline import spline_samples

logger = logging.getLogger(__name__)

# Hit radius in normalized curve space (both axes scaled to 0..1)
DEFAULT_HIT_RADIUS = 0.05


@dataclass(frozen=True, slots=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True, slots=True)
class Dragging:
    """
    A drag gesture in progress.

    Attributes:
        index: Position of the dragged point
        snapshot: All points as they were when the drag started
    """
    index: int
    snapshot: tuple[CurvePoint, ...]


EditorState = Union[Idle, Dragging]


class CurveEditor:
    """
    Control points for one channel plus the drag gesture state.

    Usage:
        editor = CurveEditor(Channel.LIGHTNESS, points)
        if editor.press(step=6, value=52.0):
            editor.move(70.0)
            editor.move(75.0)
            editor.release()
        editor.points
    """

    def __init__(self, channel: Channel, points: Sequence[CurvePoint]):
        self.channel = channel
        self._points: tuple[CurvePoint, ...] = tuple(sorted(points, key=lambda p: p.step))
        self._state: EditorState = Idle()

    @property
    def points(self) -> tuple[CurvePoint, ...]:
        return self._points

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    def hit_test(
        self,
        step: float,
        value: float,
        radius: float = DEFAULT_HIT_RADIUS,
    ) -> Optional[int]:
        """
        Index of the point nearest (step, value) within ``radius``.

        Distance is measured with steps scaled by the curve length and
        values scaled by the channel domain, so the radius means the same
        thing for every channel and step count.
        """
        span = max(len(self._points) - 1, 1)
        domain = self.channel.max_value - self.channel.min_value

        best_index = None
        best_distance = math.inf
        for i, p in enumerate(self._points):
            dx = (p.step - step) / span
            dy = (p.value - value) / domain
            distance = math.hypot(dx, dy)
            if distance < radius and distance < best_distance:
                best_distance = distance
                best_index = i
        return best_index

    def press(self, step: float, value: float, radius: float = DEFAULT_HIT_RADIUS) -> bool:
        """
        Start a drag if a point is under the pointer.

        Returns:
            True if a drag started. Pressing while already dragging
            restarts the gesture from the current points.
        """
        index = self.hit_test(step, value, radius)
        if index is None:
            return False
        return self.begin_drag(index)

    def begin_drag(self, index: int) -> bool:
        """Start dragging the point at ``index`` directly."""
        if not 0 <= index < len(self._points):
            return False
        self._state = Dragging(index=index, snapshot=self._points)
        return True

    def move(self, value: float) -> tuple[CurvePoint, ...]:
        """
        Drag the active point to ``value``.

        Computed from the press-time snapshot. While idle this is a no-op
        that returns the current points.
        """
        state = self._state
        if not isinstance(state, Dragging):
            logger.debug("Ignoring %s curve move with no active drag", self.channel.value)
            return self._points
        self._points = drag_update(state.snapshot, state.index, value, self.channel)
        return self._points

    def release(self) -> None:
        """End the gesture (pointer up, leave or cancel) and drop the snapshot."""
        self._state = Idle()

    def set_points(self, points: Sequence[CurvePoint]) -> None:
        """Replace the points from outside (e.g. after a parameter change)."""
        if self.is_dragging:
            raise RuntimeError("Cannot replace curve points during a drag")
        self._points = tuple(sorted(points, key=lambda p: p.step))

    def resample(self, count: int) -> tuple[CurvePoint, ...]:
        """Resample to a new step count. Ends any drag in progress."""
        self.release()
        self._points = resample_points(self._points, count)
        return self._points

    def curve(self, segments: int = 50) -> list[tuple[float, float]]:
        """Spline samples through the current points, for drawing."""
        return spline_samples(self._points, segments)
