# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Tests for the per-channel curve editor state machine."""

import logging

import pytest

from rampforge.schema import Channel, CurvePoint
from rampforge.curves.editor import CurveEditor, Dragging, Idle


def _editor(channel=Channel.LIGHTNESS, value=50.0, count=12):
    points = tuple(CurvePoint(step=i, value=value) for i in range(count))
    return CurveEditor(channel, points)


class TestHitTest:

    def test_hit_on_point(self):
        assert _editor().hit_test(6, 52.0) == 6

    def test_miss(self):
        assert _editor().hit_test(6, 90.0) is None

    def test_nearest_wins(self):
        editor = _editor()
        # 5.6 is closer to step 6 than to step 5 in normalized space
        assert editor.hit_test(5.6, 50.0, radius=0.2) == 6

    def test_radius_scales_with_domain(self):
        editor = _editor(Channel.HUE, value=180.0)
        # 10 degrees of 360 is well inside the default radius
        assert editor.hit_test(3, 190.0) == 3


class TestDragGesture:

    def test_press_starts_drag(self):
        editor = _editor()
        assert editor.press(6, 52.0)
        assert editor.is_dragging
        assert isinstance(editor.state, Dragging)
        assert editor.state.index == 6

    def test_press_miss_stays_idle(self):
        editor = _editor()
        assert not editor.press(6, 90.0)
        assert isinstance(editor.state, Idle)

    def test_move_and_release(self):
        editor = _editor()
        editor.press(6, 50.0)
        editor.move(70.0)
        editor.release()
        assert not editor.is_dragging
        assert editor.points[6].value == 70.0
        assert editor.points[0].value == 50.0

    def test_moves_do_not_compound(self):
        once = _editor()
        once.begin_drag(6)
        once.move(70.0)

        many = _editor()
        many.begin_drag(6)
        for value in (55.0, 80.0, 62.0, 70.0):
            many.move(value)

        assert many.points == once.points

    def test_snapshot_held_during_drag(self):
        editor = _editor()
        editor.begin_drag(6)
        snapshot = editor.state.snapshot
        editor.move(80.0)
        assert editor.state.snapshot is snapshot
        assert all(p.value == 50.0 for p in snapshot)

    def test_move_while_idle_is_noop(self, caplog):
        editor = _editor()
        before = editor.points
        with caplog.at_level(logging.DEBUG, logger="rampforge.curves.editor"):
            assert editor.move(80.0) == before
        assert editor.points == before
        assert any("no active drag" in r.message for r in caplog.records)

    def test_begin_drag_out_of_range(self):
        editor = _editor()
        assert not editor.begin_drag(12)
        assert not editor.begin_drag(-1)
        assert not editor.is_dragging

    def test_second_gesture_starts_from_result(self):
        editor = _editor()
        editor.begin_drag(6)
        editor.move(70.0)
        editor.release()
        editor.begin_drag(6)
        assert editor.state.snapshot[6].value == 70.0


class TestPointUpdates:

    def test_set_points_while_idle(self):
        editor = _editor()
        editor.set_points((CurvePoint(1, 30.0), CurvePoint(0, 20.0)))
        assert [p.step for p in editor.points] == [0, 1]

    def test_set_points_during_drag_rejected(self):
        editor = _editor()
        editor.begin_drag(3)
        with pytest.raises(RuntimeError):
            editor.set_points(())

    def test_resample_releases(self):
        editor = _editor()
        editor.begin_drag(3)
        points = editor.resample(5)
        assert not editor.is_dragging
        assert len(points) == 5
        assert editor.points == points

    def test_channels_independent(self):
        lightness = _editor(Channel.LIGHTNESS)
        chroma = _editor(Channel.CHROMA)
        lightness.begin_drag(4)
        lightness.move(90.0)
        assert chroma.points == _editor(Channel.CHROMA).points
        assert not chroma.is_dragging

    def test_drag_clamped_to_channel(self):
        editor = _editor(Channel.CHROMA)
        editor.begin_drag(0)
        editor.move(150.0)
        assert editor.points[0].value == 100.0

    def test_curve_samples(self):
        samples = _editor(count=4).curve(segments=5)
        assert len(samples) == 3 * 5 + 1
        assert samples[-1] == (3.0, 50.0)
