# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Tests for relative luminance and WCAG contrast ratios."""

import numpy as np
import pytest

from rampforge.color.contrast import (
    best_contrast_color,
    contrast_ratio,
    luminance,
    wcag_level,
)


class TestLuminance:

    def test_black_and_white(self):
        assert luminance("#000000") == pytest.approx(0.0)
        assert luminance("#FFFFFF") == pytest.approx(1.0)

    def test_linear_segment_below_threshold(self):
        # 10/255 ≈ 0.0392 is below the 0.03928 knee
        expected = (10 / 255) / 12.92
        assert luminance("#0A0A0A") == pytest.approx(expected, rel=1e-9)

    def test_channel_weights(self):
        assert luminance("#FF0000") == pytest.approx(0.2126)
        assert luminance("#00FF00") == pytest.approx(0.7152)
        assert luminance("#0000FF") == pytest.approx(0.0722)

    def test_malformed_counts_as_black(self):
        assert luminance("nope") == 0.0


class TestContrastRatio:

    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_identical_is_one(self):
        for hex_color in ("#000000", "#777777", "#6366F1", "#FFFFFF"):
            assert contrast_ratio(hex_color, hex_color) == 1.0

    def test_symmetric(self):
        rng = np.random.RandomState(11)
        for _ in range(50):
            a, b = ("#{:02X}{:02X}{:02X}".format(*rgb) for rgb in rng.randint(0, 256, (2, 3)))
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_never_below_one(self):
        assert contrast_ratio("#123456", "#123457") >= 1.0

    def test_known_gray(self):
        # #767676 is the lightest gray passing AA on white
        assert contrast_ratio("#767676", "#FFFFFF") >= 4.5
        assert contrast_ratio("#777777", "#FFFFFF") < 4.5

    def test_case_insensitive(self):
        assert contrast_ratio("#6366f1", "#ffffff") == contrast_ratio("#6366F1", "#FFFFFF")


class TestBestContrastColor:

    def test_white_background(self):
        choice = best_contrast_color("#FFFFFF")
        assert choice.color == "#000000"
        assert choice.ratio == pytest.approx(21.0)

    def test_black_background(self):
        assert best_contrast_color("#000000").color == "#FFFFFF"

    def test_mid_gray_prefers_black(self):
        choice = best_contrast_color("#777777")
        assert choice.color == "#000000"
        assert choice.ratio == pytest.approx(contrast_ratio("#777777", "#000000"))

    def test_dark_indigo_prefers_white(self):
        assert best_contrast_color("#312E81").color == "#FFFFFF"


class TestWcagLevel:

    @pytest.mark.parametrize("ratio,level", [
        (21.0, "AAA"), (7.0, "AAA"), (6.99, "AA"), (4.5, "AA"), (4.49, ""), (1.0, ""),
    ])
    def test_levels(self, ratio, level):
        assert wcag_level(ratio) == level
