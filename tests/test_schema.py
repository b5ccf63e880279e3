# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import dataclasses

import pytest

from rampforge.schema import (
    MAX_STEPS,
    MIN_STEPS,
    OKLCH,
    SCHEMA_VERSION,
    Channel,
    ColorStop,
    CurvePoint,
    DesignTokens,
    GenerationParameters,
    Palette,
    is_valid_hex,
)


def _ramp(count):
    return tuple(ColorStop(hex="#777777", oklch=OKLCH(l=0.6, c=0.0)) for _ in range(count))


def _palette(**overrides):
    kwargs = dict(
        parameters=GenerationParameters(steps=4),
        ramp=_ramp(4),
        token_indices={"brandBackgroundPrimary": 2},
        design_tokens=DesignTokens(
            brand={"brandBackgroundPrimary": "#777777"},
            neutral={"backgroundPrimary": "#FFFFFF"},
        ),
    )
    kwargs.update(overrides)
    return Palette(**kwargs)


class TestHexValidation:

    @pytest.mark.parametrize("value", ["#000000", "#6366F1", "#6366f1", "#aBcDeF"])
    def test_valid(self, value):
        assert is_valid_hex(value)

    @pytest.mark.parametrize("value", ["", "000000", "#000", "#0000000", "#GGGGGG", None, 7])
    def test_invalid(self, value):
        assert not is_valid_hex(value)


class TestOKLCH:

    def test_valid_color(self):
        c = OKLCH(l=0.5, c=0.1, h=200.0)
        assert (c.l, c.c, c.h) == (0.5, 0.1, 200.0)

    def test_hue_defaults_to_zero(self):
        assert OKLCH(l=0.5, c=0.0).h == 0.0

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            OKLCH(l=1.5, c=0.1)

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            OKLCH(l=0.5, c=-0.1)

    @pytest.mark.parametrize("hue", [-1.0, 360.0, 400.0])
    def test_invalid_hue(self, hue):
        with pytest.raises(ValueError, match="Hue"):
            OKLCH(l=0.5, c=0.1, h=hue)

    def test_frozen(self):
        c = OKLCH(l=0.5, c=0.1, h=10.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.l = 0.7

    def test_to_dict_roundtrip(self):
        c = OKLCH(l=0.42, c=0.13, h=271.5)
        assert OKLCH.from_dict(c.to_dict()) == c


class TestColorStop:

    def test_invalid_hex(self):
        with pytest.raises(ValueError, match="RRGGBB"):
            ColorStop(hex="#FFF", oklch=OKLCH(l=1.0, c=0.0))

    def test_to_dict_roundtrip(self):
        stop = ColorStop(hex="#4F46E5", oklch=OKLCH(l=0.51, c=0.23, h=277.0))
        assert ColorStop.from_dict(stop.to_dict()) == stop


class TestChannel:

    @pytest.mark.parametrize("channel,low,high", [
        (Channel.LIGHTNESS, 15.0, 95.0),
        (Channel.CHROMA, 0.0, 100.0),
        (Channel.HUE, 0.0, 360.0),
    ])
    def test_domains(self, channel, low, high):
        assert channel.min_value == low
        assert channel.max_value == high

    def test_clamp(self):
        assert Channel.LIGHTNESS.clamp(5.0) == 15.0
        assert Channel.LIGHTNESS.clamp(99.0) == 95.0
        assert Channel.CHROMA.clamp(42.0) == 42.0

    def test_values(self):
        assert Channel("hue") is Channel.HUE


class TestCurvePoint:

    def test_negative_step(self):
        with pytest.raises(ValueError, match="Step"):
            CurvePoint(step=-1, value=50.0)

    def test_to_dict_roundtrip(self):
        p = CurvePoint(step=3, value=61.5)
        assert CurvePoint.from_dict(p.to_dict()) == p


class TestGenerationParameters:

    def test_defaults(self):
        params = GenerationParameters()
        assert params.base_color == "#6366F1"
        assert params.steps == 12
        assert params.vibrance == params.hue_torsion == params.contrast == 0.5

    def test_step_limits(self):
        GenerationParameters(steps=MIN_STEPS)
        GenerationParameters(steps=MAX_STEPS)
        with pytest.raises(ValueError, match="Steps"):
            GenerationParameters(steps=MIN_STEPS - 1)
        with pytest.raises(ValueError, match="Steps"):
            GenerationParameters(steps=MAX_STEPS + 1)

    def test_bad_base_color(self):
        with pytest.raises(ValueError, match="Base color"):
            GenerationParameters(base_color="indigo")

    @pytest.mark.parametrize("name", ["vibrance", "hue_torsion", "contrast"])
    def test_unit_ranges(self, name):
        with pytest.raises(ValueError, match=name):
            GenerationParameters(**{name: 1.5})
        with pytest.raises(ValueError, match=name):
            GenerationParameters(**{name: -0.1})

    def test_from_dict_fills_defaults(self):
        params = GenerationParameters.from_dict({"base_color": "#10B981", "extra": 1})
        assert params.base_color == "#10B981"
        assert params.steps == 12

    def test_to_dict_roundtrip(self):
        params = GenerationParameters("#F59E0B", 9, 0.2, 0.8, 0.6)
        assert GenerationParameters.from_dict(params.to_dict()) == params


class TestDesignTokens:

    def test_to_dict_roundtrip(self):
        tokens = DesignTokens(brand={"a": "#111111"}, neutral={"b": "#EEEEEE"})
        assert DesignTokens.from_dict(tokens.to_dict()) == tokens

    def test_to_dict_copies(self):
        brand = {"a": "#111111"}
        d = DesignTokens(brand=brand, neutral={}).to_dict()
        d["brand"]["a"] = "#000000"
        assert brand["a"] == "#111111"


class TestPalette:

    def test_valid(self):
        palette = _palette()
        assert palette.version == SCHEMA_VERSION
        assert palette.hexes == ("#777777",) * 4

    def test_ramp_length_must_match_steps(self):
        with pytest.raises(ValueError, match="stops"):
            _palette(ramp=_ramp(5))

    def test_tokens_need_colors(self):
        with pytest.raises(ValueError, match="without colors"):
            _palette(token_indices={"brandBackgroundPrimary": 2, "brandBorderSubtle": 0})

    def test_token_hex(self):
        palette = _palette()
        assert palette.token_hex("brandBackgroundPrimary") == "#777777"
        assert palette.token_hex("backgroundPrimary") == "#FFFFFF"
        with pytest.raises(KeyError):
            palette.token_hex("missing")

    def test_json_roundtrip(self):
        palette = _palette()
        assert Palette.from_json(palette.to_json()) == palette

    def test_to_dict_keys(self):
        d = _palette().to_dict()
        assert set(d) == {"version", "parameters", "ramp", "token_indices", "design_tokens"}
        assert len(d["ramp"]) == 4
