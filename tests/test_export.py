# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Tests for palette exporters (text, JSON, CSS, Markdown)."""

import json

import pytest

from rampforge import build_palette
from rampforge.schema import (
    SPECIAL_BLACK_INDEX,
    SPECIAL_WHITE_INDEX,
    GenerationParameters,
    Palette,
)
from rampforge.export import (
    ExportFormat,
    index_label,
    kebab_case,
    ramp_to_text,
    to_block,
)


@pytest.fixture
def palette():
    return build_palette(GenerationParameters(base_color="#6366F1", steps=6))


class TestText:

    def test_one_line_per_step(self, palette):
        lines = to_block(palette, format=ExportFormat.TEXT).splitlines()
        assert len(lines) == 6
        assert lines[0] == f"50: {palette.ramp[0].hex}"
        assert lines[5] == f"500: {palette.ramp[5].hex}"

    def test_empty_ramp(self):
        assert ramp_to_text(()) == ""


class TestJSON:

    def test_default_format_is_json(self, palette):
        assert to_block(palette) == to_block(palette, format=ExportFormat.JSON)

    def test_wrapped_and_parseable(self, palette):
        data = json.loads(to_block(palette, tag_name="ramp"))
        assert list(data) == ["ramp"]
        assert Palette.from_dict(data["ramp"]) == palette


class TestCSS:

    def test_root_block(self, palette):
        css = to_block(palette, format=ExportFormat.CSS)
        lines = css.splitlines()
        assert lines[0] == ":root {"
        assert lines[-1] == "}"

    def test_ramp_properties(self, palette):
        css = to_block(palette, format=ExportFormat.CSS, prefix="indigo")
        assert f"  --indigo-50: {palette.ramp[0].hex};" in css
        assert f"  --indigo-100: {palette.ramp[1].hex};" in css

    def test_token_properties(self, palette):
        css = to_block(palette, format=ExportFormat.CSS)
        primary = palette.design_tokens.brand["brandBackgroundPrimary"]
        assert f"  --brand-background-primary: {primary};" in css
        assert "  --neutral-background-primary: #FFFFFF;" in css
        assert "  --neutral-content-tertiary: #5E5E5E;" in css

    def test_property_count(self, palette):
        css = to_block(palette, format=ExportFormat.CSS)
        declarations = [line for line in css.splitlines() if line.startswith("  --")]
        tokens = palette.design_tokens
        assert len(declarations) == 6 + len(tokens.brand) + len(tokens.neutral)


class TestMarkdown:

    def test_wrapped_in_tags(self, palette):
        md = to_block(palette, format=ExportFormat.MARKDOWN, tag_name="brand")
        lines = md.splitlines()
        assert lines[0] == "<!-- brand -->"
        assert lines[-1] == "<!-- /brand -->"

    def test_seed_line(self, palette):
        md = to_block(palette, format=ExportFormat.MARKDOWN)
        assert "**Seed:** #6366F1 · 6 steps" in md

    def test_ramp_rows(self, palette):
        md = to_block(palette, format=ExportFormat.MARKDOWN)
        for stop in palette.ramp:
            assert f"| {stop.hex} |" in md

    def test_token_rows(self, palette):
        md = to_block(palette, format=ExportFormat.MARKDOWN)
        for name, index in palette.token_indices.items():
            assert f"| {name} | {index_label(index)} |" in md

    def test_contrast_levels_listed(self, palette):
        md = to_block(palette, format=ExportFormat.MARKDOWN)
        # The darkest step always clears AAA with white text
        first_row = next(line for line in md.splitlines() if line.startswith("| 50 |"))
        assert "#FFFFFF" in first_row
        assert first_row.endswith("| AAA |")


class TestHelpers:

    @pytest.mark.parametrize("name,expected", [
        ("brandBackgroundPrimary", "brand-background-primary"),
        ("contentOnPrimary", "content-on-primary"),
        ("background", "background"),
        ("step2Color", "step2-color"),
    ])
    def test_kebab_case(self, name, expected):
        assert kebab_case(name) == expected

    @pytest.mark.parametrize("index,label", [
        (SPECIAL_BLACK_INDEX, "black"),
        (SPECIAL_WHITE_INDEX, "white"),
        (0, "50"),
        (3, "300"),
    ])
    def test_index_label(self, index, label):
        assert index_label(index) == label
