# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Palette exporters.

Formats a Palette as plain text (the "copy values" listing), JSON, CSS
custom properties, or a Markdown summary with contrast information.
"""

from __future__ import annotations

import json
import re
from typing import Sequence

from rampforge.schema import (
    SPECIAL_BLACK_INDEX,
    SPECIAL_WHITE_INDEX,
    ColorStop,
    Palette,
)
from rampforge.color.contrast import best_contrast_color, wcag_level
from rampforge.color.ramp import step_label
from rampforge.export.base import ExportFormat

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_block(
    palette: Palette,
    *,
    format: ExportFormat = ExportFormat.JSON,
    prefix: str = "brand",
    tag_name: str = "palette",
) -> str:
    """Serialize a Palette for copying into another tool.

    Args:
        palette: The Palette to serialize.
        format: TEXT, JSON, CSS or MARKDOWN.
        prefix: Custom property prefix for ramp steps (CSS only).
        tag_name: Wrapper key (JSON) or comment tag (MARKDOWN).

    Returns:
        Formatted string.

    Example (CSS)::

        :root {
          --brand-50: #1B0E4A;
          --brand-100: #24186A;
          ...
          --brand-background-primary: #5A5CE8;
          --neutral-background-primary: #FFFFFF;
        }
    """
    if format == ExportFormat.TEXT:
        return ramp_to_text(palette.ramp)
    elif format == ExportFormat.JSON:
        return _to_json(palette, tag_name)
    elif format == ExportFormat.CSS:
        return _to_css(palette, prefix)
    else:
        return _to_markdown(palette, tag_name)


def ramp_to_text(ramp: Sequence[ColorStop]) -> str:
    """One "label: hex" line per stop, e.g. "50: #1B0E4A"."""
    return "\n".join(f"{step_label(i)}: {stop.hex}" for i, stop in enumerate(ramp))


def kebab_case(name: str) -> str:
    """brandBackgroundPrimary → brand-background-primary"""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def index_label(index: int) -> str:
    """Scale label for a resolved token index."""
    if index == SPECIAL_BLACK_INDEX:
        return "black"
    if index == SPECIAL_WHITE_INDEX:
        return "white"
    return str(step_label(index))


def _to_json(palette: Palette, tag_name: str) -> str:
    """Generate JSON block with wrapper."""
    return json.dumps({tag_name: palette.to_dict()}, indent=2)


def _to_css(palette: Palette, prefix: str) -> str:
    """Generate a :root block of custom properties."""
    lines = [":root {"]
    for i, stop in enumerate(palette.ramp):
        lines.append(f"  --{prefix}-{step_label(i)}: {stop.hex};")
    for name, hex_value in palette.design_tokens.brand.items():
        lines.append(f"  --{kebab_case(name)}: {hex_value};")
    for name, hex_value in palette.design_tokens.neutral.items():
        lines.append(f"  --neutral-{kebab_case(name)}: {hex_value};")
    lines.append("}")
    return "\n".join(lines)


def _to_markdown(palette: Palette, tag_name: str) -> str:
    """Generate ramp and token tables."""
    params = palette.parameters
    lines = [
        f"<!-- {tag_name} -->",
        f"**Seed:** {params.base_color} · {params.steps} steps · "
        f"vibrance {params.vibrance:.2f} · torsion {params.hue_torsion:.2f} · "
        f"contrast {params.contrast:.2f}",
        "",
        "| Step | Hex | OKLCH | Best text | Ratio | Level |",
        "|---|---|---|---|---|---|",
    ]
    for i, stop in enumerate(palette.ramp):
        c = stop.oklch
        best = best_contrast_color(stop.hex)
        lines.append(
            f"| {step_label(i)} | {stop.hex} | "
            f"L{c.l:.3f}/C{c.c:.3f}/H{c.h:.1f} | {best.color} | "
            f"{best.ratio:.2f}:1 | {wcag_level(best.ratio)} |"
        )

    lines.extend([
        "",
        "| Token | Step | Hex |",
        "|---|---|---|",
    ])
    for name, index in palette.token_indices.items():
        lines.append(
            f"| {name} | {index_label(index)} | "
            f"{palette.design_tokens.brand[name]} |"
        )
    lines.append(f"<!-- /{tag_name} -->")
    return "\n".join(lines)
