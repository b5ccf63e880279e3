# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""
Export formats for palettes.

Exporters never modify palette content; they only format it.
"""

from rampforge.export.base import ExportFormat
from rampforge.export.block import index_label, kebab_case, ramp_to_text, to_block

__all__ = [
    "ExportFormat",
    "to_block",
    "ramp_to_text",
    "kebab_case",
    "index_label",
]
