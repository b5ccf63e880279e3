# Copyright (c) 2026 Rampforge
# SPDX-License-Identifier: MIT

"""Base types for exporters."""

from enum import Enum


class ExportFormat(Enum):
    """Output format for exporters."""

    TEXT = "text"
    JSON = "json"
    CSS = "css"
    MARKDOWN = "markdown"
