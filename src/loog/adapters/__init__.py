"""Adapters connecting the logging core to rich and the process streams."""

from __future__ import annotations

from .colors import EMPTY_COLORS, build_color_table, rich_colorizer
from .console import CLEAR_LINE, CLEAR_SCREEN, StdoutSink

__all__ = [
    "CLEAR_LINE",
    "CLEAR_SCREEN",
    "EMPTY_COLORS",
    "StdoutSink",
    "build_color_table",
    "rich_colorizer",
]
