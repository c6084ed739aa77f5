"""Console-facing adapters."""

from __future__ import annotations

from .stdout import CLEAR_LINE, CLEAR_SCREEN, StdoutSink

__all__ = ["CLEAR_LINE", "CLEAR_SCREEN", "StdoutSink"]
