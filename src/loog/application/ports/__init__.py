"""Protocols the application layer depends on."""

from __future__ import annotations

from .sink import LineSink

__all__ = ["LineSink"]
