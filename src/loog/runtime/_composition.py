"""Composition root turning options into a wired :class:`Loog`.

Purpose
-------
Resolve options into settings, pick the sink adapter and hand both to a new
logger. Every call produces a new settings and state pair; nothing is shared
with previously built loggers.
"""

from __future__ import annotations

from typing import Any, Mapping

from loog.adapters.console.stdout import StdoutSink
from loog.application.ports.sink import LineSink
from loog.logger import Loog

from ._settings import build_settings


def select_sink(sink: LineSink | None) -> LineSink:
    """Return ``sink`` or a stdout adapter when none was configured."""

    if sink is None:
        return StdoutSink()
    if not isinstance(sink, LineSink):
        raise TypeError(f"sink must implement write_line/write_control, got {type(sink).__name__}")
    return sink


def build_logger(options: Mapping[str, Any] | None = None) -> Loog:
    """Assemble a logger from canonical ``options`` merged over the defaults."""

    options = dict(options or {})
    settings = build_settings(options)
    return Loog(settings, sink=select_sink(options.get("sink")))


__all__ = ["build_logger", "select_sink"]
