"""Sink port describing where rendered lines are written.

Purpose
-------
Define the narrow output boundary the render use case depends on so adapters
(stdout, in-memory recorders) can plug in without leaking I/O details.

Contents
--------
* :class:`LineSink` - runtime-checkable protocol with ``write_line`` for log
  lines and ``write_control`` for raw terminal control sequences.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSink(Protocol):
    """Accept rendered output one line at a time."""

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a line terminator."""

    def write_control(self, sequence: str) -> None:
        """Write ``sequence`` verbatim, without a line terminator."""


__all__ = ["LineSink"]
