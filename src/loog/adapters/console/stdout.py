"""Standard-output adapter implementing :class:`LineSink`.

Purpose
-------
Write rendered lines and raw control sequences to the host process's standard
output (or any text stream supplied by the caller).

Contents
--------
* :data:`CLEAR_SCREEN` / :data:`CLEAR_LINE` - terminal control sequences.
* :class:`StdoutSink` - synchronous, unbuffered line writer.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loog.application.ports.sink import LineSink

CLEAR_SCREEN = "\x1bc"
#: Full terminal reset (RIS).
CLEAR_LINE = "\x1b[A\x1b[K"
#: Cursor up one line, then erase to end of line.


class StdoutSink(LineSink):
    """Write each line to a text stream and flush immediately.

    When no stream is given, :data:`sys.stdout` is looked up on every write so
    redirections made after construction (e.g. pytest's ``capsys``) apply.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> StdoutSink(buffer).write_line("hello")
    >>> buffer.getvalue()
    'hello\\n'
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        stream = self.stream
        stream.write(f"{line}\n")
        stream.flush()

    def write_control(self, sequence: str) -> None:
        stream = self.stream
        stream.write(sequence)
        stream.flush()


__all__ = ["CLEAR_LINE", "CLEAR_SCREEN", "StdoutSink"]
