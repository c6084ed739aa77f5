"""Render use case deciding emission and composing the output line.

Purpose
-------
Turn a method level plus caller arguments into exactly one decorated line,
or nothing when the method is disabled or the logger is muted.

Contents
--------
* :func:`compose_line` - pure decoration of a message.
* :func:`create_render_line` - factory binding settings, state, flags and a
  sink into the callable used by every log method.

System Role
-----------
The only place where prefix, colour, indentation and process label meet. The
order of decoration is fixed: prefix, then indentation, then process label,
then whole-line colour for prefix-less styles.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from loog.application.ports.sink import LineSink
from loog.domain.levels import MethodLevel
from loog.domain.settings import LoogSettings
from loog.domain.state import LoggerState

INDENT_UNIT = " "

RenderCallable = Callable[[MethodLevel, Sequence[object]], bool]


def compose_line(
    settings: LoogSettings,
    method: MethodLevel,
    args: Sequence[object],
    *,
    indentation: int = 0,
) -> str:
    """Return the decorated line for ``args`` logged through ``method``.

    Examples
    --------
    >>> from loog.runtime._settings import build_settings
    >>> settings = build_settings({"prefix_style": "text", "color": False, "process": "api"})
    >>> compose_line(settings, MethodLevel.INFO, ["Hi"], indentation=2)
    'api    [INF] Hi'
    >>> compose_line(settings, MethodLevel.LOG, ["a", 1])
    'api a 1'
    """

    parts = [str(arg) for arg in args]
    prefix = settings.prefix_for(method)
    if prefix and not settings.no_prefix:
        parts.insert(0, settings.colorize(method, prefix))
    if indentation > 0:
        parts.insert(0, INDENT_UNIT * indentation)
    if settings.process:
        parts.insert(0, settings.process)
    line = " ".join(parts)
    if settings.no_prefix:
        line = settings.colorize(method, line)
    return line


def create_render_line(
    *,
    settings: LoogSettings,
    state: LoggerState,
    flags: Mapping[MethodLevel, bool],
    sink: LineSink,
) -> RenderCallable:
    """Build the render callable for one logger instance.

    Parameters
    ----------
    settings:
        Resolved, immutable configuration.
    state:
        Mutable state read for the mute flag and indentation depth.
    flags:
        Live enable-flag table; the logger updates it in place when the level
        changes, so the callable always sees the current cascade.
    sink:
        Destination implementing :class:`LineSink`.

    Returns
    -------
    Callable[[MethodLevel, Sequence[object]], bool]
        Function returning ``True`` when a line was written.
    """

    def render(method: MethodLevel, args: Sequence[object]) -> bool:
        if not flags.get(method, False) or state.muted:
            return False
        line = compose_line(settings, method, args, indentation=state.indentation)
        sink.write_line(line)
        return True

    return render


__all__ = ["INDENT_UNIT", "RenderCallable", "compose_line", "create_render_line"]
