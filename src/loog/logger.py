"""The logger handle returned by :func:`loog.create` and :func:`loog.configure`.

Purpose
-------
Bind one immutable :class:`LoogSettings` to one mutable :class:`LoggerState`
and expose the fluent logging API: level methods, indentation and mute
control, counters, trackers and the JSON helper.

Contents
--------
* :class:`Loog` - the logger handle.

System Role
-----------
Owns the enable-flag table and the lock serialising access to its state.
Every public method returns the instance so calls can be chained; nothing in
here raises for malformed input.
"""

from __future__ import annotations

import json
import logging
from threading import RLock
from types import MappingProxyType
from typing import Any, Mapping

from loog.adapters.console.stdout import CLEAR_LINE, CLEAR_SCREEN, StdoutSink
from loog.application.ports.sink import LineSink
from loog.application.use_cases.render import create_render_line
from loog.domain.levels import LEVELS, METHODS, LogLevel, MethodLevel, method_flags, resolve_level
from loog.domain.palettes import DEFAULT_COLOR_STYLES
from loog.domain.prefixes import PREFIXES
from loog.domain.settings import LoogSettings
from loog.domain.state import LoggerState, format_count

logger = logging.getLogger(__name__)

EmitAs = str | MethodLevel | None


class Loog:
    """Leveled console logger with decoration and display state.

    Parameters
    ----------
    settings:
        Resolved configuration; never modified by the logger.
    sink:
        Output destination; defaults to :class:`StdoutSink`.

    Examples
    --------
    >>> from io import StringIO
    >>> from loog.runtime._settings import build_settings
    >>> buffer = StringIO()
    >>> log = Loog(build_settings({"color": False}), sink=StdoutSink(buffer))
    >>> log.info("Hi").indent().warn("careful").log("done") is log
    True
    >>> print(buffer.getvalue(), end="")
    [INF] Hi
      [WRN] careful
      done
    """

    def __init__(self, settings: LoogSettings, *, sink: LineSink | None = None) -> None:
        self._settings = settings
        self._sink: LineSink = sink if sink is not None else StdoutSink()
        self._state = LoggerState()
        self._lock = RLock()
        self._flags: dict[MethodLevel, bool] = dict.fromkeys(MethodLevel, False)
        self._level = settings.log_level
        self._render = create_render_line(settings=settings, state=self._state, flags=self._flags, sink=self._sink)
        self.set_log_level(settings.log_level)

    def __call__(self, config: Mapping[str, Any] | None = None, **options: Any) -> "Loog":
        """Return a freshly configured logger and install it as the default.

        This instance is left untouched and stays usable.
        """

        from loog.runtime import configure

        return configure(config, **options)

    def __repr__(self) -> str:
        return (
            f"Loog(level={self._level.value!r}, prefix_style={self._settings.prefix_style.value!r}, "
            f"color={self._settings.color!r}, muted={self._state.muted!r})"
        )

    # -- introspection -----------------------------------------------------

    @property
    def settings(self) -> LoogSettings:
        return self._settings

    @property
    def level(self) -> LogLevel:
        """The level most recently applied through :meth:`set_log_level`."""

        return self._level

    @property
    def indentation(self) -> int:
        return self._state.indentation

    @property
    def muted(self) -> bool:
        return self._state.muted

    @property
    def levels(self) -> tuple[str, ...]:
        return LEVELS

    @property
    def methods(self) -> tuple[str, ...]:
        return METHODS

    @property
    def prefixes(self) -> Mapping[str, Mapping[str, str]]:
        """Plain prefix tables of every built-in style, keyed by names."""

        return PREFIX_TABLES

    @property
    def colors(self) -> Mapping[str, str]:
        """Default rich style name per method."""

        return COLOR_NAMES

    @property
    def counters(self) -> Mapping[str | None, int]:
        with self._lock:
            return MappingProxyType(dict(self._state.counters))

    @property
    def trackers(self) -> Mapping[str, int]:
        with self._lock:
            return MappingProxyType(dict(self._state.trackers))

    def is_enabled(self, method: str | MethodLevel) -> bool:
        """Return the enable flag for ``method``; unknown names are disabled."""

        resolved = _resolve_method(method)
        return resolved is not None and self._flags[resolved]

    # -- level gating ------------------------------------------------------

    def set_log_level(self, level: str | LogLevel | None = None) -> "Loog":
        """Recompute the enable flags for ``level`` (unknown or empty means ``info``).

        ``silent`` disables every method and mutes the logger. Other levels do
        not lift an existing mute; call :meth:`unmute` for that.
        """

        resolved = resolve_level(level)
        with self._lock:
            self._flags.update(method_flags(resolved))
            self._level = resolved
            if resolved is LogLevel.SILENT:
                self._state.muted = True
        return self

    # -- log methods -------------------------------------------------------

    def emit(self, method: str | MethodLevel, *args: Any) -> "Loog":
        """Log ``args`` through ``method``; unknown method names use ``log``."""

        resolved = _resolve_method(method) or MethodLevel.LOG
        with self._lock:
            self._render(resolved, args)
        return self

    def silly(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.SILLY, *args)

    def debug(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.DEBUG, *args)

    def verbose(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.VERBOSE, *args)

    def timing(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.TIMING, *args)

    def http(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.HTTP, *args)

    def notice(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.NOTICE, *args)

    def info(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.INFO, *args)

    def success(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.SUCCESS, *args)

    def warn(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.WARN, *args)

    def warning(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.WARNING, *args)

    def error(self, *args: Any) -> "Loog":
        return self.emit(MethodLevel.ERROR, *args)

    def log(self, *args: Any) -> "Loog":
        """Log without a prefix or colour; enabled at every level but ``silent``."""

        return self.emit(MethodLevel.LOG, *args)

    # -- terminal control --------------------------------------------------

    def clear(self) -> "Loog":
        """Reset the terminal screen unless muted."""

        with self._lock:
            if not self._state.muted:
                self._sink.write_control(CLEAR_SCREEN)
        return self

    def clear_line(self) -> "Loog":
        """Erase the previously written line unless muted."""

        with self._lock:
            if not self._state.muted:
                self._sink.write_control(CLEAR_LINE)
        return self

    # -- indentation -------------------------------------------------------

    def indent(self) -> "Loog":
        with self._lock:
            self._state.indent()
        return self

    def outdent(self) -> "Loog":
        with self._lock:
            self._state.outdent()
        return self

    def pause_indentation(self) -> "Loog":
        """Log at the root level until :meth:`resume_indentation`.

        There is a single saved slot: pausing twice keeps only the latest depth.
        """

        with self._lock:
            self._state.pause_indentation()
        return self

    def resume_indentation(self) -> "Loog":
        with self._lock:
            self._state.resume_indentation()
        return self

    def reset_indentation(self) -> "Loog":
        with self._lock:
            self._state.reset_indentation()
        return self

    # -- mute --------------------------------------------------------------

    def mute(self) -> "Loog":
        with self._lock:
            self._state.muted = True
        return self

    def unmute(self) -> "Loog":
        with self._lock:
            self._state.muted = False
        return self

    # -- counters and trackers ---------------------------------------------

    def count(self, label: str | None = None, emit_as: EmitAs = "log") -> "Loog":
        """Increment ``label`` (or the anonymous bucket) and log the new count.

        ``emit_as=None`` counts silently.
        """

        key = label or None
        with self._lock:
            value = self._state.increment_counter(key)
            self._emit_as(emit_as, format_count(key, value))
        return self

    def clear_count(self, label: str | None = None) -> "Loog":
        with self._lock:
            self._state.clear_counter(label or None)
        return self

    def track(self, label: str) -> "Loog":
        with self._lock:
            self._state.track(label)
        return self

    def untrack(self, label: str) -> "Loog":
        with self._lock:
            self._state.untrack(label)
        return self

    def report(self, label: str | None = None, emit_as: EmitAs = "log") -> "Loog":
        """Log one tracker, or every tracker sorted by label on a single line."""

        with self._lock:
            line = self._state.tracker_report(label)
            if line is not None:
                self._emit_as(emit_as, line)
        return self

    # -- structured values -------------------------------------------------

    def json(self, value: Any, indent_width: int = 4, emit_as: EmitAs = "log") -> "Loog":
        """Log ``value`` as indented JSON, one output line per text line."""

        try:
            text = json.dumps(_string_keys(value), indent=indent_width, default=str, ensure_ascii=False)
        except ValueError:
            logger.debug("value is not JSON serialisable, logging its repr")
            text = repr(value)
        with self._lock:
            for line in text.splitlines():
                self._emit_as(emit_as, line)
        return self

    def _emit_as(self, emit_as: EmitAs, message: str) -> None:
        if emit_as is None or emit_as is False:
            return
        method = _resolve_method(emit_as)
        if method is None:
            logger.debug("unknown emit_as %r, using log", emit_as)
            method = MethodLevel.LOG
        self._render(method, (message,))


def _string_keys(value: Any, _seen: frozenset[int] = frozenset()) -> Any:
    """Return ``value`` with every mapping key that JSON rejects turned into ``str``.

    Raises ``ValueError`` for self-referencing containers, as :func:`json.dumps` does.
    """

    if not isinstance(value, (Mapping, list, tuple)):
        return value
    if id(value) in _seen:
        raise ValueError("Circular reference detected")
    seen = _seen | {id(value)}
    if isinstance(value, Mapping):
        return {
            key if key is None or isinstance(key, (str, int, float, bool)) else str(key): _string_keys(item, seen)
            for key, item in value.items()
        }
    return [_string_keys(item, seen) for item in value]


def _resolve_method(method: str | MethodLevel) -> MethodLevel | None:
    if isinstance(method, MethodLevel):
        return method
    try:
        return MethodLevel.from_name(str(method))
    except ValueError:
        return None


PREFIX_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        style.value: MappingProxyType({method.value: prefix for method, prefix in table.items()})
        for style, table in PREFIXES.items()
    }
)

COLOR_NAMES: Mapping[str, str] = MappingProxyType(
    {method.value: name for method, name in DEFAULT_COLOR_STYLES.items()}
)


__all__ = ["COLOR_NAMES", "Loog", "PREFIX_TABLES"]
