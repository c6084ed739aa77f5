"""Level vocabulary and the cascade that maps a chosen level to log methods.

Purpose
-------
Describe the ordered severity vocabulary accepted by ``set_log_level`` and the
concrete log methods it switches on or off.

Contents
--------
* :class:`LogLevel` enum - selectable levels including the meta-levels.
* :class:`MethodLevel` enum - the concrete log methods exposed by a logger.
* :data:`CASCADE` - level to enabled-method table.
* :func:`resolve_level` / :func:`enabled_methods` - lookup helpers.

System Role
-----------
Pure domain table consulted by :class:`loog.logger.Loog` whenever the level
changes; nothing here performs I/O.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Selectable verbosity levels, ordered from most to least verbose."""

    ALL = "all"
    SILLY = "silly"
    DEBUG = "debug"
    VERBOSE = "verbose"
    TIMING = "timing"
    HTTP = "http"
    NOTICE = "notice"
    INFO = "info"
    SUCCESS = "success"
    WARN = "warn"
    QUIET = "quiet"
    ERROR = "error"
    SILENT = "silent"

    @property
    def is_meta(self) -> bool:
        """Return ``True`` for levels that select a cascade but are not methods."""

        return self in _META_LEVELS

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


class MethodLevel(Enum):
    """Concrete log methods; ``warning`` aliases ``warn`` with its own flag."""

    SILLY = "silly"
    DEBUG = "debug"
    VERBOSE = "verbose"
    TIMING = "timing"
    HTTP = "http"
    NOTICE = "notice"
    INFO = "info"
    SUCCESS = "success"
    WARN = "warn"
    WARNING = "warning"
    ERROR = "error"
    LOG = "log"

    @classmethod
    def from_name(cls, name: str) -> "MethodLevel":
        normalized = name.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown log method: {name!r}") from exc


_META_LEVELS = frozenset({LogLevel.ALL, LogLevel.QUIET, LogLevel.SILENT})


def _cascade_from(*methods: MethodLevel) -> frozenset[MethodLevel]:
    return frozenset(methods) | {MethodLevel.ERROR, MethodLevel.LOG}


_ERROR = _cascade_from()
_WARN = _ERROR | {MethodLevel.WARN, MethodLevel.WARNING}
_INFO = _WARN | {MethodLevel.INFO, MethodLevel.SUCCESS}
_NOTICE = _INFO | {MethodLevel.NOTICE}
_HTTP = _NOTICE | {MethodLevel.HTTP}
_TIMING = _HTTP | {MethodLevel.TIMING}
_DEBUG = _TIMING | {MethodLevel.DEBUG, MethodLevel.VERBOSE}
_SILLY = _DEBUG | {MethodLevel.SILLY}

CASCADE: Mapping[LogLevel, frozenset[MethodLevel]] = {
    LogLevel.ALL: _SILLY,
    LogLevel.SILLY: _SILLY,
    LogLevel.DEBUG: _DEBUG,
    LogLevel.VERBOSE: _DEBUG,
    LogLevel.TIMING: _TIMING,
    LogLevel.HTTP: _HTTP,
    LogLevel.NOTICE: _NOTICE,
    LogLevel.INFO: _INFO,
    LogLevel.SUCCESS: _INFO,
    LogLevel.WARN: _WARN,
    LogLevel.QUIET: _ERROR,
    LogLevel.ERROR: _ERROR,
    LogLevel.SILENT: frozenset(),
}
#: Methods switched on by each selectable level. ``silent`` enables nothing;
#: the logger additionally mutes itself for that level.

LEVELS: tuple[str, ...] = tuple(level.value for level in LogLevel)
METHODS: tuple[str, ...] = tuple(method.value for method in MethodLevel)


def resolve_level(value: str | LogLevel | None) -> LogLevel:
    """Return the :class:`LogLevel` for ``value``, falling back to ``info``.

    Examples
    --------
    >>> resolve_level("DEBUG")
    <LogLevel.DEBUG: 'debug'>
    >>> resolve_level("chatty")
    <LogLevel.INFO: 'info'>
    >>> resolve_level(None)
    <LogLevel.INFO: 'info'>
    """

    if isinstance(value, LogLevel):
        return value
    if not value or not isinstance(value, str):
        return LogLevel.INFO
    try:
        return LogLevel.from_name(value)
    except ValueError:
        logger.debug("unknown log level %r, falling back to info", value)
        return LogLevel.INFO


def enabled_methods(requested: str | LogLevel | None) -> frozenset[MethodLevel]:
    """Return the methods enabled when ``requested`` is the active level."""

    return CASCADE[resolve_level(requested)]


def method_flags(requested: str | LogLevel | None) -> dict[MethodLevel, bool]:
    """Return a flag for every :class:`MethodLevel` under ``requested``."""

    enabled = enabled_methods(requested)
    return {method: method in enabled for method in MethodLevel}


__all__ = [
    "CASCADE",
    "LEVELS",
    "LogLevel",
    "METHODS",
    "MethodLevel",
    "enabled_methods",
    "method_flags",
    "resolve_level",
]
