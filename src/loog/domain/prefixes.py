"""Prefix glyph sets selectable per logger instance.

Purpose
-------
Hold the immutable per-method decorations printed before each message.

Contents
--------
* :class:`PrefixStyle` enum naming the built-in sets.
* :data:`PREFIXES` - plain (uncoloured) prefix tables keyed by style.
* :func:`resolve_prefixes` - style name to table lookup with the ``none``
  fallback.

System Role
-----------
Consumed once when settings are built; the render use case only ever reads
the resolved table. Colour is applied later by the colour table so these
strings stay free of escape sequences.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .levels import MethodLevel

logger = logging.getLogger(__name__)

_IS_WINDOWS = sys.platform.startswith("win")


class PrefixStyle(Enum):
    """Names of the built-in prefix sets."""

    TEXT = "text"
    ASCII = "ascii"
    EMOJI = "emoji"
    NPM = "npm"
    NONE = "none"


def _table(entries: Mapping[MethodLevel, str]) -> Mapping[MethodLevel, str]:
    """Return a read-only table with an empty-string entry for every method."""

    full = {method: entries.get(method, "") for method in MethodLevel}
    full[MethodLevel.LOG] = ""
    return MappingProxyType(full)


def _ascii(glyph: str, windows_glyph: str) -> str:
    return windows_glyph if _IS_WINDOWS else glyph


_TEXT = _table(
    {
        MethodLevel.ERROR: "[ERR]",
        MethodLevel.WARN: "[WRN]",
        MethodLevel.WARNING: "[WRN]",
        MethodLevel.SUCCESS: "[SUC]",
        MethodLevel.HTTP: "[NET]",
        MethodLevel.INFO: "[INF]",
        MethodLevel.NOTICE: "[NOT]",
        MethodLevel.TIMING: "[TIM]",
        MethodLevel.VERBOSE: "[VRB]",
        MethodLevel.DEBUG: "[DBG]",
        MethodLevel.SILLY: "[LOL]",
    }
)

_ASCII = _table(
    {
        MethodLevel.ERROR: _ascii("✖", "►"),
        MethodLevel.WARN: _ascii("⚠", "‼"),
        MethodLevel.WARNING: _ascii("⚠", "‼"),
        MethodLevel.SUCCESS: _ascii("✔", "√"),
        MethodLevel.HTTP: _ascii("☷", "≡"),
        MethodLevel.INFO: _ascii("ℹ", "i"),
        MethodLevel.NOTICE: _ascii("ℵ", "i"),
        MethodLevel.TIMING: _ascii("◷", "+"),
        MethodLevel.VERBOSE: _ascii("ℹ", "i"),
        MethodLevel.DEBUG: _ascii("ℹ", "i"),
        MethodLevel.SILLY: _ascii("☺", "☺"),
    }
)

_EMOJI = _table(
    {
        MethodLevel.ERROR: "❌ ",
        MethodLevel.WARN: "〽️ ",
        MethodLevel.WARNING: "〽️ ",
        MethodLevel.SUCCESS: "✅ ",
        MethodLevel.HTTP: "🌐 ",
        MethodLevel.INFO: "➡️ ",
        MethodLevel.NOTICE: "❕",
        MethodLevel.TIMING: "🕒 ",
        MethodLevel.VERBOSE: "🎤 ",
        MethodLevel.DEBUG: "🔬 ",
        MethodLevel.SILLY: "🙃 ",
    }
)

_NPM = _table(
    {
        MethodLevel.ERROR: "ERR!",
        MethodLevel.WARN: "WARN",
        MethodLevel.WARNING: "WARN",
        MethodLevel.SUCCESS: "ok",
        MethodLevel.HTTP: "http",
        MethodLevel.INFO: "info",
        MethodLevel.NOTICE: "notice",
        MethodLevel.TIMING: "timing",
        MethodLevel.VERBOSE: "verb",
        MethodLevel.DEBUG: "debug",
        MethodLevel.SILLY: "sill",
    }
)

EMPTY_PREFIXES: Mapping[MethodLevel, str] = _table({})

PREFIXES: Mapping[PrefixStyle, Mapping[MethodLevel, str]] = MappingProxyType(
    {
        PrefixStyle.TEXT: _TEXT,
        PrefixStyle.ASCII: _ASCII,
        PrefixStyle.EMOJI: _EMOJI,
        PrefixStyle.NPM: _NPM,
        PrefixStyle.NONE: EMPTY_PREFIXES,
    }
)
#: Built-in prefix tables; every table has an entry for every method.


def resolve_prefix_style(name: str | PrefixStyle | None) -> PrefixStyle:
    """Return the :class:`PrefixStyle` for ``name``; unknown names mean ``none``.

    Examples
    --------
    >>> resolve_prefix_style("Emoji")
    <PrefixStyle.EMOJI: 'emoji'>
    >>> resolve_prefix_style("fancy")
    <PrefixStyle.NONE: 'none'>
    """

    if isinstance(name, PrefixStyle):
        return name
    if not name or not isinstance(name, str):
        return PrefixStyle.NONE
    try:
        return PrefixStyle(name.strip().lower())
    except ValueError:
        logger.debug("unknown prefix style %r, prefixes disabled", name)
        return PrefixStyle.NONE


def resolve_prefixes(name: str | PrefixStyle | None) -> tuple[Mapping[MethodLevel, str], bool]:
    """Return ``(table, no_prefix)`` for the requested style."""

    style = resolve_prefix_style(name)
    return PREFIXES[style], style is PrefixStyle.NONE


__all__ = [
    "EMPTY_PREFIXES",
    "PREFIXES",
    "PrefixStyle",
    "resolve_prefix_style",
    "resolve_prefixes",
]
