"""Colour palettes expressed as rich style names per log method.

Purpose
-------
Keep the semantic colour choices for each method in one declarative place so
the colour adapter can turn them into transforms.

Contents
--------
* :data:`DEFAULT_COLOR_STYLES` - palette used when colour is enabled.
* :data:`COLOR_THEMES` - named palettes selectable through ``colors``.

System Role
-----------
Domain data only. :mod:`loog.adapters.colors` parses these names with rich.
``log`` is intentionally absent from every palette: it is never coloured.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .levels import MethodLevel


def _palette(
    *,
    error: str,
    warn: str,
    success: str,
    http: str,
    info: str,
    notice: str,
    timing: str,
    verbose: str,
    debug: str,
    silly: str,
) -> Mapping[MethodLevel, str]:
    return MappingProxyType(
        {
            MethodLevel.ERROR: error,
            MethodLevel.WARN: warn,
            MethodLevel.WARNING: warn,
            MethodLevel.SUCCESS: success,
            MethodLevel.HTTP: http,
            MethodLevel.INFO: info,
            MethodLevel.NOTICE: notice,
            MethodLevel.TIMING: timing,
            MethodLevel.VERBOSE: verbose,
            MethodLevel.DEBUG: debug,
            MethodLevel.SILLY: silly,
        }
    )


COLOR_THEMES: Mapping[str, Mapping[MethodLevel, str]] = MappingProxyType(
    {
        "classic": _palette(
            error="bold red",
            warn="bold yellow",
            success="bold green",
            http="bold cyan",
            info="bold green",
            notice="bold blue",
            timing="blue",
            verbose="bold blue",
            debug="bold bright_black",
            silly="bold white",
        ),
        "dark": _palette(
            error="bold red3",
            warn="bold gold3",
            success="bold green3",
            http="deep_sky_blue3",
            info="bright_white",
            notice="bold steel_blue",
            timing="steel_blue",
            verbose="grey62",
            debug="grey42",
            silly="grey35",
        ),
        "neon": _palette(
            error="#ff073a",
            warn="#fff700",
            success="#39ff14",
            http="#00ffd5",
            info="#39ff14",
            notice="#1f51ff",
            timing="#bc13fe",
            verbose="#00ffd5",
            debug="#ff6ec7",
            silly="bold #ff00ff",
        ),
        "pastel": _palette(
            error="light_salmon1",
            warn="khaki1",
            success="pale_green1",
            http="aquamarine1",
            info="light_sky_blue1",
            notice="thistle1",
            timing="light_steel_blue1",
            verbose="plum1",
            debug="grey70",
            silly="pink1",
        ),
    }
)
"""Built-in palettes keyed by theme name; ``classic`` is the default."""

DEFAULT_THEME = "classic"
DEFAULT_COLOR_STYLES: Mapping[MethodLevel, str] = COLOR_THEMES[DEFAULT_THEME]


__all__ = ["COLOR_THEMES", "DEFAULT_COLOR_STYLES", "DEFAULT_THEME"]
