"""Option normalisation and settings resolution.

Purpose
-------
Accept caller options in either snake_case or camelCase
spelling, merge them over :func:`loog.config.default_options`, and resolve the
prefix and colour tables into an immutable :class:`LoogSettings`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from loog.adapters.colors import build_color_table
from loog.config import default_options
from loog.domain.levels import resolve_level
from loog.domain.prefixes import resolve_prefix_style, resolve_prefixes
from loog.domain.settings import LoogSettings

logger = logging.getLogger(__name__)

OPTION_NAMES = frozenset({"prefix_style", "color", "colors", "log_level", "process", "sink"})

_ALIASES: Mapping[str, str] = {
    "prefixStyle": "prefix_style",
    "logLevel": "log_level",
    "colorStyle": "colors",
    "color_style": "colors",
}


def normalize_options(config: Mapping[str, Any] | None = None, **options: Any) -> dict[str, Any]:
    """Merge ``config`` and keyword ``options`` into canonical option names.

    Keyword options win over entries of ``config``. Unknown names are dropped.

    Examples
    --------
    >>> normalize_options({"prefixStyle": "emoji"}, logLevel="warn")
    {'prefix_style': 'emoji', 'log_level': 'warn'}
    """

    merged: dict[str, Any] = {}
    for source in (config or {}, options):
        for key, value in source.items():
            name = _ALIASES.get(key, key)
            if name not in OPTION_NAMES:
                logger.debug("ignoring unknown loog option %r", key)
                continue
            merged[name] = value
    return merged


def build_settings(options: Mapping[str, Any] | None = None) -> LoogSettings:
    """Resolve canonical ``options`` merged over the defaults into settings."""

    merged = {**default_options(), **{key: value for key, value in (options or {}).items() if key != "sink"}}
    style = resolve_prefix_style(merged.get("prefix_style"))
    prefixes, no_prefix = resolve_prefixes(style)
    colors, no_color = build_color_table(color=bool(merged.get("color")), colors=merged.get("colors"))
    process = merged.get("process")
    return LoogSettings(
        prefix_style=style,
        color=not no_color,
        log_level=resolve_level(merged.get("log_level")),
        process=str(process) if process else None,
        prefixes=prefixes,
        colors=colors,
        no_prefix=no_prefix,
        no_color=no_color,
    )


__all__ = ["OPTION_NAMES", "build_settings", "normalize_options"]
