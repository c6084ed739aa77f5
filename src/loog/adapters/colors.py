"""Rich-backed colour transforms.

Purpose
-------
Turn semantic colour names (rich style strings such as ``"bold red"``) into
``str -> str`` transforms that wrap text in ANSI escape sequences.

Contents
--------
* :func:`rich_colorizer` - build a transform for one style name.
* :func:`build_color_table` - resolve the ``color``/``colors`` options into a
  table total over :class:`MethodLevel`.

System Role
-----------
The colour capability the render use case treats as opaque. Output is fixed to
the 16-colour ANSI system unless the caller picks another, so rendering stays
deterministic regardless of the attached terminal.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from loog.domain.levels import MethodLevel
from loog.domain.palettes import COLOR_THEMES, DEFAULT_COLOR_STYLES
from loog.domain.settings import ColorTransform

logger = logging.getLogger(__name__)

ColorSpec = str | Callable[[str], str]


def identity(text: str) -> str:
    return text


def rich_colorizer(style_name: str, *, color_system: ColorSystem = ColorSystem.STANDARD) -> ColorTransform:
    """Return a transform rendering text with the rich style ``style_name``.

    Examples
    --------
    >>> rich_colorizer("red")("hi")
    '\\x1b[31mhi\\x1b[0m'
    >>> rich_colorizer("")("hi")
    'hi'
    """

    if not style_name:
        return identity
    try:
        style = Style.parse(style_name)
    except StyleSyntaxError:
        logger.debug("unparseable colour style %r, leaving text uncoloured", style_name)
        return identity

    def colorize(text: str) -> str:
        return style.render(text, color_system=color_system)

    return colorize


def _coerce_method(key: MethodLevel | str) -> MethodLevel | None:
    if isinstance(key, MethodLevel):
        return key
    try:
        return MethodLevel.from_name(str(key))
    except ValueError:
        logger.debug("ignoring colour for unknown method %r", key)
        return None


def _coerce_transform(style: ColorSpec | None) -> ColorTransform:
    if style is None:
        return identity
    if callable(style):
        return style
    return rich_colorizer(str(style))


def _total(entries: Mapping[MethodLevel, ColorTransform]) -> Mapping[MethodLevel, ColorTransform]:
    table = {method: entries.get(method, identity) for method in MethodLevel}
    table[MethodLevel.LOG] = identity
    return MappingProxyType(table)


EMPTY_COLORS: Mapping[MethodLevel, ColorTransform] = _total({})


def build_color_table(
    *,
    color: bool = True,
    colors: Mapping[MethodLevel | str, ColorSpec] | str | None = None,
) -> tuple[Mapping[MethodLevel, ColorTransform], bool]:
    """Resolve colour options into ``(table, no_color)``.

    ``colors`` replaces the default palette entirely: a mapping of method to
    rich style name or callable, or the name of a built-in theme. An empty
    mapping, or ``color=False`` without ``colors``, disables colour.
    """

    if colors is not None:
        if isinstance(colors, str):
            theme = COLOR_THEMES.get(colors.strip().lower())
            if theme is None:
                logger.debug("unknown colour theme %r, colour disabled", colors)
                return EMPTY_COLORS, True
            return _total({method: rich_colorizer(name) for method, name in theme.items()}), False
        if not colors:
            return EMPTY_COLORS, True
        entries: dict[MethodLevel, ColorTransform] = {}
        for key, style in colors.items():
            method = _coerce_method(key)
            if method is not None:
                entries[method] = _coerce_transform(style)
        return _total(entries), False
    if not color:
        return EMPTY_COLORS, True
    return _total({method: rich_colorizer(name) for method, name in DEFAULT_COLOR_STYLES.items()}), False


__all__ = ["ColorSpec", "EMPTY_COLORS", "build_color_table", "identity", "rich_colorizer"]
