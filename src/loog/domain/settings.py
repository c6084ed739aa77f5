"""Immutable configuration resolved once per logger instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from .levels import LogLevel, MethodLevel
from .prefixes import PrefixStyle

ColorTransform = Callable[[str], str]


@dataclass(slots=True, frozen=True)
class LoogSettings:
    """Resolved configuration backing one :class:`~loog.logger.Loog`.

    Attributes
    ----------
    prefix_style:
        Style that produced :attr:`prefixes`.
    color:
        Whether colour was requested.
    log_level:
        Level applied when the logger was constructed.
    process:
        Optional label prepended to every line.
    prefixes:
        Prefix table, total over :class:`MethodLevel`.
    colors:
        Colour transforms, total over :class:`MethodLevel`; identity when colour
        is off.
    no_prefix, no_color:
        Derived flags consulted by the render pipeline.
    """

    prefix_style: PrefixStyle
    color: bool
    log_level: LogLevel
    process: str | None
    prefixes: Mapping[MethodLevel, str]
    colors: Mapping[MethodLevel, ColorTransform]
    no_prefix: bool
    no_color: bool

    def prefix_for(self, method: MethodLevel) -> str:
        return self.prefixes.get(method, "")

    def colorize(self, method: MethodLevel, text: str) -> str:
        """Apply ``method``'s colour transform unless colour is disabled."""

        if self.no_color:
            return text
        transform = self.colors.get(method)
        return transform(text) if transform is not None else text


__all__ = ["ColorTransform", "LoogSettings"]
