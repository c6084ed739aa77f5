"""Domain values and tables used by the logging core."""

from __future__ import annotations

from .levels import CASCADE, LEVELS, METHODS, LogLevel, MethodLevel, enabled_methods, method_flags, resolve_level
from .palettes import COLOR_THEMES, DEFAULT_COLOR_STYLES
from .prefixes import PREFIXES, PrefixStyle, resolve_prefixes
from .settings import ColorTransform, LoogSettings
from .state import LoggerState, format_count

__all__ = [
    "CASCADE",
    "COLOR_THEMES",
    "ColorTransform",
    "DEFAULT_COLOR_STYLES",
    "LEVELS",
    "LogLevel",
    "LoggerState",
    "LoogSettings",
    "METHODS",
    "MethodLevel",
    "PREFIXES",
    "PrefixStyle",
    "enabled_methods",
    "format_count",
    "method_flags",
    "resolve_level",
    "resolve_prefixes",
]
