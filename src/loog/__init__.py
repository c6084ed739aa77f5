"""Public package surface for the leveled console logger.

Use the default logger straight from the package, or build independent
handles::

    import loog

    loog.info("Hi")                      # default logger
    log = loog.configure(prefix_style="emoji", log_level="debug")
    log.debug("now visible").indent().success("nested")

    isolated = loog.create(process="[worker]", color=False)

Level methods and mutators accessed on the package (``loog.info``,
``loog.indent``, ...) resolve against the current default logger at attribute
access time; a reference taken before :func:`configure` keeps pointing at the
logger it was taken from.
"""

from __future__ import annotations

from typing import Any

from .domain.levels import LEVELS, METHODS, LogLevel, MethodLevel
from .domain.palettes import COLOR_THEMES
from .domain.prefixes import PrefixStyle
from .logger import COLOR_NAMES as COLORS
from .logger import PREFIX_TABLES as PREFIXES
from .logger import Loog
from .runtime import configure, create, get, replace_default, reset

_DELEGATED = frozenset(
    {
        *METHODS,
        "emit",
        "set_log_level",
        "clear",
        "clear_line",
        "indent",
        "outdent",
        "pause_indentation",
        "resume_indentation",
        "reset_indentation",
        "mute",
        "unmute",
        "count",
        "clear_count",
        "track",
        "untrack",
        "report",
        "json",
        "is_enabled",
    }
)


def __getattr__(name: str) -> Any:
    """Resolve logger methods against the current default logger."""

    if name in _DELEGATED:
        return getattr(get(), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "COLORS",
    "COLOR_THEMES",
    "LEVELS",
    "LogLevel",
    "Loog",
    "METHODS",
    "MethodLevel",
    "PREFIXES",
    "PrefixStyle",
    "configure",
    "create",
    "get",
    "replace_default",
    "reset",
]
