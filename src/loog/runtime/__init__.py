"""Runtime façade: factories and the swappable process-wide default logger.

Purpose
-------
Expose the entry points host code uses instead of wiring settings, sinks and
loggers by hand.

Contents
--------
* ``create`` - build an independent logger from options.
* ``configure`` - build a logger and install it as the default.
* ``get`` - return the default logger, building it on first access.
* ``replace_default`` / ``reset`` - swap or drop the default handle.

System Role
-----------
The single place where the process-wide default lives. Callers that need
isolation hold the handle returned by :func:`create` and pass it around;
module-level helpers in :mod:`loog` always resolve the current default.
"""

from __future__ import annotations

from typing import Any, Mapping

from loog.logger import Loog

from ._composition import build_logger
from ._settings import build_settings, normalize_options
from ._state import clear_default, current_default, set_default, swap_default


def create(config: Mapping[str, Any] | None = None, **options: Any) -> Loog:
    """Return a new logger configured by ``config`` and ``options``.

    Inputs
    ------
    config:
        Optional mapping of options; camelCase names (``prefixStyle``,
        ``logLevel``, ``colorStyle``) are accepted.
    **options:
        ``prefix_style``, ``color``, ``colors``, ``log_level``, ``process`` and
        ``sink``. Keywords win over ``config`` entries; both are merged over
        :func:`loog.config.default_options`, never over another logger.

    Outputs
    -------
    :class:`Loog`
        Fresh handle with its own state. The default logger is not touched.
    """

    return build_logger(normalize_options(config, **options))


def configure(config: Mapping[str, Any] | None = None, **options: Any) -> Loog:
    """Build a logger like :func:`create` and install it as the default.

    Previously returned loggers, and method references bound to them, keep
    working unchanged.
    """

    instance = create(config, **options)
    set_default(instance)
    return instance


def get() -> Loog:
    """Return the process-wide default logger, creating it on first use."""

    return current_default(create)


def replace_default(instance: Loog) -> Loog | None:
    """Install ``instance`` as the default and return the previous one, if any."""

    if not isinstance(instance, Loog):
        raise TypeError(f"expected a Loog instance, got {type(instance).__name__}")
    return swap_default(instance)


def reset() -> None:
    """Drop the default logger; the next :func:`get` rebuilds it from defaults."""

    clear_default()


__all__ = [
    "Loog",
    "build_settings",
    "configure",
    "create",
    "get",
    "normalize_options",
    "replace_default",
    "reset",
]
