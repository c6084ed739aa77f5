"""Process-wide default logger handle and access helpers."""

from __future__ import annotations

from threading import RLock
from typing import Callable

from loog.logger import Loog

_DEFAULT: Loog | None = None
_DEFAULT_LOCK = RLock()


def set_default(instance: Loog) -> None:
    """Install ``instance`` as the process-wide default."""

    with _DEFAULT_LOCK:
        global _DEFAULT
        _DEFAULT = instance


def clear_default() -> None:
    """Forget the default so the next access builds a fresh one."""

    with _DEFAULT_LOCK:
        global _DEFAULT
        _DEFAULT = None


def current_default(factory: Callable[[], Loog]) -> Loog:
    """Return the default, creating it with ``factory`` on first access."""

    with _DEFAULT_LOCK:
        global _DEFAULT
        if _DEFAULT is None:
            _DEFAULT = factory()
        return _DEFAULT


def swap_default(instance: Loog) -> Loog | None:
    """Install ``instance`` and return the default it replaced."""

    with _DEFAULT_LOCK:
        global _DEFAULT
        previous, _DEFAULT = _DEFAULT, instance
        return previous


__all__ = ["clear_default", "current_default", "set_default", "swap_default"]
