"""Environment-driven defaults and optional ``.env`` loading.

Purpose
-------
Resolve the process-wide default options (notably the default log level) from
the environment exactly once, and offer opt-in ``.env`` support for CLI and
host applications.

Contents
--------
* :data:`LOG_LEVEL_ENV_VAR` / :data:`LEGACY_LOG_LEVEL_ENV_VAR` - level sources.
* :data:`NO_COLOR_ENV_VAR` - conventional colour opt-out.
* :data:`DOTENV_ENV_VAR` - toggle for loading ``.env`` in the CLI.
* :func:`default_options` - cached defaults merged under caller options.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` file.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "LOOG_LOG_LEVEL"
LEGACY_LOG_LEVEL_ENV_VAR = "npm_config_loglevel"
NO_COLOR_ENV_VAR = "NO_COLOR"
DOTENV_ENV_VAR = "LOOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


@lru_cache(maxsize=1)
def _cached_defaults() -> tuple[tuple[str, Any], ...]:
    level = os.environ.get(LOG_LEVEL_ENV_VAR) or os.environ.get(LEGACY_LOG_LEVEL_ENV_VAR) or "info"
    color = not os.environ.get(NO_COLOR_ENV_VAR)
    return (
        ("prefix_style", "text"),
        ("color", color),
        ("colors", None),
        ("log_level", level),
        ("process", None),
    )


def default_options() -> Mapping[str, Any]:
    """Return the default configuration, reading the environment on first use.

    Later environment changes are ignored until
    :func:`_reset_defaults_for_testing` clears the cache.
    """

    return dict(_cached_defaults())


def _reset_defaults_for_testing() -> None:
    _cached_defaults.cache_clear()


def env_flag(name: str) -> bool:
    """Return ``True`` when the environment variable ``name`` is truthy."""

    return os.environ.get(name, "").strip().lower() in _TRUTHY


def enable_dotenv(search_from: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards from ``search_from``.

    Existing environment variables keep precedence and the cached defaults
    are re-read on next use. Returns the resolved path
    of the loaded file, or ``None`` when no file was found. Only the first
    successful call loads anything; later calls return the same path.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    start = Path(search_from) if search_from is not None else Path.cwd()
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            load_dotenv(candidate, override=False)
            _DOTENV_LOADED = candidate
            _cached_defaults.cache_clear()
            logger.debug("loaded environment from %s", candidate)
            return candidate
    logger.debug("no .env found above %s", start)
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "LEGACY_LOG_LEVEL_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "default_options",
    "enable_dotenv",
    "env_flag",
]
