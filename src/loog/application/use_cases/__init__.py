"""Use cases orchestrating the domain and ports."""

from __future__ import annotations

from .render import compose_line, create_render_line

__all__ = ["compose_line", "create_render_line"]
