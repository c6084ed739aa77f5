"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from importlib import metadata
from typing import Callable

name = "loog"
title = "Leveled console logging with prefixes, colour, indentation and counters"
url = "https://github.com/palulabs/loog"
author = "loog contributors"
shell_command = "loog"

try:
    version = metadata.version(name)
except metadata.PackageNotFoundError:
    version = "0.0.0.dev0"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (``print`` by default).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for loog:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("url", url),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)


__all__ = ["author", "name", "print_info", "shell_command", "title", "url", "version"]
