"""Click command group for trying loog from a shell.

Purpose
-------
Offer a small CLI to print package metadata, emit single lines with a chosen
configuration, and showcase every prefix style.

Contents
--------
* :func:`cli` - command group with ``--use-dotenv`` and ``--version``.
* ``info`` / ``emit`` / ``demo`` subcommands.
"""

from __future__ import annotations

from typing import Sequence

import click
from rich.console import Console
from rich.panel import Panel

from . import __init__conf__
from . import config as loog_config
from .domain.levels import LEVELS, METHODS
from .domain.prefixes import PrefixStyle
from .logger import Loog
from .runtime import create

_STYLE_CHOICES = [style.value for style in PrefixStyle]

_SHOWCASE_METHODS = ("error", "warn", "warning", "success", "http", "info", "notice", "timing", "verbose", "debug", "silly", "log")


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load a nearby .env before running commands (default: ${loog_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, *, version: bool, use_dotenv: bool | None) -> None:
    """Leveled console logging playground."""

    if use_dotenv is None:
        use_dotenv = loog_config.env_flag(loog_config.DOTENV_ENV_VAR)
    if use_dotenv:
        loog_config.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        __init__conf__.print_info(writer=lambda text: click.echo(text, nl=False))


@cli.command("info")
def info_command() -> None:
    """Print the package metadata banner."""

    __init__conf__.print_info(writer=lambda text: click.echo(text, nl=False))


@cli.command("emit")
@click.argument("method", type=click.Choice(list(METHODS), case_sensitive=False))
@click.argument("message", nargs=-1, required=True)
@click.option("--prefix-style", type=click.Choice(_STYLE_CHOICES, case_sensitive=False), default=None)
@click.option("--log-level", type=click.Choice(list(LEVELS), case_sensitive=False), default=None)
@click.option("--color/--no-color", default=None, help="Override the default colour behaviour.")
@click.option("--process", default=None, help="Label prepended to the line.")
@click.option("--indent", "indent", type=click.IntRange(min=0), default=0, show_default=True)
def emit_command(
    method: str,
    message: tuple[str, ...],
    prefix_style: str | None,
    log_level: str | None,
    color: bool | None,
    process: str | None,
    indent: int,
) -> None:
    """Log MESSAGE through METHOD with the given configuration."""

    options: dict[str, object] = {}
    for key, value in (("prefix_style", prefix_style), ("log_level", log_level), ("color", color), ("process", process)):
        if value is not None:
            options[key] = value
    log = create(**options)
    for _ in range(indent):
        log.indent()
    log.emit(method.lower(), *message)


def _showcase(log: Loog) -> None:
    for method in _SHOWCASE_METHODS:
        log.emit(method, f"loog.{method}")


@cli.command("demo")
@click.option(
    "--prefix-style",
    "styles",
    multiple=True,
    type=click.Choice(_STYLE_CHOICES, case_sensitive=False),
    help="Limit the showcase to these styles (repeatable).",
)
@click.option("--color/--no-color", default=True, show_default=True)
def demo_command(styles: tuple[str, ...], color: bool) -> None:
    """Show every log method in each prefix style, then an indentation example."""

    console = Console(no_color=not color, highlight=False)
    selected = [style.lower() for style in styles] or _STYLE_CHOICES
    for style in selected:
        console.print(Panel.fit(f"prefix_style: {style}", border_style="bold"))
        _showcase(create(prefix_style=style, color=color, log_level="all"))
    console.print(Panel.fit("indentation", border_style="bold"))
    log = create(color=color, log_level="all")
    log.log("log").indent().info("info").indent().warn("warn").outdent().error("error").outdent().log("bye")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return a process exit code.

    Examples
    --------
    >>> main(["info"])  # doctest: +ELLIPSIS
    Info for loog:
    ...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as error:
        error.show()
        return error.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


__all__ = ["cli", "main"]
