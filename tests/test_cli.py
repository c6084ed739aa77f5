"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from loog import __init__conf__
from loog import cli as cli_mod
from loog.logger import PREFIX_TABLES

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def _banner() -> str:
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def test_cli_without_subcommand_prints_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, [])

    assert result.exit_code == 0
    assert result.output == _banner()


def test_cli_info_command_matches_summary() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert result.output == _banner()
    assert "Info for loog" in result.output


def test_cli_version_flag() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_emit_writes_a_single_line() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["emit", "warn", "disk", "low", "--no-color", "--process", "[db]", "--indent", "1"])

    assert result.exit_code == 0
    assert result.output == "[db]   [WRN] disk low\n"


def test_cli_emit_respects_log_level() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["emit", "debug", "hidden", "--log-level", "info"])

    assert result.exit_code == 0
    assert result.output == ""


def test_cli_emit_prefix_style() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["emit", "INFO", "Hi", "--prefix-style", "npm", "--no-color"])

    assert result.exit_code == 0
    assert result.output == "info Hi\n"


def test_cli_emit_rejects_unknown_methods() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["emit", "shout", "Hi"])

    assert result.exit_code != 0
    assert "Invalid value" in result.output


def test_cli_demo_runs_for_single_style() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--prefix-style", "ascii", "--no-color"])

    assert result.exit_code == 0
    plain = strip_ansi(result.output)
    assert "prefix_style: ascii" in plain
    assert "prefix_style: text" not in plain
    assert f"{PREFIX_TABLES['ascii']['error']} loog.error" in plain
    assert "loog.log" in plain
    assert "bye" in plain


def test_cli_demo_covers_every_style_by_default() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo"])

    assert result.exit_code == 0
    plain = strip_ansi(result.output)
    for style in PREFIX_TABLES:
        assert f"prefix_style: {style}" in plain


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert "Info for loog" in capsys.readouterr().out

    assert cli_mod.main(["emit", "nope", "x"]) == 2
    assert "Invalid value" in capsys.readouterr().err
