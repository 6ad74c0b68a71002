"""Tests for the root noname-common CLI."""

import pytest
from click.testing import CliRunner

from noname_common import __version__
from noname_common.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "noname-common" in result.output
    for command in ("validate", "check", "types"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/nonexistent/noname.toml"]],
    ids=["json", "quiet", "verbose", "log-json", "config"],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_verbose_attaches_telemetry(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "check", "int", "5"])
    assert result.exit_code == 0
    assert "meta:" in result.output
    assert "check_value" in result.output


def test_config_file_changes_presence(cli_runner: CliRunner, tmp_path) -> None:
    (tmp_path / "values.json").write_text('{"n": 0}')
    (tmp_path / "rules.json").write_text('{"n": "int"}')
    assert cli_runner.invoke(cli, ["validate", "values.json", "rules.json"]).exit_code == 1

    (tmp_path / "noname.toml").write_text('[validator]\npresence = "exists"\n')
    result = cli_runner.invoke(cli, ["validate", "values.json", "rules.json"])
    assert result.exit_code == 0, result.output
