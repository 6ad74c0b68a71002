"""Tests for the types command."""

import json

from click.testing import CliRunner

from noname_common.cli import cli
from noname_common.domain.registry import BUILTIN_TYPES


def test_types_table(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["types"])
    assert result.exit_code == 0
    assert f"count: {len(BUILTIN_TYPES)}" in result.output
    assert "alphanumeric" in result.output


def test_types_quiet(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "types"])
    assert result.exit_code == 0
    assert result.output.split() == [name for name, *_ in BUILTIN_TYPES]


def test_types_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "types"])
    data = json.loads(result.output)
    assert data["op"] == "types"
    assert {"name": "email", "alias": None, "extends": "string"} in data["data"]["items"]
