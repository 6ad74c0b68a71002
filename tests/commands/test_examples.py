"""Tests for the --examples flag."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from noname_common.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["noname-common types", "noname-common validate"]),
    (["validate", "--examples"], ["--presence exists"]),
    (["check", "--examples"], ["noname-common check email", "--raw"]),
    (["types", "--examples"], ["noname-common -q types"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[" ".join(args) for args, _ in EXAMPLES_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
