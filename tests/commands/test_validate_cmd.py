"""Tests for the validate command."""

import json
from pathlib import Path

from click.testing import CliRunner

from noname_common.cli import cli


class TestValidateCommand:
    def test_valid(self, cli_runner: CliRunner, person_files: tuple[Path, Path]) -> None:
        result = cli_runner.invoke(cli, ["validate", *map(str, person_files)])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "checked: 3" in result.output

    def test_invalid_exits_1_with_table(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.yaml").write_text("email: nope\n")
        (tmp_path / "r.yaml").write_text("email: email\nname: string\n")
        result = cli_runner.invoke(cli, ["validate", "v.yaml", "r.yaml"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "Value (nope) failed to validate as 'email'" in result.output
        assert "Value for 'name' is required." in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.json").write_text(json.dumps({"n": "x"}))
        (tmp_path / "r.json").write_text(json.dumps({"n": "int[]"}))
        result = cli_runner.invoke(cli, ["--json", "validate", "v.json", "r.json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "VALIDATION_FAILED"
        assert data["data"]["errors"] == {"n": ["Value (x) failed to validate as 'numeric'"]}

    def test_quiet_success(self, cli_runner: CliRunner, person_files: tuple[Path, Path]) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", *map(str, person_files)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: validate"

    def test_presence_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.json").write_text(json.dumps({"flag": False}))
        (tmp_path / "r.json").write_text(json.dumps({"flag": "bool"}))
        assert cli_runner.invoke(cli, ["validate", "v.json", "r.json"]).exit_code == 1
        result = cli_runner.invoke(cli, ["validate", "v.json", "r.json", "--presence", "exists"])
        assert result.exit_code == 0

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "r.json").write_text("{}")
        result = cli_runner.invoke(cli, ["--json", "validate", "absent.json", "r.json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_INPUT"

    def test_bad_rule_is_reported(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.json").write_text(json.dumps({"a": 1}))
        (tmp_path / "r.json").write_text(json.dumps({"a": {"min_length": 3}}))
        result = cli_runner.invoke(cli, ["validate", "v.json", "r.json"])
        assert result.exit_code == 1
        assert "Rule format for 'a' is invalid." in result.output

    def test_unruled_value_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.json").write_text(json.dumps({"a": 1, "extra": 2}))
        (tmp_path / "r.json").write_text(json.dumps({"a": "int"}))
        result = cli_runner.invoke(cli, ["validate", "v.json", "r.json"])
        assert result.exit_code == 0
        assert "WARNING: Value 'extra' has no rule and was not checked" in result.output

    def test_malformed_bound_is_reported(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "v.yaml").write_text("age: 30\n")
        (tmp_path / "r.yaml").write_text("age:\n  type: int\n  '>': '18'\n")
        result = cli_runner.invoke(cli, ["--json", "validate", "v.yaml", "r.yaml"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_CONSTRAINT"
