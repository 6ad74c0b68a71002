"""Shared pytest fixtures and test helpers for noname-common tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from noname_common.config.discovery import CONFIG_ENV_VAR
from noname_common.services.telemetry import disable_telemetry
from noname_common.services.validator import Validator

PERSON_VALUES: dict[str, Any] = {
    "first_name": "John",
    "last_name": "Doe",
    "email": "john.doe@example.org",
}

PERSON_RULES: dict[str, Any] = {
    "first_name": {"type": "string"},
    "last_name": {"type": "string"},
    "email": {"type": "email"},
}


def _write_json(path: Path, data: dict[str, Any]) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run every test from an empty directory with no NONAME_* overrides.

    Also restores root logging, which CLI invocations reconfigure.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for key in ("NONAME_JSON_OUTPUT", "NONAME_QUIET", "NONAME_VERBOSE", "NONAME_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("noname_common").setLevel(logging.NOTSET)


@pytest.fixture
def person_values() -> dict[str, Any]:
    return dict(PERSON_VALUES)


@pytest.fixture
def person_rules() -> dict[str, Any]:
    return {name: dict(rule) for name, rule in PERSON_RULES.items()}


@pytest.fixture
def person_validator() -> Validator:
    """Validator loaded with a valid person record and its rules."""
    return Validator(PERSON_VALUES, PERSON_RULES)


@pytest.fixture
def person_files(tmp_path: Path) -> tuple[Path, Path]:
    """(values.json, rules.json) for the person record."""
    return (
        _write_json(tmp_path / "values.json", PERSON_VALUES),
        _write_json(tmp_path / "rules.json", PERSON_RULES),
    )
