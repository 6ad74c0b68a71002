"""Command: validate a values document against a rules document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from noname_common.commands._base import NcCommand

if TYPE_CHECKING:
    from noname_common.commands._context import AppContext


@click.command(
    cls=NcCommand,
    examples="""\
  noname-common validate values.json rules.json
  noname-common validate values.yaml rules.toml --presence exists
  noname-common --json validate values.json rules.yaml""",
)
@click.argument("values_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("rules_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--presence",
    type=click.Choice(["truthy", "exists"]),
    default=None,
    help="How a field counts as present (overrides [validator] presence).",
)
@click.pass_obj
def validate(
    app: AppContext,
    values_path: Path,
    rules_path: Path,
    presence: str | None,
) -> None:
    """Validate VALUES_PATH against RULES_PATH (JSON, TOML or YAML)."""
    config = app.settings.to_config()
    if presence is not None:
        config = config.model_copy(
            update={"validator": config.validator.model_copy(update={"presence": presence})}
        )
    app.emit(app.service(config).validate_files(values_path, rules_path))
