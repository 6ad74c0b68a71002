"""Command: list the registered types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from noname_common.commands._base import NcCommand

if TYPE_CHECKING:
    from noname_common.commands._context import AppContext


@click.command(
    "types",
    cls=NcCommand,
    examples="""\
  noname-common types
  noname-common -q types
  noname-common --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List built-in types with their aliases and parent types."""
    app.emit(app.service().list_types())
