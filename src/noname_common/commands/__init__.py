"""Subcommand modules for noname-common.

register_commands() imports command modules lazily so ``--help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from noname_common.commands.check import check
    from noname_common.commands.types_cmd import types_cmd
    from noname_common.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(check)
    cli.add_command(types_cmd)
