"""Root CLI group for noname-common with global flags and command registration."""

from __future__ import annotations

import click

from noname_common import __version__
from noname_common.commands import register_commands
from noname_common.commands._base import NcGroup
from noname_common.commands._context import AppContext
from noname_common.config.settings import NonameSettings


@click.group(
    cls=NcGroup,
    invoke_without_command=True,
    examples="""\
  noname-common types
  noname-common check email john.doe@example.org
  noname-common validate values.json rules.yaml""",
)
@click.version_option(version=__version__, prog_name="noname-common")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """noname-common: rule-driven validation of named values."""
    settings = NonameSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
