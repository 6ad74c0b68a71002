"""Command: check one value against one type."""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

import click

from noname_common.commands._base import NcCommand

if TYPE_CHECKING:
    from noname_common.commands._context import AppContext

_BOUND_RE = re.compile(r"^(?P<op>>=|<=|>|<)(?P<value>.+)$")


def parse_literal(text: str) -> Any:
    """Read *text* as a JSON literal, falling back to the raw string.

    ``42`` becomes an int, ``[1, 2]`` a list, ``null`` None, ``abc`` stays
    ``"abc"``.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def parse_constraints(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` pairs (or bounds like ``>=18``) into a constraint mapping."""
    constraints: dict[str, Any] = {}
    for pair in pairs:
        bound = _BOUND_RE.match(pair)
        if bound:
            constraints[bound["op"]] = parse_literal(bound["value"])
            continue
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got '{pair}'"
            raise click.BadParameter(msg, param_hint="--rule")
        constraints[key] = parse_literal(raw)
    return constraints


@click.command(
    cls=NcCommand,
    examples="""\
  noname-common check email john.doe@example.org
  noname-common check int 42 --rule unsigned=true --rule "<=100"
  noname-common check "int[]" "[1, 2, 3]"
  noname-common check string 42 --raw
  noname-common check date 2024-03-01 --rule format=%Y-%m-%d""",
)
@click.argument("type_name")
@click.argument("value")
@click.option(
    "--rule",
    "rules",
    multiple=True,
    metavar="KEY=VALUE",
    help="Constraint for the check (repeatable). VALUE is read as JSON when possible.",
)
@click.option("--raw", is_flag=True, help="Treat VALUE as a plain string instead of JSON.")
@click.pass_obj
def check(
    app: AppContext,
    type_name: str,
    value: str,
    rules: tuple[str, ...],
    raw: bool,
) -> None:
    """Check VALUE against TYPE_NAME (``type[]`` checks each element)."""
    subject = value if raw else parse_literal(value)
    app.emit(app.service().check_value(type_name, subject, parse_constraints(rules)))
