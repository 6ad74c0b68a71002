"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`; unknown
ops fall back to a generic key-value listing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from noname_common.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from noname_common.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    no_color: bool = False,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(no_color=no_color, width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Type listings print one canonical name per line; everything else prints
    a single status line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("name", "")) for item in items if isinstance(item, dict))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="nc.ok"), Text(f"  {result.op}", style="nc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"), default=str)
    console.print(Text(f"  {key}: ", style="nc.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _errors_table(errors: dict[str, list[str]]) -> Table:
    """One row per message; the field name is only shown on its first row."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="nc.field", no_wrap=True)
    table.add_column("Message", style="nc.message")
    for name, messages in errors.items():
        for index, message in enumerate(messages):
            table.add_row(Text(name if index == 0 else ""), Text(message))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="nc.error"),
        Text(f"  {result.op}", style="nc.op"),
        Text(f" - {msg}"),
    )

    errors = result.data.get("errors")
    if isinstance(errors, dict) and errors:
        console.print()
        console.print(_errors_table(errors))
    elif err and err.detail and (verbose or "path" in err.detail):
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))

    if verbose:
        _render_meta(console, result)


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "checked", result.data.get("checked", 0))
    _field(console, "valid", result.data.get("valid", True))
    if verbose:
        _render_meta(console, result)


def _render_types(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    _field(console, "count", len(items))
    if not items:
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type", style="nc.type", no_wrap=True)
    table.add_column("Alias", style="nc.alias")
    table.add_column("Extends")
    for item in items:
        table.add_row(item["name"], item.get("alias") or "", item.get("extends") or "")
    console.print()
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "type", result.data.get("type", ""))
    _field(console, "value", result.data.get("value"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line plus all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "types": _render_types,
    "check": _render_check,
}
