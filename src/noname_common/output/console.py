"""Rich Console factory and theme for noname-common output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops color codes on its own when the output is
not a terminal (CliRunner, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NONAME_THEME = Theme(
    {
        "nc.ok": "bold green",
        "nc.error": "bold red",
        "nc.warning": "bold yellow",
        "nc.op": "bold cyan",
        "nc.key": "dim",
        "nc.field": "bold blue",
        "nc.type": "green",
        "nc.alias": "cyan",
        "nc.message": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Fixed render width (defaults to 120 for stable output).
    """
    return Console(
        file=StringIO(),
        theme=NONAME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
