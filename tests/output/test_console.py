"""Tests for the StringIO-backed console."""

from noname_common.output.console import create_console, get_output


def test_renders_to_buffer() -> None:
    console = create_console(no_color=True, width=40)
    console.print("[nc.ok]OK[/nc.ok] done")
    assert get_output(console) == "OK done\n"


def test_default_width() -> None:
    assert create_console().width == 120
