"""Tests for the is_<type>() shortcut surface."""

import pytest

from noname_common.domain.registry import BUILTIN_TYPES
from noname_common.services import shortcuts
from noname_common.services.shortcuts import is_email, is_int, is_string, is_type

TYPE_NAMES = sorted(
    {name for name, *_ in BUILTIN_TYPES}
    | {alias for _, alias, *_ in BUILTIN_TYPES if alias and alias != "*"}
)


class TestIsType:
    def test_case_insensitive(self) -> None:
        assert is_type("EMAIL", "john.doe@example.org")
        assert is_type("Int", 5)

    def test_array_suffix(self) -> None:
        assert is_type("int[]", [1, 2])
        assert not is_type("int[]", [1, "x"])

    def test_constraints(self) -> None:
        assert is_type("string", "abc", {"min_length": 3})
        assert not is_type("string", "ab", {"min_length": 3})


class TestWrappers:
    @pytest.mark.parametrize("name", TYPE_NAMES)
    def test_wrapper_exists_for_every_name_and_alias(self, name: str) -> None:
        wrapper = getattr(shortcuts, f"is_{name}")
        assert wrapper.__name__ == f"is_{name}"
        assert f"is_{name}" in shortcuts.__all__

    def test_examples(self) -> None:
        assert is_int(3, {"unsigned": True})
        assert not is_int("3")
        assert not is_string("abcd", {"max_length": 3})
        assert is_email("a@b.com")
        assert shortcuts.is_ipv6("::1")
        assert shortcuts.is_date("2016-01-01")
        assert shortcuts.is_any(None)

    def test_no_state_between_calls(self) -> None:
        assert not is_int("x")
        assert is_int(1)
