"""Tests for string comparison helpers."""

import pytest

from noname_common.domain import strings


@pytest.mark.parametrize(
    ("func", "text", "other", "case_sensitive", "expected"),
    [
        pytest.param(strings.starts_with, "Case-sensitive", "c", True, False, id="starts-cs"),
        pytest.param(strings.starts_with, "Case-sensitive", "c", False, True, id="starts-ci"),
        pytest.param(strings.ends_with, "file.TXT", ".txt", True, False, id="ends-cs"),
        pytest.param(strings.ends_with, "file.TXT", ".txt", False, True, id="ends-ci"),
        pytest.param(strings.equals, "Doe", "doe", True, False, id="equals-cs"),
        pytest.param(strings.equals, "Doe", "doe", False, True, id="equals-ci"),
        pytest.param(strings.contains, "Hello World", "o w", True, False, id="contains-cs"),
        pytest.param(strings.contains, "Hello World", "o w", False, True, id="contains-ci"),
    ],
)
def test_comparisons(func, text: str, other: str, case_sensitive: bool, expected: bool) -> None:
    assert func(text, other, case_sensitive) is expected


def test_case_sensitive_is_default() -> None:
    assert strings.starts_with("abc", "a")
    assert not strings.equals("A", "a")


def test_to_list() -> None:
    assert strings.to_list("abc") == ["a", "b", "c"]
    assert strings.to_list("") == []
