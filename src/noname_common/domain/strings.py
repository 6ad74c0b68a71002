"""String comparison helpers with an optional case-insensitive mode.

All checks are case-sensitive by default.
"""

from __future__ import annotations


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def starts_with(text: str, prefix: str, case_sensitive: bool = True) -> bool:
    """Check whether *text* starts with *prefix*.

    Examples:
        >>> starts_with("Case-sensitive", "c")
        False
        >>> starts_with("case-insensitive", "C", case_sensitive=False)
        True
    """
    return _fold(text, case_sensitive).startswith(_fold(prefix, case_sensitive))


def ends_with(text: str, suffix: str, case_sensitive: bool = True) -> bool:
    """Check whether *text* ends with *suffix*."""
    return _fold(text, case_sensitive).endswith(_fold(suffix, case_sensitive))


def equals(a: str, b: str, case_sensitive: bool = True) -> bool:
    return _fold(a, case_sensitive) == _fold(b, case_sensitive)


def contains(text: str, search: str, case_sensitive: bool = True) -> bool:
    return _fold(search, case_sensitive) in _fold(text, case_sensitive)


def to_list(text: str) -> list[str]:
    """Split *text* into a list of single characters."""
    return list(text)
