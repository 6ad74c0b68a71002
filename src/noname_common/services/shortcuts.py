"""One-shot type checks: ``is_type("email", v)`` and ``is_<type>(v)`` wrappers.

Each call builds a throwaway :class:`Validator`, so nothing accumulates
between calls and custom types registered elsewhere are never visible here.

Examples:
    >>> is_int(3, {"unsigned": True})
    True
    >>> is_type("INT", "3")
    False
    >>> is_string("abcd", {"max_length": 3})
    False
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from noname_common.services.validator import Validator

Shortcut = Callable[..., bool]


def is_type(type_name: str, value: Any, rule: Mapping[str, Any] | None = None) -> bool:
    """Check *value* against *type_name* (any letter case, ``type[]`` allowed)."""
    return Validator.check(type_name, value, rule)


def _shortcut(type_name: str) -> Shortcut:
    def check(value: Any, rule: Mapping[str, Any] | None = None) -> bool:
        return Validator.check(type_name, value, rule)

    check.__name__ = f"is_{type_name}"
    check.__qualname__ = check.__name__
    check.__doc__ = f"Check whether *value* validates as '{type_name}'."
    return check


is_any = _shortcut("any")
is_null = _shortcut("null")
is_bool = _shortcut("bool")
is_boolean = _shortcut("boolean")
is_scalar = _shortcut("scalar")
is_str = _shortcut("str")
is_string = _shortcut("string")
is_int = _shortcut("int")
is_integer = _shortcut("integer")
is_num = _shortcut("num")
is_numeric = _shortcut("numeric")
is_float = _shortcut("float")
is_double = _shortcut("double")
is_alnum = _shortcut("alnum")
is_alphanumeric = _shortcut("alphanumeric")
is_alpha = _shortcut("alpha")
is_arr = _shortcut("arr")
is_array = _shortcut("array")
is_obj = _shortcut("obj")
is_object = _shortcut("object")
is_callable = _shortcut("callable")
is_closure = _shortcut("closure")
is_email = _shortcut("email")
is_ip = _shortcut("ip")
is_ipv4 = _shortcut("ipv4")
is_ipv6 = _shortcut("ipv6")
is_date = _shortcut("date")
is_datetime = _shortcut("datetime")

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_alphanumeric",
    "is_any",
    "is_arr",
    "is_array",
    "is_bool",
    "is_boolean",
    "is_callable",
    "is_closure",
    "is_date",
    "is_datetime",
    "is_double",
    "is_email",
    "is_float",
    "is_int",
    "is_integer",
    "is_ip",
    "is_ipv4",
    "is_ipv6",
    "is_null",
    "is_num",
    "is_numeric",
    "is_obj",
    "is_object",
    "is_scalar",
    "is_str",
    "is_string",
    "is_type",
]
