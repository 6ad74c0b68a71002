"""Built-in type predicates.

Each predicate has the signature ``(value, rule) -> bool``. The rule supplies
type-specific constraint parameters through ``rule.get(...)``; unknown
constraints are ignored. Predicates never record errors themselves; the
validator does that from their boolean outcome.
"""

from __future__ import annotations

import ipaddress
import re
import types
from collections.abc import Mapping
from datetime import UTC, date, datetime, time
from typing import Any

from email_validator import EmailNotValidError, validate_email

from noname_common.domain import strings
from noname_common.domain.collection import Collection
from noname_common.domain.exceptions import ConstraintConflictError, InvalidConstraintError
from noname_common.domain.rules import Rule

_NUMERIC_STRING = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")
_BARE_YEAR = re.compile(r"^\d{4}$")

# Tried in order after ISO-8601 parsing fails.
_DATETIME_LAYOUTS: tuple[str, ...] = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%d.%m.%Y",
    "%B %d, %Y %I:%M %p",
)

_TIME_LAYOUTS: tuple[str, ...] = (
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I %p",
)

_EMPTY_RULE = Rule(type="any")


# ---------------------------------------------------------------------------
# Structural checks
# ---------------------------------------------------------------------------


def is_any(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return True


def is_null(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return value is None


def is_boolean(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return isinstance(value, bool)


def is_scalar(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return isinstance(value, (bool, int, float, str))


def is_numeric(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Numbers (not booleans) and numeric strings such as ``"1.0"`` or ``" -2e3"``."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def is_float(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return isinstance(value, float)


def is_alpha(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return isinstance(value, str) and value.isascii() and value.isalpha()


def is_alphanumeric(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return isinstance(value, str) and value.isascii() and value.isalnum()


def _is_array_like(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping, Collection))


def is_object(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Anything that is neither null, a scalar, nor an array."""
    return value is not None and not is_scalar(value) and not _is_array_like(value)


def is_callable(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return callable(value)


def is_closure(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Plain functions and lambdas (not classes or callable instances)."""
    return isinstance(value, types.FunctionType)


# ---------------------------------------------------------------------------
# Constraint readers
# ---------------------------------------------------------------------------


def _number(rule: Rule, key: str, kinds: tuple[type, ...] = (int, float)) -> Any:
    """Read a numeric constraint, or None when it is not set.

    Raises:
        InvalidConstraintError: the value is not a number of *kinds*.
    """
    bound = rule.get(key)
    if bound is None:
        return None
    if isinstance(bound, bool) or not isinstance(bound, kinds):
        raise InvalidConstraintError(rule.name, key, bound)
    return bound


def _count(rule: Rule, key: str) -> int | None:
    return _number(rule, key, (int,))


def _options(rule: Rule, key: str = "in") -> list[Any] | None:
    options = rule.get(key)
    if options is None:
        return None
    if isinstance(options, (str, bytes, Mapping)) or not isinstance(
        options, (list, tuple, set, frozenset)
    ):
        raise InvalidConstraintError(rule.name, key, options)
    return list(options)


def _pattern(rule: Rule) -> re.Pattern[str] | None:
    pattern = rule.get("regex")
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise InvalidConstraintError(rule.name, "regex", pattern)
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidConstraintError(rule.name, "regex", pattern) from exc


# ---------------------------------------------------------------------------
# Constrained checks
# ---------------------------------------------------------------------------


def is_string(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """String check with optional constraints.

    Constraints: ``allow_null`` (True), ``allow_empty`` (False), ``equals``,
    ``in``, ``min_length``, ``max_length``, ``regex``, ``starts_with``,
    ``ends_with``, ``contains``, ``case_sensitive`` (False).
    """
    if value is None:
        return bool(rule.get("allow_null", True))
    if not isinstance(value, str):
        return False
    if value == "" and not rule.get("allow_empty", False):
        return False

    case_sensitive = bool(rule.get("case_sensitive", False))

    if rule.has("equals") and not strings.equals(value, str(rule.get("equals")), case_sensitive):
        return False

    options = _options(rule)
    if options is not None and not any(
        strings.equals(value, str(o), case_sensitive) for o in options
    ):
        return False

    min_length = _count(rule, "min_length")
    if min_length is not None and len(value) < min_length:
        return False
    max_length = _count(rule, "max_length")
    if max_length is not None and len(value) > max_length:
        return False

    pattern = _pattern(rule)
    if pattern is not None and pattern.search(value) is None:
        return False

    if rule.has("starts_with") and not strings.starts_with(
        value, str(rule.get("starts_with")), case_sensitive
    ):
        return False
    if rule.has("ends_with") and not strings.ends_with(
        value, str(rule.get("ends_with")), case_sensitive
    ):
        return False
    if rule.has("contains") and not strings.contains(
        value, str(rule.get("contains")), case_sensitive
    ):
        return False

    return True


def is_integer(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Strict integer check (no bools, floats, or numeric strings).

    Constraints: ``unsigned`` (value > 0), ``equals``, ``in``, ``>`` or
    ``>=`` (``>`` wins), ``<`` or ``<=`` (``<`` wins).

    Raises:
        InvalidConstraintError: a bound is not a number, or ``in`` is not a list.
        ConstraintConflictError: ``unsigned`` is combined with a negative bound.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    bounds = {key: _number(rule, key) for key in (">", ">=", "<", "<=")}
    options = _options(rule)

    if rule.get("unsigned"):
        for key, bound in bounds.items():
            if bound is not None and bound < 0:
                msg = (
                    f"Rule '{rule.name}' combines 'unsigned' with a negative "
                    f"'{key}' bound ({bound})"
                )
                raise ConstraintConflictError(msg)
        if value <= 0:
            return False

    if rule.has("equals") and value != rule.get("equals"):
        return False
    if options is not None and value not in options:
        return False

    if bounds[">"] is not None:
        if not value > bounds[">"]:
            return False
    elif bounds[">="] is not None and not value >= bounds[">="]:
        return False

    if bounds["<"] is not None:
        if not value < bounds["<"]:
            return False
    elif bounds["<="] is not None and not value <= bounds["<="]:
        return False

    return True


def is_array(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Lists, tuples, mappings and Collections.

    Constraints: ``count``, ``min_count``, ``max_count``, ``allow_empty`` (False).
    """
    if not _is_array_like(value):
        return False
    size = len(value)
    if size == 0 and not rule.get("allow_empty", False):
        return False
    count = _count(rule, "count")
    if count is not None and size != count:
        return False
    min_count = _count(rule, "min_count")
    if min_count is not None and size < min_count:
        return False
    max_count = _count(rule, "max_count")
    if max_count is not None and size > max_count:
        return False
    return True


# ---------------------------------------------------------------------------
# Format checks
# ---------------------------------------------------------------------------


def is_email(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_ipv4(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_ip(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    return is_ipv4(value, rule) or is_ipv6(value, rule)


def parse_datetime(value: str | int) -> datetime | None:
    """Parse *value* as a calendar date/time, or return None.

    A bare 4-digit value, string or integer, is the first day of that year.
    Other integers are UNIX timestamps (UTC). Time-only strings are anchored
    to today's date.
    """
    if isinstance(value, int) and not _BARE_YEAR.match(str(value)):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None
    if _BARE_YEAR.match(text):
        return datetime(int(text), 1, 1)

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.combine(date.today(), time.fromisoformat(text))
    except ValueError:
        pass

    for layout in _DATETIME_LAYOUTS:
        try:
            return datetime.strptime(text, layout)
        except ValueError:
            continue
    for layout in _TIME_LAYOUTS:
        try:
            return datetime.combine(date.today(), datetime.strptime(text, layout).time())
        except ValueError:
            continue
    return None


def is_datetime(value: Any, rule: Rule = _EMPTY_RULE) -> bool:
    """Parseable date/time string or integer timestamp.

    Constraint ``format`` (strftime directives): the parsed value re-rendered
    through the format must equal the original input exactly.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        return False
    layout = rule.get("format")
    if layout is not None and not isinstance(layout, str):
        raise InvalidConstraintError(rule.name, "format", layout)
    parsed = parse_datetime(value)
    if parsed is None:
        return False
    if layout:
        return parsed.strftime(layout) == str(value)
    return True
