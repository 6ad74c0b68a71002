"""Collection — an insertion-ordered key/value store with array-like ergonomics.

INVARIANT: insertion order is preserved. Re-setting an existing key keeps its
original position and overwrites the value; ``delete`` removes the pair.

Iterating a Collection yields ``(key, value)`` pairs, so ``dict(collection)``
rebuilds the underlying mapping. Each ``iter()`` call starts from the first
entry.
"""

from __future__ import annotations

import json
import operator as _op
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from noname_common.domain.arr import flatten as _flatten
from noname_common.domain.exceptions import InvalidOperatorError


def _strict_eq(a: Any, b: Any) -> bool:
    return type(a) is type(b) and a == b


_COMPARATORS: dict[str | None, Callable[[Any, Any], bool]] = {
    None: _op.eq,
    "=": _op.eq,
    "==": _op.eq,
    "===": _strict_eq,
    ">": _op.gt,
    ">=": _op.ge,
    "<": _op.lt,
    "<=": _op.le,
    "!=": _op.ne,
    "<>": _op.ne,
}


V = TypeVar("V")


class Collection(Generic[V]):
    """Mutable, insertion-ordered mapping from string keys to values.

    Usage::

        c = Collection({"a": 1})
        c.set("b", 2)
        c.get(["a", "missing"])   # {"a": 1, "missing": None}
        c.pluck("a")              # 1, and "a" is gone
    """

    def __init__(self, items: Mapping[str, V] | None = None) -> None:
        self._items: dict[str, V] = dict(items) if items else {}

    # --- Core operations ---

    def set(self, key: str, value: V) -> None:
        self._items[key] = value

    def get(self, key: str | list[str] | tuple[str, ...], default: Any = None) -> Any:
        """Return the value stored under *key*, or *default* when absent.

        Passing a list/tuple of keys returns a dict with every requested key;
        keys missing from the collection map to *default*.
        """
        if isinstance(key, (list, tuple)):
            return {k: self._items.get(k, default) for k in key}
        return self._items.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._items

    def pluck(self, key: str, default: Any = None) -> Any:
        """Return the value for *key* (or *default*) and remove it."""
        return self._items.pop(key, default)

    def delete(self, key: str) -> None:
        """Remove *key*. No-op if absent."""
        self._items.pop(key, None)

    def destroy(self) -> None:
        """Remove all entries."""
        self._items.clear()

    def keys(self) -> list[str]:
        return list(self._items)

    def values(self) -> list[V]:
        return list(self._items.values())

    def items(self) -> list[tuple[str, V]]:
        return list(self._items.items())

    def count(self) -> int:
        return len(self._items)

    def is_(self, key: str, value: Any, operator: str | None = None) -> bool:
        """Compare the value stored under *key* against *value*.

        Supported operators: ``None``/``=``/``==`` (loose), ``===`` (same type
        and equal), ``>``, ``>=``, ``<``, ``<=``, ``!=``/``<>``. An ordering
        comparison between values that cannot be ordered (a missing key, or a
        string against a number) is False.

        Raises:
            InvalidOperatorError: *operator* is not one of the above.
        """
        try:
            compare = _COMPARATORS[operator]
        except (KeyError, TypeError):
            raise InvalidOperatorError(operator) from None
        try:
            return bool(compare(self.get(key), value))
        except TypeError:
            return False

    # --- Export ---

    def to_dict(self) -> dict[str, V]:
        """Shallow copy of the stored entries, in insertion order."""
        return dict(self._items)

    def all(self) -> dict[str, V]:
        return self.to_dict()

    def to_json(self) -> str:
        return json.dumps(self._items)

    def flatten(self, separator: str = ".") -> dict[str, Any]:
        """Flatten nested values into dotted keys (see :func:`domain.arr.flatten`)."""
        return _flatten(self._items, separator=separator)

    # --- Python protocols ---

    def __iter__(self) -> Iterator[tuple[str, V]]:
        yield from list(self._items.items())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __getitem__(self, key: str) -> V | None:
        return self.get(key)

    def __setitem__(self, key: str, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"
