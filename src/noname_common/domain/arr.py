"""Nested mapping helpers — flatten to dotted keys, map over leaves.

Pure functions. Sequences (lists, tuples) are treated as mappings keyed by
their index, so ``{"a": [1, 2]}`` flattens to ``{"a.0": 1, "a.1": 2}``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any


def _is_branch(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _entries(value: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> Iterator[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        yield from value.items()
    else:
        yield from enumerate(value)


def flatten(
    data: Mapping[Any, Any] | list[Any] | tuple[Any, ...],
    prepend: str = "",
    separator: str = ".",
) -> dict[str, Any]:
    """Flatten nested mappings/sequences into a single-level dict.

    Empty branches are kept as leaves so no key disappears.

    Examples:
        >>> flatten({"a": "b", "c": {"d": "e", "f": [1, 2]}})
        {'a': 'b', 'c.d': 'e', 'c.f.0': 1, 'c.f.1': 2}
        >>> flatten({"a": {}}, separator="/")
        {'a': {}}
    """
    flat: dict[str, Any] = {}
    for key, value in _entries(data):
        path = f"{prepend}{key}"
        if _is_branch(value) and value:
            for sub_key, sub_value in flatten(value, f"{path}{separator}", separator).items():
                # First writer wins when two paths collide.
                flat.setdefault(sub_key, sub_value)
        else:
            flat.setdefault(path, value)
    return flat


def each(data: Any, callback: Callable[[Any, Any], Any]) -> Any:
    """Return a copy of *data* with *callback(value, key)* applied to every leaf.

    Mappings stay dicts, lists stay lists, tuples stay tuples.
    """
    if isinstance(data, Mapping):
        return {
            key: each(value, callback) if _is_branch(value) else callback(value, key)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        mapped = [
            each(value, callback) if _is_branch(value) else callback(value, index)
            for index, value in enumerate(data)
        ]
        return tuple(mapped) if isinstance(data, tuple) else mapped
    return data
