"""Type registry — type names and aliases mapped to predicate descriptors.

Every Validator owns its own :class:`TypeRegistry`, seeded from the
immutable :data:`BUILTIN_TYPES` catalog, so custom types registered by one
caller never leak into another caller's validation run.

INVARIANT: an alias maps to the very same :class:`TypeDescriptor` object as
its canonical name.
INVARIANT: a type may only extend a type that is already registered, which
rules out forward references and cycles.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from noname_common.domain import predicates
from noname_common.domain.collection import Collection
from noname_common.domain.exceptions import (
    DuplicateAliasError,
    DuplicateTypeError,
    MissingValidatorError,
    NonCallableValidatorError,
    UnknownParentTypeError,
    UnknownTypeError,
)

logger = logging.getLogger(__name__)

TypePredicate = Callable[[Any, Any], Any]


@dataclass(frozen=True, eq=False)
class TypeDescriptor:
    """A registered type: its predicate plus optional alias and parent link."""

    name: str
    predicate: TypePredicate
    extends: str | None = None
    alias: str | None = None


# (name, alias, extends, predicate). Order matters: parents come first.
BUILTIN_TYPES: tuple[tuple[str, str | None, str | None, TypePredicate], ...] = (
    ("any", "*", None, predicates.is_any),
    ("null", None, None, predicates.is_null),
    ("boolean", "bool", None, predicates.is_boolean),
    ("scalar", None, None, predicates.is_scalar),
    ("numeric", "num", None, predicates.is_numeric),
    ("integer", "int", "numeric", predicates.is_integer),
    ("float", "double", "numeric", predicates.is_float),
    ("string", "str", None, predicates.is_string),
    ("alpha", None, None, predicates.is_alpha),
    ("alphanumeric", "alnum", None, predicates.is_alphanumeric),
    ("array", "arr", None, predicates.is_array),
    ("object", "obj", None, predicates.is_object),
    ("callable", None, None, predicates.is_callable),
    ("closure", None, None, predicates.is_closure),
    ("email", None, "string", predicates.is_email),
    ("ip", None, None, predicates.is_ip),
    ("ipv4", None, None, predicates.is_ipv4),
    ("ipv6", None, None, predicates.is_ipv6),
    ("date", "datetime", None, predicates.is_datetime),
)


class TypeRegistry:
    """Case-insensitive lookup of type descriptors by name or alias."""

    def __init__(self) -> None:
        self._types: Collection[TypeDescriptor] = Collection()

    @classmethod
    def with_builtins(cls) -> TypeRegistry:
        """Create a registry pre-populated with the built-in catalog."""
        registry = cls()
        for name, alias, extends, predicate in BUILTIN_TYPES:
            registry.register(name, predicate, extends=extends, alias=alias)
        return registry

    def register(
        self,
        name: str,
        predicate: TypePredicate | None,
        *,
        extends: str | None = None,
        alias: str | None = None,
    ) -> TypeDescriptor:
        """Register *name* (and optionally *alias*) for *predicate*.

        Raises:
            DuplicateTypeError: *name* is already registered.
            MissingValidatorError: *predicate* is None.
            UnknownParentTypeError: *extends* names an unregistered type.
            NonCallableValidatorError: *predicate* is not callable.
            DuplicateAliasError: *alias* is already registered.
        """
        key = name.lower()
        if self._types.has(key):
            raise DuplicateTypeError(name)
        if predicate is None:
            raise MissingValidatorError(name)
        parent = extends.lower() if extends else None
        if parent is not None and not self._types.has(parent):
            raise UnknownParentTypeError(name, extends or "")
        if not callable(predicate):
            raise NonCallableValidatorError(name)
        alias_key = alias.lower() if alias else None
        if alias_key is not None and self._types.has(alias_key):
            raise DuplicateAliasError(alias or "")

        # Extending an alias links to the canonical parent.
        if parent is not None:
            parent = self._types.get(parent).name

        descriptor = TypeDescriptor(name=key, predicate=predicate, extends=parent, alias=alias_key)
        self._types.set(key, descriptor)
        if alias_key is not None:
            self._types.set(alias_key, descriptor)
        logger.debug("Registered type %s (alias=%s, extends=%s)", key, alias_key, parent)
        return descriptor

    def add_type(self, name: str, descriptor: Mapping[str, Any]) -> TypeDescriptor:
        """Register a type from a ``{"validator", "extends", "alias"}`` mapping."""
        return self.register(
            name,
            descriptor.get("validator"),
            extends=descriptor.get("extends"),
            alias=descriptor.get("alias"),
        )

    def has(self, name: str) -> bool:
        return self._types.has(name.lower())

    def resolve(self, name: str) -> TypeDescriptor:
        """Return the descriptor for *name* or *alias*, in any letter case.

        Raises:
            UnknownTypeError: *name* is not registered.
        """
        descriptor = self._types.get(name.lower())
        if descriptor is None:
            raise UnknownTypeError(name)
        return descriptor

    def lineage(self, name: str) -> list[TypeDescriptor]:
        """Return descriptors from the root ancestor down to *name* itself."""
        chain: list[TypeDescriptor] = []
        descriptor: TypeDescriptor | None = self.resolve(name)
        while descriptor is not None:
            chain.append(descriptor)
            descriptor = self._types.get(descriptor.extends) if descriptor.extends else None
        chain.reverse()
        return chain

    def names(self) -> list[str]:
        """Canonical type names in registration order (aliases excluded)."""
        return [key for key, d in self._types.items() if d.name == key]

    def describe(self) -> Iterator[TypeDescriptor]:
        """Yield each registered descriptor once, in registration order."""
        for key in self.names():
            yield self._types.get(key)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self.names())
