"""Rule records and normalization.

A caller may describe a field's rule three ways::

    "email"                                    # bare type name
    lambda value, rule, validator: value > 3   # custom predicate
    {"type": "string", "min_length": 2}        # structured record

``normalize_rule`` resolves each form once into a :class:`Rule`, tagging
where it came from via :class:`RuleKind`. Everything in a structured record
other than ``type``/``required``/``name``/``validator`` is a constraint and
is carried through untouched for the type predicates to read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any

from noname_common.domain.exceptions import (
    InvalidRuleFormatError,
    NonCallableValidatorError,
)

logger = logging.getLogger(__name__)

# Called as validator(value, rule, engine).
RuleValidator = Callable[[Any, "Rule", Any], Any]

_RESERVED_KEYS = frozenset({"type", "required", "name", "validator"})


class RuleKind(StrEnum):
    """Origin of a normalized rule."""

    TYPE_NAME = "type_name"
    PREDICATE = "predicate"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class Rule:
    """Canonical rule record consumed by the validator and type predicates."""

    type: str
    name: str = ""
    required: bool = True
    validator: RuleValidator | None = None
    constraints: Mapping[str, Any] = field(default_factory=dict)
    kind: RuleKind = RuleKind.STRUCTURED

    def get(self, key: str, default: Any = None) -> Any:
        """Read a constraint value, falling back to *default*."""
        return self.constraints.get(key, default)

    def has(self, key: str) -> bool:
        return key in self.constraints

    def named(self, name: str) -> Rule:
        """Return a copy bound to the field *name*."""
        return replace(self, name=name)

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping view: reserved fields plus constraints."""
        data: dict[str, Any] = {"type": self.type, "required": self.required, "name": self.name}
        if self.validator is not None:
            data["validator"] = self.validator
        data.update(self.constraints)
        return data


def normalize_rule(raw: Any, name: str = "") -> Rule:
    """Convert a raw rule specification into a :class:`Rule` bound to *name*.

    Raises:
        InvalidRuleFormatError: *raw* is none of the accepted forms, or a
            structured record has no usable ``type``.
        NonCallableValidatorError: a structured record's ``validator`` is
            present but not callable.
    """
    if isinstance(raw, Rule):
        return raw.named(name) if name else raw

    if isinstance(raw, str):
        if not raw:
            raise InvalidRuleFormatError(name)
        return Rule(type=raw, name=name, kind=RuleKind.TYPE_NAME)

    if callable(raw):
        return Rule(type="any", name=name, validator=raw, kind=RuleKind.PREDICATE)

    if not isinstance(raw, Mapping):
        raise InvalidRuleFormatError(name)

    type_name = raw.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise InvalidRuleFormatError(name)

    validator = raw.get("validator")
    if validator is not None and not callable(validator):
        raise NonCallableValidatorError(name)

    required = raw.get("required")
    constraints = {k: v for k, v in raw.items() if k not in _RESERVED_KEYS}
    rule = Rule(
        type=type_name,
        name=name,
        required=True if required is None else bool(required),
        validator=validator,
        constraints=constraints,
        kind=RuleKind.STRUCTURED,
    )
    logger.debug(
        "Normalized rule for %r: type=%s constraints=%s", name, type_name, sorted(constraints)
    )
    return rule
