"""Validator — rule-driven validation of named values.

One Validator instance is one validation session::

    v = Validator(
        {"email": "john.doe@example.org", "age": 42},
        {"email": "email", "age": {"type": "int", ">=": 18}},
    )
    v.validate()      # True
    v.get_errors()    # {}

Lifecycle: ``idle -> validating -> completed``. ``validate()`` may be called
again once completed; by default that clears earlier errors first (see
``ValidatorConfig.accumulate_errors``).

Configuration errors (malformed rule, unknown type, bad registration,
conflicting constraints) raise and abort the pass. Values that fail
validation never raise; their messages accumulate in the error sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from noname_common.config.models import ValidatorConfig
from noname_common.domain.collection import Collection
from noname_common.domain.error_sink import ErrorSink
from noname_common.domain.exceptions import ValidatorStateError
from noname_common.domain.registry import TypeDescriptor, TypeRegistry
from noname_common.domain.rules import Rule, normalize_rule
from noname_common.services.telemetry import trace_rule

logger = logging.getLogger(__name__)

ARRAY_SUFFIX = "[]"


class ValidatorState(StrEnum):
    """Session lifecycle of a Validator."""

    IDLE = "idle"
    VALIDATING = "validating"
    COMPLETED = "completed"


STATE_TRANSITIONS: dict[str, list[str]] = {
    "idle": ["validating"],
    "validating": ["completed"],
    "completed": ["validating"],
}


@dataclass(frozen=True)
class ValidationReport:
    """Snapshot of a session's outcome."""

    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)


def _printable(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def failure_message(value: Any, type_name: str) -> str:
    """Message recorded when *value* is rejected by *type_name*."""
    if _printable(value):
        return f"Value ({value}) failed to validate as '{type_name}'"
    return f"Value failed to validate as '{type_name}'"


def _as_sequence(value: Any) -> list[Any]:
    """Coerce *value* to the list of elements checked by a ``type[]`` rule."""
    if isinstance(value, Collection):
        return value.values()
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    if value is None:
        return []
    return [value]


class Validator:
    """Validates a set of named values against a set of named rules.

    Args:
        values: Initial field values.
        rules: Initial field rules (type-name string, callable, or mapping).
        config: Session behavior; defaults to :class:`ValidatorConfig`.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        rules: Mapping[str, Any] | None = None,
        *,
        config: ValidatorConfig | None = None,
    ) -> None:
        self.config = config or ValidatorConfig()
        self._values: Collection[Any] = Collection(values)
        self._rules: Collection[Any] = Collection(rules)
        self._errors = ErrorSink()
        self._types = TypeRegistry.with_builtins()
        self._state = ValidatorState.IDLE

    # --- Convenience entry point ---

    @classmethod
    def check(cls, type_name: str, value: Any, rule: Mapping[str, Any] | None = None) -> bool:
        """Check a single ad hoc *value* against *type_name* with a throwaway engine.

        *rule* holds optional constraints (e.g. ``{"min_length": 3}``).
        """
        constraints = dict(rule or {})
        constraints["type"] = type_name
        return cls().validate_type(type_name, value, normalize_rule(constraints, "value"))

    # --- Values / rules / types ---

    @property
    def state(self) -> ValidatorState:
        return self._state

    @property
    def types(self) -> TypeRegistry:
        return self._types

    def add_value(self, name: str, value: Any) -> None:
        self._values.set(name, value)

    def add_values(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            self._values.set(name, value)

    def values(self) -> dict[str, Any]:
        return self._values.to_dict()

    def add_rule(self, name: str, rule: Any) -> None:
        self._rules.set(name, rule)

    def add_rules(self, rules: Mapping[str, Any]) -> None:
        for name, rule in rules.items():
            self._rules.set(name, rule)

    def rules(self) -> dict[str, Any]:
        return self._rules.to_dict()

    def add_type(self, name: str, descriptor: Mapping[str, Any]) -> TypeDescriptor:
        """Register a custom type on this instance only.

        *descriptor* keys: ``validator`` (``(value, rule) -> bool``, required),
        ``extends`` (parent type name), ``alias``.
        """
        return self._types.add_type(name, descriptor)

    # --- Errors ---

    def set_error(self, name: str, message: str) -> None:
        self._errors.add(name, message)

    def get_errors(self) -> dict[str, list[str]]:
        return self._errors.to_dict()

    def errors_for(self, name: str) -> list[str]:
        return self._errors.messages(name)

    def has_errors(self) -> bool:
        return self._errors.has_errors()

    def report(self) -> ValidationReport:
        return ValidationReport(valid=not self.has_errors(), errors=self.get_errors())

    # --- Validation ---

    def _transition(self, target: ValidatorState) -> None:
        if target not in STATE_TRANSITIONS[self._state]:
            msg = f"Cannot move validator from '{self._state}' to '{target}'"
            raise ValidatorStateError(msg)
        self._state = target

    def _has_value(self, name: str) -> bool:
        if self.config.presence == "exists":
            return self._values.has(name)
        return bool(self._values.get(name))

    def validate(self) -> bool:
        """Validate every rule against its value, in rule insertion order.

        Returns True iff no errors are recorded once the pass completes.

        Raises:
            ConfigurationError: a rule or type is malformed. The pass is
                aborted and the validator returns to ``completed``.
            ValidatorStateError: called while a pass is already running.
        """
        self._transition(ValidatorState.VALIDATING)
        try:
            if not self.config.accumulate_errors:
                self._errors.clear()
            for name, raw_rule in self._rules:
                rule = normalize_rule(raw_rule, name)
                with trace_rule(name, rule.type) as span:
                    before = self._errors.count(name)
                    self._validate_field(name, rule)
                    if span is not None and self._errors.count(name) > before:
                        span.annotate("errors", self._errors.count(name) - before)
        finally:
            self._state = ValidatorState.COMPLETED

        logger.debug(
            "Validated %d rule(s): %d field(s) with errors",
            self._rules.count(),
            self._errors.count(),
        )
        return not self.has_errors()

    def _validate_field(self, name: str, rule: Rule) -> None:
        if not self._has_value(name):
            if rule.required:
                self.set_error(name, f"Value for '{name}' is required.")
            logger.debug("Field %r has no value (required=%s)", name, rule.required)
            return

        value = self._values.get(name)
        if not self.validate_type(rule.type, value, rule):
            return

        if rule.validator is not None:
            self._run_custom_validator(name, value, rule, rule.validator)

    def _run_custom_validator(
        self,
        name: str,
        value: Any,
        rule: Rule,
        validator: Callable[[Any, Rule, Validator], Any],
    ) -> None:
        before = self._errors.count(name)
        if validator(value, rule, self):
            return
        if self._errors.count(name) == before:
            self.set_error(name, f"Value for '{name}' failed custom validation.")

    def validate_type(self, type_name: str, value: Any, rule: Rule | None = None) -> bool:
        """Check *value* against *type_name* and its ancestors.

        A ``type[]`` name checks every element of *value* independently.
        Each failing element (or the single value) records one message under
        ``rule.name``, naming the first type in the lineage that rejected it.
        Ancestors are a side-check: the type's own predicate still runs.

        Raises:
            UnknownTypeError: *type_name* (minus ``[]``) is not registered.
        """
        rule = rule or normalize_rule(type_name)
        base = type_name.lower()
        array_mode = base.endswith(ARRAY_SUFFIX)
        if array_mode:
            base = base[: -len(ARRAY_SUFFIX)]

        lineage = self._types.lineage(base)
        items = _as_sequence(value) if array_mode else [value]

        passed = True
        for item in items:
            rejected_by: str | None = None
            for descriptor in lineage:
                if not descriptor.predicate(item, rule):
                    rejected_by = rejected_by or descriptor.name
            if rejected_by is not None:
                passed = False
                label = base if rejected_by == lineage[-1].name else rejected_by
                self.set_error(rule.name, failure_message(item, label))
        return passed
