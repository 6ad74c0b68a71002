"""Exception taxonomy for structural misuse of the API.

Two families:
- Configuration errors abort ``Validator.validate()`` immediately.
- Misuse errors (bad operator, re-entrant validation) signal caller bugs.

A value that merely fails to validate never raises; it is recorded in the
error sink instead.

Every exception carries a stable ``code`` so the service layer can surface
it inside a ``ServiceError`` without string matching.
"""

from __future__ import annotations


class NonameError(Exception):
    """Base class for all library errors."""

    code = "ERROR"


class ConfigurationError(NonameError):
    """A rule set, type registration, or constraint combination is malformed."""

    code = "CONFIGURATION_ERROR"


class InvalidRuleFormatError(ConfigurationError):
    """A rule could not be normalized into a record with a ``type``."""

    code = "INVALID_RULE_FORMAT"

    def __init__(self, name: str) -> None:
        super().__init__(f"Rule format for '{name}' is invalid.")
        self.name = name


class UnknownTypeError(ConfigurationError):
    code = "UNKNOWN_TYPE"

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type '{type_name}' is not a valid rule type")
        self.type_name = type_name


class DuplicateTypeError(ConfigurationError):
    code = "DUPLICATE_TYPE"

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type '{type_name}' is already registered")
        self.type_name = type_name


class DuplicateAliasError(ConfigurationError):
    code = "DUPLICATE_ALIAS"

    def __init__(self, alias: str) -> None:
        super().__init__(f"Alias '{alias}' is already registered")
        self.alias = alias


class MissingValidatorError(ConfigurationError):
    code = "MISSING_VALIDATOR"

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type '{type_name}' must define a validator")
        self.type_name = type_name


class UnknownParentTypeError(ConfigurationError):
    code = "UNKNOWN_PARENT_TYPE"

    def __init__(self, type_name: str, parent: str) -> None:
        super().__init__(f"Type '{type_name}' extends unknown type '{parent}'")
        self.type_name = type_name
        self.parent = parent


class NonCallableValidatorError(ConfigurationError):
    code = "NON_CALLABLE_VALIDATOR"

    def __init__(self, name: str) -> None:
        super().__init__(f"Validator for '{name}' is not callable")
        self.name = name


class ConstraintConflictError(ConfigurationError):
    """Two constraints on the same rule cannot both hold."""

    code = "CONSTRAINT_CONFLICT"


class InvalidConstraintError(ConfigurationError):
    """A constraint value has the wrong shape, e.g. a string where a bound is expected."""

    code = "INVALID_CONSTRAINT"

    def __init__(self, name: str, key: str, value: object) -> None:
        super().__init__(f"Constraint '{key}' for '{name}' is invalid: {value!r}")
        self.name = name
        self.key = key
        self.value = value


class InvalidOperatorError(NonameError, ValueError):
    """Unrecognized comparison operator passed to ``Collection.is_``."""

    code = "INVALID_OPERATOR"

    def __init__(self, operator: object) -> None:
        super().__init__(f"Invalid value supplied for operator: {operator!r}")
        self.operator = operator


class ValidatorStateError(NonameError, RuntimeError):
    """``validate()`` was entered while a validation pass was running."""

    code = "INVALID_STATE"
