"""ValidationService — file-driven validation, type listing, one-off checks.

Wraps :class:`Validator` for the CLI. Configuration problems (bad rule,
unknown type, unreadable document) come back as ``ok=False`` results with
a stable error code instead of propagating.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from noname_common.config.models import NonameConfig
from noname_common.domain.exceptions import NonameError
from noname_common.domain.rules import normalize_rule
from noname_common.infrastructure.loaders import DocumentError, load_document
from noname_common.services.contracts import (
    CheckResultData,
    TypesResultData,
    ValidateResultData,
    dump_validated,
)
from noname_common.services.result import ServiceError, ServiceResult
from noname_common.services.telemetry import get_current_span, trace_span, traced
from noname_common.services.validator import Validator

logger = logging.getLogger(__name__)

INVALID_INPUT = "INVALID_INPUT"
VALIDATION_FAILED = "VALIDATION_FAILED"


class ValidationService:
    """Runs validation sessions configured from a :class:`NonameConfig`."""

    def __init__(self, config: NonameConfig | None = None) -> None:
        self._config = config or NonameConfig()

    @property
    def config(self) -> NonameConfig:
        return self._config

    def _new_validator(self, values: Mapping[str, Any] | None = None) -> Validator:
        return Validator(values, config=self._config.validator)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def validate_files(self, values_path: Path, rules_path: Path) -> ServiceResult:
        """Validate the values document against the rules document."""
        op = "validate"
        try:
            with trace_span("load_documents"):
                values = load_document(values_path)
                rules = load_document(rules_path)
        except DocumentError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=INVALID_INPUT,
                    message=str(exc),
                    detail={"path": str(exc.path)},
                ),
            )
        return self.validate_mapping(values, rules, op=op)

    def validate_mapping(
        self,
        values: Mapping[str, Any],
        rules: Mapping[str, Any],
        *,
        op: str = "validate",
    ) -> ServiceResult:
        """Validate in-memory *values* against *rules*.

        Values that no rule mentions are reported as warnings.
        """
        validator = self._new_validator(values)
        validator.add_rules(rules)
        try:
            with trace_span("validate"):
                valid = validator.validate()
        except NonameError as exc:
            logger.debug("Validation aborted: %s", exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc)),
            )

        errors = validator.get_errors()
        warnings = [
            f"Value '{name}' has no rule and was not checked"
            for name in values
            if name not in rules
        ]
        span = get_current_span()
        if span is not None:
            span.annotate("rules", len(rules))
            span.annotate("fields_with_errors", len(errors))

        data = dump_validated(
            ValidateResultData,
            {
                "valid": valid,
                "checked": len(rules),
                "error_count": sum(len(m) for m in errors.values()),
                "errors": errors,
            },
        )
        if valid:
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=warnings,
            error=ServiceError(
                code=VALIDATION_FAILED,
                message=f"{len(errors)} field(s) failed validation",
                detail={"errors": errors},
            ),
        )

    @traced
    def list_types(self) -> ServiceResult:
        """List the built-in type catalog with aliases and parents."""
        rows = [
            {"name": d.name, "alias": d.alias, "extends": d.extends}
            for d in self._new_validator().types.describe()
        ]
        return ServiceResult(
            ok=True,
            op="types",
            data=dump_validated(TypesResultData, {"count": len(rows), "items": rows}),
        )

    @traced
    def check_value(
        self,
        type_name: str,
        value: Any,
        constraints: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Check a single *value* against *type_name* plus optional *constraints*."""
        op = "check"
        validator = self._new_validator()
        try:
            rule = normalize_rule({**(constraints or {}), "type": type_name}, "value")
            valid = validator.validate_type(type_name, value, rule)
        except NonameError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc)),
            )

        messages = validator.errors_for("value")
        data = dump_validated(
            CheckResultData,
            {"type": type_name, "value": value, "valid": valid, "errors": messages},
        )
        if valid:
            return ServiceResult(ok=True, op=op, data=data)
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            error=ServiceError(
                code=VALIDATION_FAILED,
                message=messages[0] if messages else f"Value failed to validate as '{type_name}'",
            ),
        )
