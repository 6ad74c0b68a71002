"""Typed payload contracts for ServiceResult.data.

Payloads are validated before they leave the service layer so key drift
(for example ``errors`` vs ``messages``) fails fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ValidateResultData(BaseModel):
    """Payload contract for ``ValidationService.validate_files``."""

    valid: bool
    checked: int
    error_count: int
    errors: dict[str, list[str]] = Field(default_factory=dict)


class TypeRow(BaseModel):
    """One registered type."""

    name: str
    alias: str | None = None
    extends: str | None = None


class TypesResultData(BaseModel):
    """Payload contract for ``ValidationService.list_types``."""

    count: int
    items: list[TypeRow]


class CheckResultData(BaseModel):
    """Payload contract for ``ValidationService.check_value``."""

    type: str
    value: Any = None
    valid: bool
    errors: list[str] = Field(default_factory=list)
