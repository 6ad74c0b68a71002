"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, noname.toml only contains overrides.
An empty file (or no file at all) reproduces the library defaults.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

PresenceMode = Literal["truthy", "exists"]


class ValidatorConfig(BaseModel):
    """[validator] section.

    Attributes:
        presence: How ``validate()`` decides whether a field has a value.
            ``"truthy"`` treats present-but-falsy values (``0``, ``""``,
            ``False``, empty containers) as absent; ``"exists"`` only checks
            that the key was supplied.
        accumulate_errors: Keep errors from earlier ``validate()`` calls
            instead of clearing them on entry.
    """

    model_config = {"frozen": True}

    presence: PresenceMode = "truthy"
    accumulate_errors: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = 120
    color: bool = True


class NonameConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
