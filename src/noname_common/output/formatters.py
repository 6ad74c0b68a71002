"""Output mode dispatch: JSON, quiet, or Rich-rendered text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from noname_common.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from noname_common.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be printed."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None
    color: bool = True


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    *settings* wins over the bare *json_output* flag when both are given.
    JSON beats quiet, and quiet beats the Rich renderers.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        width=settings.width,
        no_color=not settings.color,
    )
