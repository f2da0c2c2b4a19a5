"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json).  ``--quiet`` prints only the selector, which makes the
output usable in shell pipelines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selectorctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from selectorctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    json_indent: int = 2


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, which takes precedence over the
    default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.json_indent or None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
