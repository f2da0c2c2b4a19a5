"""Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; the caller extracts
the text via ``get_output(console)``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from selectorctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from selectorctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the selector."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    selector = result.data.get("selector")
    if selector is not None:
        return str(selector)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="sel.key")
    if key == "selector":
        v = Text(repr(value), style="sel.selector")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("OK", style="sel.ok")
    op = Text(f"  {result.op}", style="sel.op")
    console.print(label, op, end="")
    console.print()
    for key, value in result.data.items():
        # Full document only in --json and --verbose output.
        if key == "document" and not verbose:
            continue
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sel.error")
    op = Text(f"  {result.op}", style="sel.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    console.print(f"{prefix}{span.get('name', '?')} {span.get('duration_ms', 0.0):.3f}ms")
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)
