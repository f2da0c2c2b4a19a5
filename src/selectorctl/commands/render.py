"""Command: render a JSON selector document."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from selectorctl.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorctl.commands._context import AppContext


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorctl render selector.json
  selectorctl build element=a class=nav --json | jq .data.document | selectorctl render -""",
)
@click.argument("document", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def render(app: AppContext, document: TextIO) -> None:
    """Render the selector described by DOCUMENT (a path, or - for stdin)."""
    app.emit(app.service.render_document(document.read()))
