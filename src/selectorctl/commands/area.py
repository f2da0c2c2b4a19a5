"""Command: rectangle area."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selectorctl.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorctl.commands._context import AppContext


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorctl area 10 20""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def area(app: AppContext, width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    app.emit(app.service.area(width, height))
