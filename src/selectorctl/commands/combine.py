"""Command: join two compound selectors with a combinator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selectorctl.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorctl.commands._context import AppContext


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorctl combine -l element=div -c + -r element=table
  selectorctl combine -l element=ul -l class=menu -c child -r element=li
  selectorctl combine -l element=h1 -r element=p   # [render] default_combinator""",
)
@click.option(
    "-l", "--left", "left", multiple=True, metavar="PART", help="Left selector part (repeatable)."
)
@click.option(
    "-c",
    "--combinator",
    default=None,
    help="Combinator token (' ', '>', '+', '~') or name (descendant, child, ...).",
)
@click.option(
    "-r", "--right", "right", multiple=True, metavar="PART", help="Right selector part (repeatable)."
)
@click.pass_obj
def combine(
    app: AppContext,
    left: tuple[str, ...],
    combinator: str | None,
    right: tuple[str, ...],
) -> None:
    """Combine a LEFT and RIGHT selector with a combinator."""
    app.emit(app.service.combine(list(left), combinator, list(right)))
