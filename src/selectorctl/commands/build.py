"""Command: build a compound selector from ordered parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selectorctl.commands._base import SelectorCommand

if TYPE_CHECKING:
    from selectorctl.commands._context import AppContext


@click.command(
    cls=SelectorCommand,
    examples="""\
  selectorctl build element=a id=main class=x
  selectorctl build id=main class=container class=editable
  selectorctl build element=a 'attr=href$=".png"' pseudo-class=focus
  selectorctl -q build element=p pseudo-element=first-line""",
)
@click.argument("parts", nargs=-1)
@click.pass_obj
def build(app: AppContext, parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS given as category=value, in order.

    Categories: element, id, class, attribute (attr), pseudo-class,
    pseudo-element.
    """
    app.emit(app.service.build(list(parts)))
