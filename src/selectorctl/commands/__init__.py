"""Subcommand modules for selectorctl.

Provides register_commands() which uses deferred imports to keep
``selectorctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from selectorctl.commands.area import area
    from selectorctl.commands.build import build
    from selectorctl.commands.combine import combine
    from selectorctl.commands.render import render

    cli.add_command(build)
    cli.add_command(combine)
    cli.add_command(render)
    cli.add_command(area)
