"""Command: structural check of a routes TOML file."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from routectl.commands._base import RouteCommand

if TYPE_CHECKING:
    from routectl.commands._context import AppContext


@click.command(
    cls=RouteCommand,
    examples="""\
  routectl validate wrangler.toml
  routectl build | routectl validate -
  routectl --json validate routes.toml""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_obj
def validate(app: AppContext, source: TextIO) -> None:
    """Check SOURCE (a file or - for stdin) for route TOML syntax errors."""
    from routectl.services.routes import RouteService

    name = getattr(source, "name", "<stdin>")
    app.emit(RouteService(app.components).validate(source.read(), source=name))
