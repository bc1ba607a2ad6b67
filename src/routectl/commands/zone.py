"""Command: resolve and validate the zone id for a domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from routectl.commands._base import RouteCommand

if TYPE_CHECKING:
    from routectl.commands._context import AppContext


@click.command(
    cls=RouteCommand,
    examples="""\
  routectl zone api.example.com
  routectl zone api.example.com --zone-id 0123456789abcdef0123456789abcdef""",
)
@click.argument("domain")
@click.option("--zone-id", default=None, help="Zone id to check instead of [service] zone_id.")
@click.pass_obj
def zone(app: AppContext, domain: str, zone_id: str | None) -> None:
    """Resolve the zone id used for DOMAIN's routes."""
    from routectl.services.routes import RouteService

    app.emit(RouteService(app.components).resolve_zone(domain, zone_id))
