"""Command: show route patterns per environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from routectl.commands._base import RouteCommand
from routectl.commands._options import domain_options, merge_domain_config

if TYPE_CHECKING:
    from routectl.commands._context import AppContext


@click.command(
    "map",
    cls=RouteCommand,
    examples="""\
  routectl map
  routectl map --env production
  routectl map --domain production=api.example.com --domain staging=staging-api.example.com
  routectl map --domain production=example.com --api-base-path /v1
  routectl --json map""",
)
@domain_options
@click.pass_obj
def map_cmd(
    app: AppContext,
    environments: tuple[str, ...],
    domains: dict[str, str],
    zone_id: str | None,
    api_base_path: str | None,
) -> None:
    """Map configured domains to route patterns, most specific first."""
    from routectl.services.routes import RouteService

    base = app.components.config.service.to_domain_config()
    config = merge_domain_config(base, domains, zone_id, api_base_path)
    app.emit(RouteService(app.components).map_routes(config, environments or None))
