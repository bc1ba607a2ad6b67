"""Command: emit the wrangler.toml routes fragment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from routectl.commands._base import RouteCommand
from routectl.commands._options import domain_options, merge_domain_config

if TYPE_CHECKING:
    from routectl.commands._context import AppContext


@click.command(
    cls=RouteCommand,
    examples="""\
  routectl build
  routectl build > routes.toml
  routectl build --env production --env staging
  routectl build --domain production=api.example.com --zone-id <32-hex>
  routectl build --no-comments --no-zone-id""",
)
@domain_options
@click.option(
    "--comments/--no-comments",
    "include_comments",
    default=None,
    help="Include banner and section comments (default from [output]).",
)
@click.option(
    "--with-zone-id/--no-zone-id",
    "include_zone_id",
    default=None,
    help="Attach zone_id to every route (default from [output]).",
)
@click.pass_obj
def build(
    app: AppContext,
    environments: tuple[str, ...],
    domains: dict[str, str],
    zone_id: str | None,
    api_base_path: str | None,
    include_comments: bool | None,
    include_zone_id: bool | None,
) -> None:
    """Build the combined routes section for all environments."""
    from routectl.services.routes import RouteService

    base = app.components.config.service.to_domain_config()
    config = merge_domain_config(base, domains, zone_id, api_base_path)
    app.emit(
        RouteService(app.components).build_routes(
            config,
            environments or None,
            include_comments=include_comments,
            include_zone_id=include_zone_id,
        )
    )
