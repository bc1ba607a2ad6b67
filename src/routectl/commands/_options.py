"""Shared domain-input options for map and build.

``--domain ENV=HOST`` entries override ``[service.domains]`` per
environment; ``--zone-id`` and ``--api-base-path`` override their
``[service]`` counterparts.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

from routectl.domain.types import DomainConfig

F = TypeVar("F", bound=Callable[..., Any])


def _parse_domains(
    _ctx: click.Context,
    _param: click.Parameter,
    value: tuple[str, ...],
) -> dict[str, str]:
    domains: dict[str, str] = {}
    for item in value:
        env, sep, host = item.partition("=")
        if not sep or not env.strip():
            msg = f"expected ENV=HOST, got '{item}'"
            raise click.BadParameter(msg)
        domains[env.strip()] = host.strip()
    return domains


def domain_options(func: F) -> F:
    """Attach --env, --domain, --zone-id and --api-base-path to a command."""
    func = click.option(
        "--api-base-path",
        default=None,
        help="Explicit path prefix for fallback routes (e.g. /v1).",
    )(func)
    func = click.option("--zone-id", default=None, help="Zone identifier for route entries.")(func)
    func = click.option(
        "--domain",
        "domains",
        multiple=True,
        callback=_parse_domains,
        metavar="ENV=HOST",
        help="Domain for an environment. Repeatable.",
    )(func)
    func = click.option(
        "--env",
        "environments",
        multiple=True,
        help="Environment to include. Repeatable; defaults to all.",
    )(func)
    return func


def merge_domain_config(
    base: DomainConfig,
    domains: dict[str, str],
    zone_id: str | None,
    api_base_path: str | None,
) -> DomainConfig:
    """Overlay CLI values on the configured ``[service]`` domain config."""
    updates: dict[str, Any] = {}
    if domains:
        updates["domains"] = {**base.domains, **domains}
    if zone_id is not None:
        updates["zone_id"] = zone_id
    if api_base_path is not None:
        updates["api_base_path"] = api_base_path
    if not updates:
        return base
    return base.model_copy(update=updates)
