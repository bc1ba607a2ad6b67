"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, routectl.toml only contains
overrides. A fresh project needs only [service] domains and zone_id.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from routectl.domain.types import DomainConfig


def _default_path_prefixes() -> dict[str, str]:
    return {
        "production": "/api",
        "staging": "/staging-api",
        "development": "/dev-api",
    }


# --- routectl.toml sections ---


class RoutingConfig(BaseModel):
    """[routing] section: the routing policy.

    ``workers_domain`` is the platform's reserved wildcard suffix: domains
    containing it get no custom routes. ``default_environment`` supplies
    the path prefix for environments missing from ``path_prefixes``.
    """

    model_config = {"frozen": True}

    workers_domain: str = "workers.dev"
    default_environment: str = "production"
    path_prefixes: dict[str, str] = Field(default_factory=_default_path_prefixes)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    include_comments: bool = True
    include_zone_id: bool = True


class ServiceConfig(BaseModel):
    """[service] section: one worker's domains and zone."""

    model_config = {"frozen": True}

    name: str | None = None
    zone_id: str | None = None
    api_base_path: str | None = None
    domains: dict[str, str | None] = Field(default_factory=dict)

    def to_domain_config(self) -> DomainConfig:
        return DomainConfig(
            domains=self.domains,
            zone_id=self.zone_id,
            api_base_path=self.api_base_path,
        )


class RouteConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
