"""Route data model: domain configuration in, route mappings out.

All models are frozen. Nothing here survives the call that produced it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

PRODUCTION = "production"
STAGING = "staging"
DEVELOPMENT = "development"

# Fixed emission order for combined route configs.
ENVIRONMENTS: tuple[str, ...] = (PRODUCTION, STAGING, DEVELOPMENT)

# Environments whose routes live under ``[env.<name>]`` in wrangler.toml.
NESTED_ENVIRONMENTS: frozenset[str] = frozenset({STAGING, DEVELOPMENT})


class DomainConfig(BaseModel):
    """Domain assignments for one logical service.

    Attributes:
        domains: Environment name to fully-qualified domain. Keys are
            open-ended; empty or missing values mean "no custom domain".
        zone_id: Opaque zone identifier, passed through to route entries.
        api_base_path: Explicit path prefix that overrides any derived one.
    """

    model_config = {"frozen": True}

    domains: dict[str, str | None] = Field(default_factory=dict)
    zone_id: str | None = None
    api_base_path: str | None = None

    def domain_for(self, environment: str) -> str | None:
        """Return the stripped domain for *environment*, or None when unset."""
        domain = self.domains.get(environment)
        if domain is None:
            return None
        return domain.strip() or None


class RouteMappingResult(BaseModel):
    """Ordered route patterns for one environment, most specific first."""

    model_config = {"frozen": True}

    patterns: tuple[str, ...] = ()
    zone_id: str | None = None
    environment: str


class BuildOptions(BaseModel):
    """Formatting options for route sections."""

    model_config = {"frozen": True}

    zone_id: str | None = None
    include_comments: bool = True
    domain: str | None = None
