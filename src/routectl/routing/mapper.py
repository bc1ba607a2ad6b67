"""RouteMapper: domain assignments to ordered route patterns.

Patterns are ordered most specific first:

- Subdomain (``api.example.com``)::

      api.example.com/*
      example.com/api/*        # root-domain fallback, prefix from first label

- Root domain (``example.com``)::

      example.com/api/*        # prefix from the policy for the environment

An explicit ``api_base_path`` replaces the derived or default prefix in
both cases. Domains inside the platform's wildcard space (``*.workers.dev``)
and unassigned environments produce no patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from routectl.domain.errors import ConfigurationError, ValidationError
from routectl.domain.hostnames import is_subdomain, root_domain, subdomain_prefix
from routectl.domain.types import DomainConfig, RouteMappingResult
from routectl.domain.zones import ZONE_ID_FORMAT, is_valid_zone_id
from routectl.routing.policy import ConfigRoutingPolicy, RoutingPolicy

logger = logging.getLogger(__name__)

WILDCARD = "/*"

# Keys accepted for the zone id in core service inputs.
ZONE_ID_KEYS: tuple[str, ...] = ("cloudflare_zone_id", "cloudflareZoneId")


class RouteMapper:
    """Translate one environment's domain into route patterns.

    Stateless apart from the policy it reads; a single instance can be
    shared by any number of callers.
    """

    def __init__(self, policy: RoutingPolicy | None = None) -> None:
        self._policy: RoutingPolicy = policy or ConfigRoutingPolicy()

    def map_domain_to_routes(
        self,
        domain_config: DomainConfig,
        environment: str,
    ) -> RouteMappingResult:
        """Map *environment*'s domain in *domain_config* to route patterns.

        Never fails on unrecognized environment names; they follow the same
        subdomain/root-domain rules with the policy's fallback prefix.
        """
        domain = domain_config.domain_for(environment)
        patterns: tuple[str, ...] = ()

        if domain is None:
            logger.debug("No domain assigned for %s", environment)
        elif self.is_wildcard_domain(domain):
            logger.debug("Skipping %s: %s is a platform wildcard domain", environment, domain)
        else:
            patterns = self._patterns_for(domain, environment, domain_config.api_base_path)
            logger.debug("Mapped %s (%s) to %d route(s)", domain, environment, len(patterns))

        return RouteMappingResult(
            patterns=patterns,
            zone_id=domain_config.zone_id,
            environment=environment,
        )

    def is_wildcard_domain(self, domain: str) -> bool:
        """True when *domain* lives under the reserved wildcard suffix."""
        suffix = self._policy.reserved_wildcard_suffix().lower().lstrip(".")
        if not suffix:
            return False
        host = domain.lower()
        return host == suffix or host.endswith(f".{suffix}")

    def _patterns_for(
        self,
        domain: str,
        environment: str,
        api_base_path: str | None,
    ) -> tuple[str, ...]:
        if is_subdomain(domain):
            prefix = api_base_path or subdomain_prefix(domain)
            return (
                f"{domain}{WILDCARD}",
                f"{root_domain(domain)}{prefix}{WILDCARD}",
            )

        prefix = api_base_path or self._policy.default_path_prefix(environment)
        return (f"{domain}{prefix}{WILDCARD}",)

    def get_zone_id_for_domain(self, domain: str, core_inputs: Mapping[str, Any] | None) -> str:
        """Return the validated zone id for *domain* from *core_inputs*.

        Raises:
            ConfigurationError: No zone id was supplied.
            ValidationError: The zone id is not 32 lowercase hex characters.
        """
        zone_id = None
        if core_inputs:
            zone_id = next((core_inputs[k] for k in ZONE_ID_KEYS if core_inputs.get(k)), None)

        if not zone_id:
            msg = f'cloudflare_zone_id is required for domain "{domain}" route generation'
            raise ConfigurationError(msg)

        zone_id = str(zone_id)
        if not is_valid_zone_id(zone_id):
            msg = (
                f'Invalid zone_id format for domain "{domain}". '
                f'Expected {ZONE_ID_FORMAT}, received: "{zone_id}"'
            )
            raise ValidationError(msg, value=zone_id, expected=ZONE_ID_FORMAT)

        return zone_id
