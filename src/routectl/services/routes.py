"""RouteService: map, build, validate and zone lookups for one service.

Pipeline for ``build_routes``: MAP (per environment) → ZONE → BUILD → VALIDATE.

The domain configuration defaults to the ``[service]`` section of
``routectl.toml``; callers embedding routectl pass a
:class:`~routectl.domain.types.DomainConfig` directly.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from routectl.domain.errors import RouteError
from routectl.domain.types import DEVELOPMENT, ENVIRONMENTS, BuildOptions, DomainConfig
from routectl.services.base import BaseService
from routectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class RouteService(BaseService):
    """Orchestrator-facing facade over RouteMapper and RouteConfigBuilder."""

    def _domain_config(self, domain_config: DomainConfig | None) -> DomainConfig:
        if domain_config is not None:
            return domain_config
        return self._components.config.service.to_domain_config()

    @staticmethod
    def _environments(domain_config: DomainConfig, environments: Sequence[str] | None) -> list[str]:
        """Requested environments, or the standard three plus any extra configured ones."""
        if environments:
            return list(dict.fromkeys(environments))
        extra = [env for env in domain_config.domains if env not in ENVIRONMENTS]
        return [*ENVIRONMENTS, *extra]

    @staticmethod
    def _no_domains(op: str) -> ServiceResult:
        """Failure for a service with no domain in any environment.

        A single unassigned environment maps to an empty result. A service
        with no domains at all is reported as a configuration failure rather
        than an empty fragment.
        """
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="NO_SERVICE",
                message="No domains configured; set [service.domains] or pass --domain",
            ),
        )

    def _map_all(
        self,
        domain_config: DomainConfig,
        environments: Sequence[str],
    ) -> dict[str, list[str]]:
        mapper = self._components.mapper
        return {
            env: list(mapper.map_domain_to_routes(domain_config, env).patterns)
            for env in environments
        }

    def map_routes(
        self,
        domain_config: DomainConfig | None = None,
        environments: Sequence[str] | None = None,
    ) -> ServiceResult:
        """Route patterns for each environment, most specific first.

        Environments without a domain map to an empty list and are listed
        under ``skipped``. An empty ``domains`` mapping fails with
        ``NO_SERVICE``.
        """
        op = "map_routes"
        config = self._domain_config(domain_config)
        if not config.domains:
            return self._no_domains(op)

        routes = self._map_all(config, self._environments(config, environments))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "routes": routes,
                "zone_id": config.zone_id,
                "route_count": sum(len(p) for p in routes.values()),
                "skipped": [env for env, patterns in routes.items() if not patterns],
            },
        )

    def build_routes(
        self,
        domain_config: DomainConfig | None = None,
        environments: Sequence[str] | None = None,
        *,
        include_comments: bool | None = None,
        include_zone_id: bool | None = None,
    ) -> ServiceResult:
        """MAP → ZONE → BUILD → VALIDATE into one wrangler.toml routes fragment.

        Fails with ``NO_SERVICE`` when ``domains`` is empty, as
        :meth:`map_routes` does.
        """
        op = "build_routes"
        output = self._components.config.output
        if include_comments is None:
            include_comments = output.include_comments
        if include_zone_id is None:
            include_zone_id = output.include_zone_id

        config = self._domain_config(domain_config)
        if not config.domains:
            return self._no_domains(op)

        warnings: list[str] = []
        requested = self._environments(config, environments)
        for env in requested:
            if env not in ENVIRONMENTS:
                warnings.append(f"Environment '{env}' has no wrangler.toml section; skipped")
        targets = [env for env in requested if env in ENVIRONMENTS]

        # MAP
        routes = self._map_all(config, targets)
        route_count = sum(len(p) for p in routes.values())

        # ZONE
        zone_id: str | None = None
        if include_zone_id and route_count:
            routed = next(env for env in targets if routes[env])
            try:
                zone_id = self._components.mapper.get_zone_id_for_domain(
                    config.domain_for(routed) or "",
                    {"cloudflare_zone_id": config.zone_id},
                )
            except RouteError as exc:
                return self._failure(op, exc)

        # BUILD
        builder = self._components.builder
        text = builder.build_complete_routes_config(
            routes,
            BuildOptions(zone_id=zone_id, include_comments=include_comments),
            domains={env: config.domain_for(env) for env in targets},
        )
        service_name = self._components.config.service.name
        if include_comments and service_name and DEVELOPMENT in routes and not routes[DEVELOPMENT]:
            dev_comment = builder.generate_dev_comment(service_name)
            text = f"{text}\n{dev_comment}" if text.strip() else dev_comment

        # VALIDATE
        if text.strip():
            check = builder.validate_toml_syntax(text)
            if not check.valid:
                logger.warning("Generated routes failed syntax check: %s", "; ".join(check.errors))
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INVALID_TOML",
                        message="Generated routes failed the TOML syntax check",
                        detail={"errors": check.errors},
                    ),
                )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "toml": text,
                "route_count": route_count,
                "environments": [env for env in targets if routes[env]],
            },
            warnings=warnings,
        )

    def validate(self, text: str, *, source: str = "<stdin>") -> ServiceResult:
        """Run the structural TOML check over *text*."""
        op = "validate"
        check = self._components.builder.validate_toml_syntax(text)
        if not check.valid:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_TOML",
                    message=f"{len(check.errors)} syntax error(s) in {source}",
                    detail={"errors": check.errors},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"source": source, "valid": True})

    def resolve_zone(self, domain: str, zone_id: str | None = None) -> ServiceResult:
        """Validated zone id for *domain*, from *zone_id* or ``[service] zone_id``."""
        op = "zone"
        if zone_id is None:
            zone_id = self._components.config.service.zone_id
        try:
            resolved = self._components.mapper.get_zone_id_for_domain(
                domain, {"cloudflare_zone_id": zone_id}
            )
        except RouteError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"domain": domain, "zone_id": resolved})
