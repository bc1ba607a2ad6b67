"""RouteComponents: explicit factory for the routing collaborators.

Each component is built on first access and memoized for the lifetime of
the container. Wiring is spelled out in code, so the type of every
component is known statically.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from functools import cached_property

from routectl.config.models import RouteConfig
from routectl.routing.builder import RouteConfigBuilder
from routectl.routing.mapper import RouteMapper
from routectl.routing.policy import ConfigRoutingPolicy


class RouteComponents:
    """Lazily constructed policy, mapper and builder sharing one config.

    Args:
        config: Loaded configuration; defaults to code-baked defaults.
        clock: Optional timestamp source forwarded to the builder.
    """

    def __init__(
        self,
        config: RouteConfig | None = None,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config or RouteConfig()
        self._clock = clock

    @cached_property
    def policy(self) -> ConfigRoutingPolicy:
        return ConfigRoutingPolicy(self.config.routing)

    @cached_property
    def mapper(self) -> RouteMapper:
        return RouteMapper(self.policy)

    @cached_property
    def builder(self) -> RouteConfigBuilder:
        workers_domain = self.policy.reserved_wildcard_suffix()
        if self._clock is None:
            return RouteConfigBuilder(workers_domain=workers_domain)
        return RouteConfigBuilder(clock=self._clock, workers_domain=workers_domain)
