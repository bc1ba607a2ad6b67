"""Routing policy: the two knobs the mapper reads from configuration.

The mapper depends only on the :class:`RoutingPolicy` protocol, so tests
and embedding tools can supply their own provider.
"""

from __future__ import annotations

from typing import Protocol

from routectl.config.models import RoutingConfig


class RoutingPolicy(Protocol):
    """Accessor contract consumed by :class:`~routectl.routing.mapper.RouteMapper`."""

    def reserved_wildcard_suffix(self) -> str:
        """Platform hostname suffix whose domains need no custom routes."""
        ...

    def default_path_prefix(self, environment: str) -> str:
        """Path prefix for root domains when no API base path is configured."""
        ...


class ConfigRoutingPolicy:
    """RoutingPolicy backed by the ``[routing]`` config section.

    Unknown environments resolve through ``default_environment``; if that
    is missing too, the prefix is empty.
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self._config = config or RoutingConfig()

    def reserved_wildcard_suffix(self) -> str:
        return self._config.workers_domain

    def default_path_prefix(self, environment: str) -> str:
        prefixes = self._config.path_prefixes
        if environment in prefixes:
            return prefixes[environment]
        return prefixes.get(self._config.default_environment, "")
