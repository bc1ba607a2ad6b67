"""Tests for RouteComponents wiring."""

from __future__ import annotations

from routectl.config.models import RouteConfig, RoutingConfig
from routectl.routing.builder import RouteConfigBuilder
from routectl.routing.mapper import RouteMapper
from routectl.services.container import RouteComponents
from tests.conftest import FIXED_NOW


class TestRouteComponents:
    def test_defaults(self) -> None:
        components = RouteComponents()
        assert components.config == RouteConfig()
        assert isinstance(components.mapper, RouteMapper)
        assert isinstance(components.builder, RouteConfigBuilder)

    def test_components_are_memoized(self, components: RouteComponents) -> None:
        assert components.policy is components.policy
        assert components.mapper is components.mapper
        assert components.builder is components.builder

    def test_policy_reads_routing_section(self) -> None:
        config = RouteConfig(routing=RoutingConfig(workers_domain="pages.dev"))
        components = RouteComponents(config)
        assert components.mapper.is_wildcard_domain("site.pages.dev")
        assert not components.mapper.is_wildcard_domain("site.workers.dev")

    def test_builder_uses_workers_domain(self) -> None:
        config = RouteConfig(routing=RoutingConfig(workers_domain="pages.dev"))
        comment = RouteComponents(config).builder.generate_dev_comment("billing")
        assert "https://billing-dev.<account>.pages.dev" in comment

    def test_clock_forwarded_to_builder(self, components: RouteComponents) -> None:
        text = components.builder.build_complete_routes_config({})
        assert f"# Generated: {FIXED_NOW.isoformat()}" in text
