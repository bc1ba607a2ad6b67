"""Tests for the config-backed routing policy."""

from __future__ import annotations

from routectl.config.models import RoutingConfig
from routectl.routing.policy import ConfigRoutingPolicy


class TestConfigRoutingPolicy:
    def test_defaults(self) -> None:
        policy = ConfigRoutingPolicy()
        assert policy.reserved_wildcard_suffix() == "workers.dev"
        assert policy.default_path_prefix("production") == "/api"
        assert policy.default_path_prefix("staging") == "/staging-api"
        assert policy.default_path_prefix("development") == "/dev-api"

    def test_unknown_environment_uses_default_environment(self) -> None:
        policy = ConfigRoutingPolicy()
        assert policy.default_path_prefix("qa") == "/api"

    def test_custom_default_environment(self) -> None:
        policy = ConfigRoutingPolicy(RoutingConfig(default_environment="staging"))
        assert policy.default_path_prefix("preview") == "/staging-api"

    def test_missing_default_environment_gives_empty_prefix(self) -> None:
        config = RoutingConfig(path_prefixes={"staging": "/s"}, default_environment="production")
        assert ConfigRoutingPolicy(config).default_path_prefix("qa") == ""

    def test_custom_suffix(self) -> None:
        policy = ConfigRoutingPolicy(RoutingConfig(workers_domain="pages.dev"))
        assert policy.reserved_wildcard_suffix() == "pages.dev"
