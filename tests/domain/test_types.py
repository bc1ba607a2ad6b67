"""Tests for the route data model."""

from __future__ import annotations

import pytest

from routectl.domain.errors import ConfigurationError, RouteError, ValidationError
from routectl.domain.types import (
    ENVIRONMENTS,
    NESTED_ENVIRONMENTS,
    BuildOptions,
    DomainConfig,
    RouteMappingResult,
)


class TestDomainConfig:
    def test_defaults(self) -> None:
        config = DomainConfig()
        assert config.domains == {}
        assert config.zone_id is None
        assert config.api_base_path is None

    def test_domain_for_strips_whitespace(self) -> None:
        config = DomainConfig(domains={"production": "  api.example.com "})
        assert config.domain_for("production") == "api.example.com"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_domain_for_blank_is_none(self, value: str | None) -> None:
        config = DomainConfig(domains={"staging": value})
        assert config.domain_for("staging") is None

    def test_domain_for_missing_env(self) -> None:
        assert DomainConfig().domain_for("qa") is None

    def test_frozen(self) -> None:
        config = DomainConfig()
        with pytest.raises(Exception):
            config.zone_id = "x"  # type: ignore[misc]


class TestRouteMappingResult:
    def test_defaults_to_no_patterns(self) -> None:
        result = RouteMappingResult(environment="production")
        assert result.patterns == ()
        assert result.zone_id is None


class TestBuildOptions:
    def test_comments_on_by_default(self) -> None:
        assert BuildOptions().include_comments is True


class TestEnvironmentConstants:
    def test_emission_order(self) -> None:
        assert ENVIRONMENTS == ("production", "staging", "development")

    def test_production_is_top_level(self) -> None:
        assert "production" not in NESTED_ENVIRONMENTS


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigurationError, RouteError)
        assert issubclass(ValidationError, RouteError)

    def test_validation_error_carries_value(self) -> None:
        exc = ValidationError("bad", value="abc", expected="32 hex")
        assert exc.value == "abc"
        assert exc.expected == "32 hex"
        assert str(exc) == "bad"
