"""Shared pytest fixtures and test helpers for routectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from routectl.config.models import RouteConfig
from routectl.services.container import RouteComponents

ZONE_ID = "0123456789abcdef0123456789abcdef"
FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)

PROJECT_TOML = f"""\
[service]
name = "billing-worker"
zone_id = "{ZONE_ID}"

[service.domains]
production = "api.example.com"
staging = "staging-api.example.com"
development = "billing-worker.acme.workers.dev"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ROUTECTL_* settings out of the tests."""
    monkeypatch.delenv("ROUTECTL_CONFIG", raising=False)
    monkeypatch.delenv("ROUTECTL_QUIET", raising=False)
    monkeypatch.delenv("ROUTECTL_VERBOSE", raising=False)


@pytest.fixture(autouse=True)
def _reset_root_logging() -> Generator[None]:
    """Drop handlers bound to CliRunner streams once a test finishes."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def components() -> RouteComponents:
    """Components on default config with a pinned banner clock."""
    return RouteComponents(RouteConfig(), clock=lambda: FIXED_NOW)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory holding a routectl.toml."""
    (tmp_path / "routectl.toml").write_text(PROJECT_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI discovers its routectl.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)
