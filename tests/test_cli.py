"""Tests for the root CLI group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from routectl import __version__
from routectl.cli import cli


class TestRootGroup:
    def test_no_args_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        for name in ("map", "build", "validate", "zone"):
            assert name in result.output

    def test_help_lists_global_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for flag in ("--json", "--quiet", "--verbose", "--log-json", "--config", "--version"):
            assert flag in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
        assert "routectl" in result.output

    def test_registered_commands(self) -> None:
        assert set(cli.commands) == {"map", "build", "validate", "zone"}

    def test_unknown_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["deploy"])
        assert result.exit_code == 2


class TestConfigErrors:
    def test_invalid_toml_reported(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "routectl.toml").write_text("[service\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["map"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stderr

    def test_env_var_config_path(
        self,
        cli_runner: CliRunner,
        project_root: Path,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path_factory: pytest.TempPathFactory,
    ) -> None:
        monkeypatch.setenv("ROUTECTL_CONFIG", str(project_root / "routectl.toml"))
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        result = cli_runner.invoke(cli, ["-q", "map", "--env", "production"])
        assert result.exit_code == 0
        assert result.stdout == "api.example.com/*\nexample.com/api/*\n"


class TestVerboseLogging:
    def test_reports_loaded_config(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-v", "-c", str(project_root / "routectl.toml"), "map", "--env", "production"]
        )
        assert result.exit_code == 0
        assert "Loaded" in result.stderr
        assert "routectl.toml" in result.stderr

    def test_reports_defaults_without_config(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["-v", "zone", "api.example.com", "--zone-id", "f" * 32])
        assert result.exit_code == 0
        assert "No routectl.toml found; using defaults" in result.stderr

    def test_silent_without_verbose(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(project_root / "routectl.toml"), "map"])
        assert result.exit_code == 0
        assert "Loaded" not in result.stderr
