"""Tests for routectl.toml discovery and reading."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

from routectl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, read_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        deep = tmp_path / "services" / "billing"
        deep.mkdir(parents=True)
        assert find_config(deep) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestReadConfig:
    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        assert read_config(None) == {}
        assert read_config(tmp_path / CONFIG_FILENAME) == {}

    def test_reads_service_section(self, project_root: Path) -> None:
        data = read_config(project_root / CONFIG_FILENAME)
        assert data["service"]["name"] == "billing-worker"
        assert data["service"]["domains"]["production"] == "api.example.com"

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[service\n", encoding="utf-8")
        with pytest.raises(tomllib.TOMLDecodeError):
            read_config(path)
