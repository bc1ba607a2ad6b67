"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ROUTECTL_*`` prefix
  3. TOML file    — ``routectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads through ``find_config`` and ``read_config`` in
:mod:`routectl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from routectl.config.discovery import find_config, read_config
from routectl.config.models import OutputConfig, RouteConfig, RoutingConfig, ServiceConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``routectl.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        try:
            self._data: dict[str, Any] = read_config(toml_path)
        except tomllib.TOMLDecodeError as exc:
            import click

            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RouteSettings(BaseSettings):
    """Unified settings for the routectl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~routectl.commands._context.AppContext` at the CLI root.

    Attributes:
        project_root: Directory holding ``routectl.toml`` (or CWD if none).
        config_path: The TOML file actually loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROUTECTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> RouteSettings:
        """Construct settings from CLI invocation.

        Discovers ``routectl.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def to_config(self) -> RouteConfig:
        """Project the TOML-backed sections into a plain :class:`RouteConfig`."""
        return RouteConfig(routing=self.routing, output=self.output, service=self.service)
