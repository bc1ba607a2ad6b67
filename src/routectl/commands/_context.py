"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy component wiring and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from routectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from routectl.config.settings import RouteSettings
    from routectl.services.container import RouteComponents
    from routectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Components are built
    on first use so ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: RouteSettings) -> None:
        self.settings = settings
        self._components: RouteComponents | None = None

        from routectl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )
        if settings.config_path is None:
            logger.debug("No routectl.toml found; using defaults under %s", settings.project_root)
        else:
            logger.debug("Loaded %s (project root %s)", settings.config_path, settings.project_root)

    @property
    def components(self) -> RouteComponents:
        """Routing components (created lazily on first access)."""
        if self._components is None:
            from routectl.services.container import RouteComponents

            self._components = RouteComponents(self.settings.to_config())
        return self._components

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
