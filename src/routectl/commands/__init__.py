"""Subcommand modules for routectl.

Provides register_commands() which uses deferred imports to keep
``routectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from routectl.commands.build import build
    from routectl.commands.map_cmd import map_cmd
    from routectl.commands.validate import validate
    from routectl.commands.zone import zone

    cli.add_command(map_cmd)
    cli.add_command(build)
    cli.add_command(validate)
    cli.add_command(zone)
