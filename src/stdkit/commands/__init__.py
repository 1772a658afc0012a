"""Subcommand modules for stdkit.

Provides register_commands(), which uses deferred imports to keep
``stdkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from stdkit.commands.date import date_group
    from stdkit.commands.fs import fs_group
    from stdkit.commands.url import url_group

    cli.add_command(date_group)
    cli.add_command(url_group)
    cli.add_command(fs_group)
