"""Command group: file copy and existence checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdkit.commands._base import StdkitGroup

if TYPE_CHECKING:
    from stdkit.commands._context import AppContext


@click.group(
    "fs",
    cls=StdkitGroup,
    examples="""\
  stdkit fs copy report.txt backup/report.txt
  stdkit fs exists backup/report.txt""",
)
def fs_group() -> None:
    """Copy files and check for their existence."""


@fs_group.command()
@click.argument("src")
@click.argument("dest")
@click.pass_obj
def copy(app: AppContext, src: str, dest: str) -> None:
    """Copy the contents of SRC to DEST."""
    from stdkit.services.files import FileService

    app.emit(FileService(app.settings).copy(src, dest))


@fs_group.command()
@click.argument("path")
@click.pass_obj
def exists(app: AppContext, path: str) -> None:
    """Report whether PATH exists."""
    from stdkit.services.files import FileService

    app.emit(FileService(app.settings).exists(path))
