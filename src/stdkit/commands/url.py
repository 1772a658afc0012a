"""Command group: conversion between file URLs and filesystem paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdkit.commands._base import StdkitGroup

if TYPE_CHECKING:
    from stdkit.commands._context import AppContext


@click.group(
    "url",
    cls=StdkitGroup,
    examples="""\
  stdkit url to-path file:///tmp/a%20b
  stdkit --flavor windows url to-path file:///C:/Users/me
  stdkit url from-path ./notes/
  stdkit --flavor windows url from-path 'C:\\Program Files\\'""",
)
def url_group() -> None:
    """Convert between file: URLs and filesystem paths."""


@url_group.command("to-path")
@click.argument("url")
@click.pass_obj
def to_path(app: AppContext, url: str) -> None:
    """Convert a file: URL to a filesystem path."""
    from stdkit.services.urls import UrlService

    app.emit(UrlService(app.settings).to_path(url))


@url_group.command("from-path")
@click.argument("path")
@click.pass_obj
def from_path(app: AppContext, path: str) -> None:
    """Convert a filesystem PATH (resolved to absolute) to a file: URL."""
    from stdkit.services.urls import UrlService

    app.emit(UrlService(app.settings).to_url(path))
