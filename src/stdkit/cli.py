"""Root CLI group for stdkit with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from stdkit import __version__
from stdkit.commands import register_commands
from stdkit.commands._context import AppContext
from stdkit.config.settings import StdkitSettings
from stdkit.domain.types import PathFlavor


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="stdkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--flavor",
    type=click.Choice([f.value for f in PathFlavor]),
    default=None,
    help="Path conventions for file URLs (default: [paths] flavor, else host).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    flavor: str | None,
) -> None:
    """stdkit — date/time and file URL utilities."""
    try:
        settings = StdkitSettings.from_cli(
            config_path=config_path,
            json_output=json_output or None,
            quiet=quiet or None,
            verbose=verbose or None,
            log_json=log_json or None,
            flavor=flavor,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
