"""AppContext — the object every stdkit command receives via ``@click.pass_obj``.

The root group builds it once from the resolved settings; it owns logging
setup and the mapping from a ServiceResult to stdout/stderr and an exit
code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdkit.config.logging import configure_logging
from stdkit.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from stdkit.config.settings import StdkitSettings
    from stdkit.services.result import ServiceResult


class AppContext:
    """Settings plus output mode for one CLI invocation."""

    def __init__(self, settings: StdkitSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successful results go to stdout.  Failed results go to stderr and
        end the command with exit code 1.  Outside JSON mode, warnings are
        echoed to stderr after the result.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.json_output:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
