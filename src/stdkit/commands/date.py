"""Command group: date parsing, calendar facts, IMF formatting, differences."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stdkit.commands._base import StdkitGroup
from stdkit.domain.types import DateFormat, DateTimeFormat, Unit

if TYPE_CHECKING:
    from stdkit.commands._context import AppContext


@click.group(
    "date",
    cls=StdkitGroup,
    examples="""\
  stdkit date parse 31-12-2020 --format dd-mm-yyyy
  stdkit date parse-time "14:30 2020-06-01" --format "hh:mm yyyy-mm-dd"
  stdkit date day-of-year 2020-12-31
  stdkit date imf 2020-01-01T00:00:00+00:00
  stdkit date leap 2000
  stdkit date diff 2020-01-01 2020-02-02 --unit days --unit months""",
)
def date_group() -> None:
    """Parse dates, compute calendar facts, and format IMF-fixdates."""


@date_group.command(
    examples="""\
  stdkit date parse 2020-12-31
  stdkit date parse 12-31-2020 -f mm-dd-yyyy""",
)
@click.argument("text")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in DateFormat]),
    default=None,
    help="Date layout (default: [dates] date_format).",
)
@click.pass_obj
def parse(app: AppContext, text: str, fmt: str | None) -> None:
    """Parse a date-only TEXT with a fixed layout."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).parse(text, fmt=fmt))


@date_group.command(
    "parse-time",
    examples="""\
  stdkit date parse-time '2020-12-31 23:59'
  stdkit date parse-time '23:59 31-12-2020' -f 'hh:mm dd-mm-yyyy'""",
)
@click.argument("text")
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in DateTimeFormat]),
    default=None,
    help="Date-time layout (default: [dates] datetime_format).",
)
@click.pass_obj
def parse_time(app: AppContext, text: str, fmt: str | None) -> None:
    """Parse a date-and-time TEXT with a fixed layout."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).parse_time(text, fmt=fmt))


@date_group.command("day-of-year")
@click.argument("value", required=False)
@click.pass_obj
def day_of_year(app: AppContext, value: str | None) -> None:
    """Day of the year for an ISO 8601 VALUE (default: today)."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).day_of_year(value))


@date_group.command()
@click.argument("value", required=False)
@click.pass_obj
def imf(app: AppContext, value: str | None) -> None:
    """Format an ISO 8601 VALUE as an HTTP IMF-fixdate (default: now)."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).imf(value))


@date_group.command()
@click.argument("year", type=int)
@click.pass_obj
def leap(app: AppContext, year: int) -> None:
    """Check whether YEAR is a leap year."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).leap(year))


@date_group.command(
    examples="""\
  stdkit date diff 2020-01-01 2021-03-15
  stdkit date diff 2020-01-01T08:00 2020-01-03T07:59 -u hours -u days""",
)
@click.argument("start")
@click.argument("end")
@click.option(
    "-u",
    "--unit",
    "units",
    multiple=True,
    type=click.Choice([u.value for u in Unit]),
    help="Unit to report (repeatable; default: [dates] units).",
)
@click.pass_obj
def diff(app: AppContext, start: str, end: str, units: tuple[str, ...]) -> None:
    """Elapsed time between two ISO 8601 timestamps START and END."""
    from stdkit.services.dates import DateService

    app.emit(DateService(app.settings).diff(start, end, units=units or None))
