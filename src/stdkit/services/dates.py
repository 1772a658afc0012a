"""DateService — parsing, calendar facts, IMF formatting, differences.

Command-line dates arrive as ISO 8601 strings; template parsing uses the
fixed layouts from :mod:`stdkit.domain.dates`.  Formats and units left
unspecified fall back to the ``[dates]`` config section.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from stdkit.domain import dates
from stdkit.domain.errors import StdkitError
from stdkit.services.base import BaseService
from stdkit.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _fields(value: datetime) -> dict[str, Any]:
    return {
        "iso": value.isoformat(),
        "year": value.year,
        "month": value.month,
        "day": value.day,
        "hour": value.hour,
        "minute": value.minute,
    }


class DateService(BaseService):
    """Date and time operations over the fixed-template engine."""

    def parse(self, text: str, *, fmt: str | None = None) -> ServiceResult:
        """Parse a date-only string."""
        op = "parse_date"
        fmt = fmt or self._settings.dates.date_format
        try:
            value = dates.parse_date(text, fmt)
        except StdkitError as exc:
            return self._failure(op, exc, text=text, format=str(fmt))
        logger.debug("Parsed %r with %s", text, fmt)
        return ServiceResult(ok=True, op=op, data=_fields(value), meta={"format": str(fmt)})

    def parse_time(self, text: str, *, fmt: str | None = None) -> ServiceResult:
        """Parse a date-and-time string."""
        op = "parse_datetime"
        fmt = fmt or self._settings.dates.datetime_format
        try:
            value = dates.parse_datetime(text, fmt)
        except StdkitError as exc:
            return self._failure(op, exc, text=text, format=str(fmt))
        logger.debug("Parsed %r with %s", text, fmt)
        return ServiceResult(ok=True, op=op, data=_fields(value), meta={"format": str(fmt)})

    def day_of_year(self, value: str | None = None) -> ServiceResult:
        """Day of the year for an ISO date, or for today when omitted."""
        op = "day_of_year"
        try:
            if value is None:
                moment, ordinal = datetime.now(), dates.current_day_of_year()
            else:
                moment = self._parse_iso(value)
                ordinal = dates.day_of_year(moment)
        except StdkitError as exc:
            return self._failure(op, exc, value=value)
        return ServiceResult(
            ok=True,
            op=op,
            data={"date": moment.date().isoformat(), "day_of_year": ordinal},
        )

    def imf(self, value: str | None = None) -> ServiceResult:
        """IMF-fixdate for an ISO timestamp, or for now when omitted."""
        op = "to_imf"
        try:
            moment = datetime.now(UTC) if value is None else self._parse_iso(value)
            text = dates.to_imf(moment)
        except StdkitError as exc:
            return self._failure(op, exc, value=value)
        return ServiceResult(ok=True, op=op, data={"imf": text})

    def leap(self, year: int) -> ServiceResult:
        """Leap-year test."""
        op = "is_leap"
        try:
            leap = dates.is_leap(year)
        except StdkitError as exc:
            return self._failure(op, exc, year=year)
        return ServiceResult(ok=True, op=op, data={"year": year, "leap": leap})

    def diff(
        self,
        start: str,
        end: str,
        *,
        units: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Elapsed time between two ISO timestamps in the requested units."""
        op = "difference"
        requested = list(units) if units else list(self._settings.dates.units)
        try:
            from_ = self._parse_iso(start)
            to = self._parse_iso(end)
            result = dates.difference(from_, to, units=requested)
        except StdkitError as exc:
            return self._failure(op, exc, start=start, end=end)
        logger.debug("Difference %s..%s in %d units", start, end, len(result))
        return ServiceResult(
            ok=True,
            op=op,
            data={"from": from_.isoformat(), "to": to.isoformat(), **result},
        )
