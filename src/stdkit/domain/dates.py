"""Fixed-template date parsing, calendar facts, and IMF-fixdate formatting.

Calendar dates are plain :class:`datetime.datetime` values.  Naive values
are local wall time (the host's offset applies at each instant); aware
values carry their own offset.  Parsers always return naive values.

Templates are compiled once at import into fixed-width layouts and
scanned field by field.  Numeric fields are taken literally: a day of
``32`` rolls into the next month and a month of ``13`` into the next
year, the same way a calendar rolls over.

INVARIANT: Every function here is pure and single-pass.  Nothing reads
the clock except :func:`current_day_of_year`.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import NamedTuple

from stdkit.domain.errors import (
    DateRangeError,
    FormatMismatchError,
    InvalidArgumentError,
    InvalidTemplateError,
)
from stdkit.domain.types import DateFormat, DateTimeFormat, Unit

# Unit lengths in milliseconds.
MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

_FIXED_UNITS: dict[Unit, int] = {
    Unit.MILLISECONDS: MILLISECOND,
    Unit.SECONDS: SECOND,
    Unit.MINUTES: MINUTE,
    Unit.HOURS: HOUR,
    Unit.DAYS: DAY,
    Unit.WEEKS: WEEK,
}

_MONTHS_PER_UNIT: dict[Unit, int] = {
    Unit.MONTHS: 1,
    Unit.QUARTERS: 4,
    Unit.YEARS: 12,
}

_WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)
_ONE_MINUTE = timedelta(minutes=1)


# ---------------------------------------------------------------------------
# Template layouts
# ---------------------------------------------------------------------------


class _Field(NamedTuple):
    name: str
    width: int


_Layout = tuple[_Field | str, ...]

_DATE_LAYOUTS: dict[DateFormat, _Layout] = {
    DateFormat.MM_DD_YYYY: (_Field("month", 2), "-", _Field("day", 2), "-", _Field("year", 4)),
    DateFormat.DD_MM_YYYY: (_Field("day", 2), "-", _Field("month", 2), "-", _Field("year", 4)),
    DateFormat.YYYY_MM_DD: (_Field("year", 4), "-", _Field("month", 2), "-", _Field("day", 2)),
}

_TIME_LAYOUT: _Layout = (_Field("hour", 2), ":", _Field("minute", 2))


def _compile(tag: DateTimeFormat) -> _Layout:
    """Join the layouts of a date-time tag's space-separated halves."""
    layout: list[_Field | str] = []
    for part in tag.split(" "):
        if layout:
            layout.append(" ")
        layout.extend(_TIME_LAYOUT if part == "hh:mm" else _DATE_LAYOUTS[DateFormat(part)])
    return tuple(layout)


_DATETIME_LAYOUTS: dict[DateTimeFormat, _Layout] = {tag: _compile(tag) for tag in DateTimeFormat}


def _layout_width(layout: _Layout) -> int:
    return sum(item.width if isinstance(item, _Field) else len(item) for item in layout)


def _scan(text: str, layout: _Layout, tag: str) -> dict[str, int]:
    """Match *text* against *layout* exactly, returning the numeric fields."""
    if not isinstance(text, str):
        msg = f"Expected a string, got {type(text).__name__}"
        raise InvalidArgumentError(msg)
    if len(text) != _layout_width(layout):
        msg = f"{text!r} does not match format {tag!r}"
        raise FormatMismatchError(msg)

    fields: dict[str, int] = {}
    pos = 0
    for item in layout:
        if isinstance(item, _Field):
            chunk = text[pos : pos + item.width]
            if not (chunk.isascii() and chunk.isdigit()):
                msg = f"{text!r} does not match format {tag!r}: {item.name} must be digits"
                raise FormatMismatchError(msg)
            fields[item.name] = int(chunk)
            pos += item.width
        else:
            if not text.startswith(item, pos):
                msg = f"{text!r} does not match format {tag!r}: expected {item!r} at {pos}"
                raise FormatMismatchError(msg)
            pos += len(item)
    return fields


def _build(
    text: str,
    *,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
) -> datetime:
    """Build a naive datetime, rolling overflowing fields into coarser ones."""
    rolled_year, month_index = divmod(year * 12 + month - 1, 12)
    try:
        start = datetime(rolled_year, month_index + 1, 1)
        return start + timedelta(days=day - 1, hours=hour, minutes=minute)
    except (ValueError, OverflowError) as exc:
        msg = f"{text!r} is outside the supported calendar range"
        raise FormatMismatchError(msg) from exc


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_date(text: str, fmt: DateFormat | str) -> datetime:
    """Parse a date-only string laid out as *fmt*.

    Example::

        >>> parse_date("31-12-2020", "dd-mm-yyyy")
        datetime.datetime(2020, 12, 31, 0, 0)
    """
    try:
        tag = DateFormat(fmt)
    except ValueError as exc:
        msg = f"Invalid date format: {fmt!r}"
        raise InvalidTemplateError(msg) from exc
    return _build(text, **_scan(text, _DATE_LAYOUTS[tag], tag))


def parse_datetime(text: str, fmt: DateTimeFormat | str) -> datetime:
    """Parse a date-and-time string laid out as *fmt*.

    Seconds are always zero.
    """
    try:
        tag = DateTimeFormat(fmt)
    except ValueError as exc:
        msg = f"Invalid datetime format: {fmt!r}"
        raise InvalidTemplateError(msg) from exc
    return _build(text, **_scan(text, _DATETIME_LAYOUTS[tag], tag))


# ---------------------------------------------------------------------------
# Instants and offsets
# ---------------------------------------------------------------------------


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    msg = f"Expected a date or datetime, got {type(value).__name__}"
    raise InvalidArgumentError(msg)


def _convert(value: datetime, tz: tzinfo | None = None) -> datetime:
    """``value.astimezone(tz)``; a result outside years 1-9999 is a DateRangeError."""
    try:
        return value.astimezone(tz)
    except (ValueError, OverflowError) as exc:
        msg = f"{value.isoformat()} cannot be converted within the supported calendar range"
        raise DateRangeError(msg) from exc


def _to_aware(value: datetime) -> datetime:
    """Attach the host's local offset to naive values."""
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return _convert(value)


def _epoch_ms(value: datetime) -> int:
    return (_to_aware(value) - _EPOCH) // _ONE_MS


def _offset_minutes(value: datetime) -> int:
    offset = _to_aware(value).utcoffset()
    assert offset is not None
    return offset // _ONE_MINUTE


def _align(value: datetime, reference: datetime) -> datetime:
    """Express *value* in *reference*'s timezone so calendar fields compare."""
    if value.tzinfo is reference.tzinfo:
        return value
    if reference.tzinfo is None:
        return _convert(value).replace(tzinfo=None)
    return _convert(_to_aware(value), reference.tzinfo)


# ---------------------------------------------------------------------------
# Calendar facts
# ---------------------------------------------------------------------------


def day_of_year(value: date) -> int:
    """Return the 1-based ordinal of *value* within its calendar year.

    The offset delta between *value* and local midnight on January 1st is
    added back to the elapsed time, so a daylight-saving transition in
    between never shifts the result by a day.
    """
    value = _as_datetime(value)
    start = value.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    elapsed = _epoch_ms(value) - _epoch_ms(start)
    elapsed += (_offset_minutes(value) - _offset_minutes(start)) * MINUTE
    return elapsed // DAY + 1


def current_day_of_year() -> int:
    """Day of the year for the current local time."""
    return day_of_year(datetime.now())


def to_imf(value: date) -> str:
    """Format *value* as an RFC 7231 IMF-fixdate from its UTC fields.

    Naive values are taken as local time and converted to UTC first.
    """
    utc = _convert(_to_aware(_as_datetime(value)), UTC)
    return (
        f"{_WEEKDAY_NAMES[utc.isoweekday() % 7]}, {utc.day:02d} {_MONTH_NAMES[utc.month - 1]} "
        f"{utc.year} {utc.hour:02d}:{utc.minute:02d}:{utc.second:02d} GMT"
    )


def is_leap(year: int | date) -> bool:
    """Gregorian leap-year test for a bare year or a date's year."""
    if isinstance(year, date):
        year = year.year
    elif isinstance(year, bool) or not isinstance(year, int):
        msg = f"Expected a year or a date, got {type(year).__name__}"
        raise InvalidArgumentError(msg)
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


# ---------------------------------------------------------------------------
# Differences
# ---------------------------------------------------------------------------


def _resolve_units(units: Iterable[Unit | str] | None) -> list[Unit]:
    if units is None:
        return list(Unit)
    if isinstance(units, str):
        units = [units]
    resolved: list[Unit] = []
    for name in units:
        try:
            resolved.append(Unit(name))
        except ValueError as exc:
            msg = f"Unknown unit: {name!r}"
            raise InvalidArgumentError(msg) from exc
    return list(dict.fromkeys(resolved))


def _clock(value: datetime) -> tuple[int, int, int, int, int]:
    return (value.day, value.hour, value.minute, value.second, value.microsecond)


def _month_difference(bigger: datetime, smaller: datetime) -> int:
    """Count full calendar months from *smaller* up to *bigger*."""
    later = _align(bigger, smaller)
    months = (later.year - smaller.year) * 12 + later.month - smaller.month
    # The last month is partial until smaller's day and time-of-day come round.
    if months > 0 and _clock(later) < _clock(smaller):
        months -= 1
    return max(months, 0)


def difference(
    from_: date,
    to: date,
    *,
    units: Iterable[Unit | str] | None = None,
) -> dict[str, int]:
    """Elapsed time between two dates in each requested unit.

    The result is the same whichever argument is earlier.  Fixed-length
    units floor the elapsed milliseconds; months, quarters, and years
    count whole calendar months.  Keys follow the order of *units*
    (duplicates dropped), defaulting to every :class:`Unit`.

    Example::

        >>> difference(datetime(2020, 1, 1), datetime(2020, 2, 2), units=["days", "months"])
        {'days': 32, 'months': 1}
    """
    requested = _resolve_units(units)
    smaller, bigger = sorted((_as_datetime(from_), _as_datetime(to)), key=_epoch_ms)
    elapsed = _epoch_ms(bigger) - _epoch_ms(smaller)

    result: dict[str, int] = {}
    months: int | None = None
    for unit in requested:
        if unit in _FIXED_UNITS:
            result[unit.value] = elapsed // _FIXED_UNITS[unit]
            continue
        if months is None:
            months = _month_difference(bigger, smaller)
        result[unit.value] = months // _MONTHS_PER_UNIT[unit]
    return result
