"""Template tags, difference units, and path flavors.

Enum values are the literal tags callers pass on the command line and in
``stdkit.toml``, so a plain string equal to a value is always accepted.
"""

from __future__ import annotations

import os
from enum import StrEnum


class DateFormat(StrEnum):
    """Date-only layouts: two-digit day/month, four-digit year."""

    MM_DD_YYYY = "mm-dd-yyyy"
    DD_MM_YYYY = "dd-mm-yyyy"
    YYYY_MM_DD = "yyyy-mm-dd"


class DateTimeFormat(StrEnum):
    """Date layouts combined with an ``hh:mm`` time, time first or last."""

    MM_DD_YYYY_HH_MM = "mm-dd-yyyy hh:mm"
    DD_MM_YYYY_HH_MM = "dd-mm-yyyy hh:mm"
    YYYY_MM_DD_HH_MM = "yyyy-mm-dd hh:mm"
    HH_MM_MM_DD_YYYY = "hh:mm mm-dd-yyyy"
    HH_MM_DD_MM_YYYY = "hh:mm dd-mm-yyyy"
    HH_MM_YYYY_MM_DD = "hh:mm yyyy-mm-dd"


class Unit(StrEnum):
    """Units accepted by :func:`stdkit.domain.dates.difference`."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"


class PathFlavor(StrEnum):
    """Filesystem path conventions for file URL conversion."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> PathFlavor:
        """Flavor of the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX
