"""BaseService — shared foundation for all stdkit services.

Every service receives the frozen :class:`StdkitSettings` at construction
time and turns domain exceptions into failed ServiceResults.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any

from stdkit.domain.errors import InvalidArgumentError, StdkitError
from stdkit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from stdkit.config.settings import StdkitSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class DateService(BaseService):
            def leap(self, year: int) -> ServiceResult:
                op = "is_leap"
                try:
                    leap = is_leap(year)
                except StdkitError as exc:
                    return self._failure(op, exc)
                return ServiceResult(ok=True, op=op, data={"leap": leap})
    """

    def __init__(self, settings: StdkitSettings) -> None:
        self._settings = settings

    def _failure(self, op: str, exc: StdkitError, **detail: Any) -> ServiceResult:
        """Failed result carrying the error's code and message."""
        logger.debug("%s failed: %s", op, exc.code, exc_info=exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )

    @staticmethod
    def _parse_iso(value: str) -> datetime:
        """Parse an ISO 8601 timestamp supplied on the command line."""
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            msg = f"Invalid ISO 8601 date: {value!r}"
            raise InvalidArgumentError(msg) from exc
