"""Error taxonomy for the date/time engine and the file URL converter.

Every error carries a stable ``code``.  The service layer copies it into
``ServiceError.code`` so CLI and JSON consumers never match on messages.

INVARIANT: Domain code raises these; it never logs, retries, or returns
partial results.
"""

from __future__ import annotations


class StdkitError(Exception):
    """Base class for all stdkit domain errors."""

    code = "STDKIT_ERROR"


class FormatMismatchError(StdkitError, ValueError):
    """Input text does not match the fixed-width layout of its template."""

    code = "FORMAT_MISMATCH"


class InvalidTemplateError(StdkitError, ValueError):
    """Requested template tag is not one of the enumerated layouts."""

    code = "INVALID_TEMPLATE"


class InvalidArgumentError(StdkitError, TypeError, ValueError):
    """Wrong kind of input where a string, URL, year, or unit was required."""

    code = "INVALID_ARGUMENT"


class InvalidSchemeError(StdkitError, ValueError):
    """URL scheme is not ``file``."""

    code = "INVALID_SCHEME"


class EncodedSeparatorError(StdkitError, ValueError):
    """A percent-encoded path separator appeared in a file URL path."""

    code = "ENCODED_SEPARATOR"


class InvalidHostError(StdkitError, ValueError):
    """A POSIX file URL carried a non-empty host."""

    code = "INVALID_HOST"


class PathNotAbsoluteError(StdkitError, ValueError):
    """A Windows file URL path lacks a drive-letter prefix."""

    code = "PATH_NOT_ABSOLUTE"


class DateRangeError(StdkitError, ValueError):
    """A date's UTC or local counterpart falls outside years 1-9999."""

    code = "DATE_OUT_OF_RANGE"
