"""Conversion between filesystem paths and ``file:`` URLs.

Two path flavors with divergent rules:

- POSIX: file URLs never carry a host; a backslash is an ordinary
  filename character and is escaped as ``%5C``.
- Windows: a host maps to a UNC path (``\\\\host\\share``); otherwise the
  path must start with a drive letter.  Backslash and slash are both
  separators.

The flavor is an explicit value on :class:`FileURLConverter`, never read
from a process-wide flag, so both flavors can be exercised side by side.

INVARIANT: Percent-encoded separators (``%2F``, and ``%5C`` on Windows)
are rejected rather than decoded, so a URL can never smuggle a separator
into a single path segment.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
from typing import Any
from urllib.parse import ParseResult, SplitResult, quote, unquote, urlsplit

from pydantic import BaseModel

from stdkit.domain.errors import (
    EncodedSeparatorError,
    InvalidArgumentError,
    InvalidHostError,
    InvalidSchemeError,
    PathNotAbsoluteError,
)
from stdkit.domain.types import PathFlavor

FILE_SCHEME = "file"

_DRIVE_AUTHORITY = re.compile(r"^[A-Za-z][:|]$")
_ENCODED_SLASH = re.compile(r"%2f", re.IGNORECASE)
_ENCODED_SEPARATOR = re.compile(r"%(?:2f|5c)", re.IGNORECASE)

# Applied in order; "%" must go first so later escapes are not re-escaped.
_POSIX_ESCAPES = (("%", "%25"), ("\\", "%5C"), ("\n", "%0A"), ("\r", "%0D"), ("\t", "%09"))
_WINDOWS_ESCAPES = (("%", "%25"), ("\n", "%0A"), ("\r", "%0D"), ("\t", "%09"))

# Characters kept verbatim when setting a URL path; "%" is escaped beforehand.
_PATH_SAFE = "/%!$&'()*+,;=:@[]^|"


class FileURL(BaseModel):
    """A URL split into scheme, host, and percent-encoded path.

    Any scheme parses, so a non-``file`` URL can be rejected with a
    precise error instead of a parse failure.
    """

    model_config = {"frozen": True}

    scheme: str = FILE_SCHEME
    host: str = ""
    path: str = "/"

    def __str__(self) -> str:
        return f"{self.scheme}://{self.host}{self.path}"

    @property
    def href(self) -> str:
        return str(self)

    @classmethod
    def parse(cls, text: str) -> FileURL:
        """Parse *text* following WHATWG file URL conventions.

        ``localhost`` is the same as no host, a drive letter written in the
        authority (``file://C:/x``) belongs to the path, and the path always
        starts with ``/``.
        """
        try:
            parts = urlsplit(text)
            hostname = parts.hostname or ""
            port = parts.port
        except ValueError as exc:
            msg = f"Invalid URL: {text!r}"
            raise InvalidArgumentError(msg) from exc
        if port is not None:
            msg = f"File URLs cannot carry a port: {text!r}"
            raise InvalidArgumentError(msg)

        path = parts.path
        if _DRIVE_AUTHORITY.match(parts.netloc):
            path = f"/{parts.netloc[0]}:{path}"
            hostname = ""
        if hostname == "localhost":
            hostname = ""
        if not path.startswith("/"):
            path = f"/{path}"
        return cls(scheme=parts.scheme, host=hostname, path=path)


def _coerce_url(url: Any) -> FileURL:
    if isinstance(url, FileURL):
        return url
    if isinstance(url, str):
        return FileURL.parse(url)
    if isinstance(url, (SplitResult, ParseResult)):
        return FileURL.parse(url.geturl())
    msg = f"Invalid argument: expected a string or URL, got {type(url).__name__}"
    raise InvalidArgumentError(msg)


def _escape(path: str, escapes: tuple[tuple[str, str], ...]) -> str:
    for raw, encoded in escapes:
        path = path.replace(raw, encoded)
    return path


class FileURLConverter:
    """Converts between file URLs and paths of one fixed flavor.

    Args:
        flavor: Path conventions to apply; defaults to the host's.
        cwd: Base directory for resolving relative paths; defaults to the
            process working directory at call time.
    """

    def __init__(self, flavor: PathFlavor | str | None = None, *, cwd: str | None = None) -> None:
        try:
            self.flavor = PathFlavor.host() if flavor is None else PathFlavor(flavor)
        except ValueError as exc:
            msg = f"Unknown path flavor: {flavor!r}"
            raise InvalidArgumentError(msg) from exc
        self.cwd = cwd

    @property
    def is_windows(self) -> bool:
        return self.flavor is PathFlavor.WINDOWS

    # ------------------------------------------------------------------
    # URL -> path
    # ------------------------------------------------------------------

    def to_path(self, url: FileURL | SplitResult | ParseResult | str) -> str:
        """Convert a ``file:`` URL to a filesystem path."""
        parsed = _coerce_url(url)
        if parsed.scheme != FILE_SCHEME:
            msg = f"Invalid URL scheme {parsed.scheme!r}: expected 'file'"
            raise InvalidSchemeError(msg)
        if self.is_windows:
            return self._windows_path(parsed)
        return self._posix_path(parsed)

    def _windows_path(self, url: FileURL) -> str:
        if _ENCODED_SEPARATOR.search(url.path):
            msg = "File URL path must not include encoded \\ or / characters"
            raise EncodedSeparatorError(msg)

        path = unquote(url.path.replace("/", "\\"))
        if url.host:
            return f"\\\\{url.host}{path}"

        letter, sep = path[1:2], path[2:3]
        if not (letter.isascii() and letter.isalpha()) or sep != ":":
            msg = f"File URL path must be absolute: {url.path!r}"
            raise PathNotAbsoluteError(msg)
        return path[1:]

    def _posix_path(self, url: FileURL) -> str:
        if url.host:
            msg = f"File URL host must be empty on POSIX, got {url.host!r}"
            raise InvalidHostError(msg)
        if _ENCODED_SLASH.search(url.path):
            msg = "File URL path must not include encoded / characters"
            raise EncodedSeparatorError(msg)
        return unquote(url.path)

    # ------------------------------------------------------------------
    # path -> URL
    # ------------------------------------------------------------------

    def resolve(self, path: str) -> str:
        """Absolute, normalized form of *path* (``.``/``..`` collapsed)."""
        mod = ntpath if self.is_windows else posixpath
        if self.is_windows:
            absolute = bool(ntpath.splitdrive(path)[0]) and ntpath.isabs(path)
        else:
            absolute = posixpath.isabs(path)
        if not absolute:
            path = mod.join(self.cwd or os.getcwd(), path)
        resolved = mod.normpath(path)
        if not self.is_windows and resolved.startswith("//"):
            resolved = "/" + resolved.lstrip("/")
        if self.is_windows and not ntpath.splitdrive(resolved)[0]:
            msg = f"Cannot resolve {path!r} to a Windows path with a drive"
            raise PathNotAbsoluteError(msg)
        return resolved

    def to_url(self, path: str | os.PathLike[str]) -> FileURL:
        """Convert a filesystem path to a ``file:`` URL.

        A trailing separator on the input survives resolution.
        """
        if not isinstance(path, (str, os.PathLike)):
            msg = f"Invalid argument: expected a path string, got {type(path).__name__}"
            raise InvalidArgumentError(msg)
        raw = os.fspath(path)
        resolved = self.resolve(raw)

        separators = ("/", "\\") if self.is_windows else ("/",)
        sep = "\\" if self.is_windows else "/"
        if raw.endswith(separators) and not resolved.endswith(sep):
            resolved += sep

        if not self.is_windows:
            return FileURL(path=quote(_escape(resolved, _POSIX_ESCAPES), safe=_PATH_SAFE))

        escaped = _escape(resolved, _WINDOWS_ESCAPES).replace("\\", "/")
        host = ""
        if escaped.startswith("//"):
            host, _, escaped = escaped[2:].partition("/")
        if not escaped.startswith("/"):
            escaped = f"/{escaped}"
        return FileURL(host=host, path=quote(escaped, safe=_PATH_SAFE))


# ---------------------------------------------------------------------------
# Module-level convenience
# ---------------------------------------------------------------------------


def file_url_to_path(
    url: FileURL | SplitResult | ParseResult | str,
    *,
    flavor: PathFlavor | str | None = None,
) -> str:
    """Convert a ``file:`` URL to a path using *flavor* (default: host)."""
    return FileURLConverter(flavor).to_path(url)


def path_to_file_url(
    path: str | os.PathLike[str],
    *,
    flavor: PathFlavor | str | None = None,
    cwd: str | None = None,
) -> FileURL:
    """Convert a path to a ``file:`` URL using *flavor* (default: host)."""
    return FileURLConverter(flavor, cwd=cwd).to_url(path)
