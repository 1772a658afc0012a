"""Filesystem primitives: copy and existence checks.

Each operation comes in a blocking ``*_sync`` form and an ``async`` form
that runs the blocking call on the default thread pool.  Copy errors
propagate as :class:`OSError`; existence checks never raise.
"""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path

StrPath = str | os.PathLike[str]


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------


def copy_file_sync(src: StrPath, dest: StrPath) -> Path:
    """Copy the contents of *src* to *dest*, replacing *dest* if it exists.

    Only file data is copied, not permissions or timestamps.
    """
    return Path(shutil.copyfile(src, dest))


async def copy_file(src: StrPath, dest: StrPath) -> Path:
    """Async :func:`copy_file_sync`."""
    return await asyncio.to_thread(copy_file_sync, src, dest)


# ---------------------------------------------------------------------------
# Existence
# ---------------------------------------------------------------------------


def exists_sync(path: StrPath) -> bool:
    """Whether *path* exists.  Unreadable or malformed paths count as missing."""
    return os.path.exists(path)


async def exists(path: StrPath) -> bool:
    """Async :func:`exists_sync`."""
    return await asyncio.to_thread(exists_sync, path)
