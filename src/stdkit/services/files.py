"""FileService — copy and existence checks over the filesystem layer."""

from __future__ import annotations

import logging

from stdkit.infrastructure.filesystem import copy_file_sync, exists_sync
from stdkit.services.base import BaseService
from stdkit.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class FileService(BaseService):
    """Thin service wrapper around :mod:`stdkit.infrastructure.filesystem`."""

    def copy(self, src: str, dest: str) -> ServiceResult:
        op = "copy_file"
        try:
            written = copy_file_sync(src, dest)
        except OSError as exc:
            logger.debug("copy %s -> %s failed", src, dest, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="IO_ERROR",
                    message=f"Cannot copy {src} to {dest}: {exc.strerror or exc}",
                    detail={"src": src, "dest": dest},
                ),
            )
        return ServiceResult(ok=True, op=op, data={"src": src, "dest": str(written)})

    def exists(self, path: str) -> ServiceResult:
        return ServiceResult(ok=True, op="exists", data={"path": path, "exists": exists_sync(path)})
