"""UrlService — file URL <-> path conversion under the configured flavor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stdkit.domain.errors import StdkitError
from stdkit.domain.fileurl import FileURLConverter
from stdkit.services.base import BaseService
from stdkit.services.result import ServiceResult

if TYPE_CHECKING:
    from stdkit.config.settings import StdkitSettings

logger = logging.getLogger(__name__)


class UrlService(BaseService):
    """Converts between ``file:`` URLs and filesystem paths."""

    def __init__(self, settings: StdkitSettings) -> None:
        super().__init__(settings)
        self._converter = FileURLConverter(settings.path_flavor, cwd=settings.paths.cwd)

    @property
    def flavor(self) -> str:
        return str(self._converter.flavor)

    def to_path(self, url: str) -> ServiceResult:
        op = "file_url_to_path"
        try:
            path = self._converter.to_path(url)
        except StdkitError as exc:
            return self._failure(op, exc, url=url, flavor=self.flavor)
        logger.debug("Converted %s -> %s (%s)", url, path, self.flavor)
        return ServiceResult(
            ok=True,
            op=op,
            data={"url": url, "path": path},
            meta={"flavor": self.flavor},
        )

    def to_url(self, path: str) -> ServiceResult:
        op = "path_to_file_url"
        try:
            url = self._converter.to_url(path)
        except StdkitError as exc:
            return self._failure(op, exc, path=path, flavor=self.flavor)
        logger.debug("Converted %s -> %s (%s)", path, url, self.flavor)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": path, "url": url.href, "host": url.host},
            meta={"flavor": self.flavor},
        )
