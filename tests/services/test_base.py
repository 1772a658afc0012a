"""Tests for BaseService and service inheritance."""

from collections.abc import Callable

import pytest

from stdkit.config.settings import StdkitSettings
from stdkit.domain.errors import FormatMismatchError, InvalidArgumentError
from stdkit.services.base import BaseService
from stdkit.services.dates import DateService
from stdkit.services.files import FileService
from stdkit.services.urls import UrlService


class TestBaseService:
    def test_settings_stored(self, posix_settings: StdkitSettings) -> None:
        service = BaseService(posix_settings)
        assert service._settings is posix_settings

    def test_failure_carries_code(self, posix_settings: StdkitSettings) -> None:
        service = BaseService(posix_settings)
        result = service._failure("parse_date", FormatMismatchError("nope"), text="x")
        assert result.ok is False
        assert result.op == "parse_date"
        assert result.error is not None
        assert result.error.code == "FORMAT_MISMATCH"
        assert result.error.message == "nope"
        assert result.error.detail == {"text": "x"}

    def test_parse_iso(self) -> None:
        assert BaseService._parse_iso("2020-01-02T03:04").hour == 3

    def test_parse_iso_rejects_garbage(self) -> None:
        with pytest.raises(InvalidArgumentError, match="ISO 8601"):
            BaseService._parse_iso("yesterday")


ALL_SERVICES = [DateService, UrlService, FileService]


class TestServiceInheritance:
    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_inherits_base_service(self, service_cls: type) -> None:
        assert issubclass(service_cls, BaseService)

    @pytest.mark.parametrize("service_cls", ALL_SERVICES, ids=lambda c: c.__name__)
    def test_settings_injection(
        self, service_cls: type, make_settings: Callable[..., StdkitSettings]
    ) -> None:
        settings = make_settings()
        assert service_cls(settings)._settings is settings
