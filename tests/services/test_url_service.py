"""Tests for UrlService — flavor selection and error mapping."""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from stdkit.config.settings import StdkitSettings
from stdkit.services.urls import UrlService


class TestPosix:
    def test_to_path(self, posix_settings: StdkitSettings) -> None:
        result = UrlService(posix_settings).to_path("file:///tmp/a%20b")
        assert result.ok
        assert result.op == "file_url_to_path"
        assert result.data == {"url": "file:///tmp/a%20b", "path": "/tmp/a b"}
        assert result.meta == {"flavor": "posix"}

    def test_to_url(self, posix_settings: StdkitSettings) -> None:
        result = UrlService(posix_settings).to_url("/tmp/a b")
        assert result.op == "path_to_file_url"
        assert result.data == {"path": "/tmp/a b", "url": "file:///tmp/a%20b", "host": ""}

    def test_host_rejected(self, posix_settings: StdkitSettings) -> None:
        result = UrlService(posix_settings).to_path("file://server/share")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_HOST"
        assert result.error.detail["flavor"] == "posix"

    def test_scheme_rejected(self, posix_settings: StdkitSettings) -> None:
        result = UrlService(posix_settings).to_path("https://example.com/")
        assert result.error is not None
        assert result.error.code == "INVALID_SCHEME"


class TestWindows:
    def test_to_path(self, windows_settings: StdkitSettings) -> None:
        result = UrlService(windows_settings).to_path("file:///C:/Temp/x.txt")
        assert result.data["path"] == "C:\\Temp\\x.txt"
        assert result.meta == {"flavor": "windows"}

    def test_unc_to_url(self, windows_settings: StdkitSettings) -> None:
        result = UrlService(windows_settings).to_url("\\\\nas\\share\\f")
        assert result.data["url"] == "file://nas/share/f"
        assert result.data["host"] == "nas"

    def test_missing_drive(self, windows_settings: StdkitSettings) -> None:
        result = UrlService(windows_settings).to_path("file:///Temp/x")
        assert result.error is not None
        assert result.error.code == "PATH_NOT_ABSOLUTE"

    @pytest.mark.skipif(os.name == "nt", reason="needs a drive-less process cwd")
    def test_relative_without_drive_in_cwd(self, windows_settings: StdkitSettings) -> None:
        result = UrlService(windows_settings).to_url("notes\\a.txt")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PATH_NOT_ABSOLUTE"
        assert result.error.detail["flavor"] == "windows"

    def test_port_rejected(self, windows_settings: StdkitSettings) -> None:
        result = UrlService(windows_settings).to_path("file://server:8080/share/x")
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"


class TestConfig:
    def test_cwd_from_config(
        self, tmp_path: Path, make_settings: Callable[..., StdkitSettings]
    ) -> None:
        (tmp_path / "stdkit.toml").write_text('[paths]\nflavor = "posix"\ncwd = "/srv/base"\n')
        service = UrlService(make_settings())
        assert service.flavor == "posix"
        assert service.to_url("f.txt").data["url"] == "file:///srv/base/f.txt"

    def test_flag_overrides_config_flavor(
        self, tmp_path: Path, make_settings: Callable[..., StdkitSettings]
    ) -> None:
        (tmp_path / "stdkit.toml").write_text('[paths]\nflavor = "posix"\n')
        assert UrlService(make_settings(flavor="windows")).flavor == "windows"
