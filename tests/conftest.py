"""Shared pytest fixtures for stdkit tests."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from stdkit.config.settings import StdkitSettings

# POSIX TZ rule strings need no tz database on the host.
EASTERN_TZ = "EST5EDT,M3.2.0,M11.1.0"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STDKIT_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("STDKIT_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    ours = logging.getLogger("stdkit")
    handlers = root.handlers[:]
    levels = (root.level, ours.level)
    yield
    root.handlers = handlers
    root.setLevel(levels[0])
    ours.setLevel(levels[1])


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stdkit.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., StdkitSettings]:
    """Factory for settings that ignore any stdkit.toml outside tmp_path."""

    def _make(**flags: Any) -> StdkitSettings:
        return StdkitSettings.from_cli(start=tmp_path, **flags)

    return _make


@pytest.fixture
def posix_settings(make_settings: Callable[..., StdkitSettings]) -> StdkitSettings:
    return make_settings(flavor="posix")


@pytest.fixture
def windows_settings(make_settings: Callable[..., StdkitSettings]) -> StdkitSettings:
    return make_settings(flavor="windows")


def _set_tz(monkeypatch: pytest.MonkeyPatch, tz: str) -> None:
    monkeypatch.setenv("TZ", tz)
    time.tzset()


@pytest.fixture
def local_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[Callable[[str], None]]:
    """Switch the process-local timezone for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is unavailable on this platform")

    yield lambda tz: _set_tz(monkeypatch, tz)

    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def eastern_tz(local_tz: Callable[[str], None]) -> None:
    """US Eastern time with daylight saving (EST/EDT)."""
    local_tz(EASTERN_TZ)


@pytest.fixture
def utc_tz(local_tz: Callable[[str], None]) -> None:
    """Local time equal to UTC."""
    local_tz("UTC0")
