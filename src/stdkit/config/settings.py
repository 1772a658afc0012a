"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``STDKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``stdkit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` fed by
:func:`stdkit.config.discovery.find_config`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from stdkit.config.discovery import find_config
from stdkit.config.models import DatesConfig, PathsConfig
from stdkit.domain.types import PathFlavor


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``stdkit.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path for the settings object currently being constructed.
_tls = threading.local()


class StdkitSettings(BaseSettings):
    """Unified settings for the stdkit CLI and services.

    Frozen after construction and stored on the CLI's ``AppContext``.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        flavor: ``--flavor`` override; wins over ``[paths] flavor``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STDKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    flavor: PathFlavor | None = None

    # --- TOML sections ---
    paths: PathsConfig = Field(default_factory=PathsConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)

    @property
    def path_flavor(self) -> PathFlavor:
        """Effective flavor for file URL conversion."""
        return self.flavor or self.paths.flavor

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> StdkitSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* if given, otherwise discovers
        ``stdkit.toml`` walking up from *start* (default: cwd).  Flags
        left as None fall through to env, TOML, and defaults.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
