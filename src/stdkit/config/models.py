"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, stdkit.toml only contains overrides.
An empty (or missing) stdkit.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from stdkit.domain.types import DateFormat, DateTimeFormat, PathFlavor, Unit

# --- stdkit.toml sections ---


class PathsConfig(BaseModel):
    """[paths] section."""

    model_config = {"frozen": True}

    flavor: PathFlavor = Field(default_factory=PathFlavor.host)
    cwd: str | None = None


class DatesConfig(BaseModel):
    """[dates] section."""

    model_config = {"frozen": True}

    date_format: DateFormat = DateFormat.YYYY_MM_DD
    datetime_format: DateTimeFormat = DateTimeFormat.YYYY_MM_DD_HH_MM
    units: list[Unit] = Field(default_factory=lambda: list(Unit), min_length=1)


# --- Full config ---


class StdkitConfig(BaseModel):
    """Top-level stdkit.toml model."""

    model_config = {"frozen": True}

    paths: PathsConfig = Field(default_factory=PathsConfig)
    dates: DatesConfig = Field(default_factory=DatesConfig)
