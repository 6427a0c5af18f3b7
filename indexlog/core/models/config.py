"""
Configuration models.

Sections of the indexlog configuration, loaded from TOML and environment
variables by indexlog.core.settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import IndexLogBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(IndexLogBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True
    path: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class PlansConfig(ConfigBaseModel):
    """Plan session configuration section."""

    session: str | None = Field(
        default=None, description="Plan session used by `indexlog compare` when none is given"
    )

    @field_validator("session", mode="before")
    @classmethod
    def empty_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

