"""
Pydantic Settings for indexlog configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import LoggingConfig, PlansConfig

CONFIG_DIR = ".indexlog"
CONFIG_FILE = "config.toml"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .indexlog/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.indexlog] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError) as e:
                _get_logger().debug("Skipping unreadable pyproject.toml at %s: %s", pyproject, e)
                continue
            if "indexlog" in data.get("tool", {}):
                return pyproject

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read one config file.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError("Failed to parse config file", file_path=str(path), cause=e) from e
    except OSError as e:
        raise ConfigFileError("Failed to read config file", file_path=str(path), cause=e) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("indexlog", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    @property
    def config_file(self) -> Path | None:
        return self._config_path or find_config_file(self._start_dir)

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is None:
            path = self.config_file
            self._data = read_config_file(path) if path is not None else {}
            if path is not None:
                _get_logger().debug("Loaded config from %s", path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        return self._load_toml().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return dict(self._load_toml())


class IndexLogSettings(BaseSettings):
    """indexlog configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (INDEXLOG_<section>__<field>)
    3. TOML config file (.indexlog/config.toml or pyproject.toml [tool.indexlog])
    4. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="INDEXLOG_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    plans: PlansConfig = PlansConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source below environment variables.

        The file location cannot be passed through here, so load_settings
        sets it on module-level variables for the duration of the call.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> IndexLogSettings:
    """Load indexlog settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        IndexLogSettings instance with all sources merged

    Raises:
        ConfigFileError: If the selected config file is unreadable or invalid
        ConfigValidationError: If a configured value is invalid
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir
    try:
        return IndexLogSettings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(p) for p in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration value: {first['msg']}",
            key=key,
            value=repr(first.get("input")),
            cause=e,
        ) from e
    finally:
        _current_config_path = None
        _current_start_dir = None
