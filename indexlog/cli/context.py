"""
Click context extension for the indexlog CLI.

Provides IndexLogContext, passed to commands via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.settings import IndexLogSettings, load_settings


@dataclass
class IndexLogContext:
    """Extended context passed through the Click command chain.

    Attributes:
        cwd: Current working directory
        config_path: Explicit config file given with --config, if any
        settings: Loaded settings
    """

    cwd: Path
    config_path: Path | None
    settings: IndexLogSettings

    @classmethod
    def create(cls, cwd: Path | None = None, config_path: Path | None = None) -> IndexLogContext:
        """Create a context for the current environment.

        Raises:
            ConfigFileError: If the config file is unreadable
            ConfigValidationError: If a configured value is invalid
        """
        if cwd is None:
            cwd = Path.cwd()
        settings = load_settings(config_path=config_path, start_dir=str(cwd))
        return cls(cwd=cwd, config_path=config_path, settings=settings)
