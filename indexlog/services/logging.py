"""
Logger implementation for indexlog internal diagnostics.

Wraps stdlib logging. Console output goes to stderr; file output goes to a
rotating log under ~/.indexlog unless a path is configured.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger

DEFAULT_LOG_FILE = Path.home() / ".indexlog" / "indexlog.log"


class IndexLogLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    All handlers hang off the ``indexlog`` logger, which does not propagate
    to the root logger so host applications keep control of their own output.
    """

    MAX_FILE_SIZE = 5 * 1024 * 1024
    BACKUP_COUNT = 2
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "indexlog",
        level: str = "warning",
        console_enabled: bool = False,
        file_enabled: bool = True,
        log_file: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable rotating file output
            log_file: File to write to (default: ~/.indexlog/indexlog.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # handlers filter
        self._logger.handlers.clear()
        self._logger.propagate = False

        self._handlers: list[logging.Handler] = []
        formatter = logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

        if console_enabled:
            self._add_handler(logging.StreamHandler(sys.stderr), formatter)

        if file_enabled:
            path = log_file or DEFAULT_LOG_FILE
            path.parent.mkdir(parents=True, exist_ok=True)
            self._add_handler(
                RotatingFileHandler(path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT),
                formatter,
            )

        self.set_level(level)

    def _add_handler(self, handler: logging.Handler, formatter: logging.Formatter) -> None:
        handler.setFormatter(formatter)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._handlers)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers. Unknown names fall back to warning."""
        lvl = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        for handler in self._handlers:
            handler.setLevel(lvl)


class NullLogger(ILogger):
    """No-op logger used when nothing was bootstrapped."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
