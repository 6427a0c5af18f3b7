"""
Application bootstrap for indexlog.

Initializes the DI container with the logger and plan session plugins.
Library callers that never bootstrap still work: services fall back to
NullLogger and plan sessions are passed in directly.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .registry import discover_plugins

_initialized = False


def bootstrap(config_path: Path | None = None, start_dir: str | None = None) -> ServiceContainer:
    """
    Bootstrap the indexlog application.

    Args:
        config_path: Optional explicit config file
        start_dir: Directory to start the config search from

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    _register_core_services(container, config_path, start_dir)
    discover_plugins()

    _initialized = True
    return container


def _register_core_services(
    container: ServiceContainer,
    config_path: Path | None,
    start_dir: str | None,
) -> None:
    """Register core application services."""
    from ..services.logging import IndexLogLogger
    from .settings import load_settings

    settings = load_settings(config_path=config_path, start_dir=start_dir)

    def create_logger() -> ILogger:
        return IndexLogLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
            log_file=settings.logging.path,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    """Check if the application has been bootstrapped."""
    return _initialized
