"""
Plugin registry with auto-discovery.

Automatically discovers and registers plan session plugins from:
1. Built-in plugins in indexlog.plugins.plans
2. Entry point plugins from external packages
"""

import importlib
import pkgutil
from importlib.metadata import entry_points

from .container import ServiceContainer, get_container
from .di import resolve_or_default
from .exceptions import PluginLoadError
from .interfaces.logger import ILogger
from .interfaces.plan import IPlanSession

ENTRY_POINT_GROUP = "indexlog.plugins"


def _get_logger() -> ILogger:
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def discover_plugins(package_name: str = "indexlog.plugins.plans") -> None:
    """
    Auto-discover and register plan session plugins.

    Args:
        package_name: Package to scan for built-in sessions
    """
    container = get_container()
    _discover_builtin_plugins(container, package_name)
    _discover_entrypoint_plugins(container)


def _discover_builtin_plugins(container: ServiceContainer, package_name: str) -> None:
    """Scan a package for IPlanSession implementations."""
    package = importlib.import_module(package_name)
    package_path = getattr(package, "__path__", None)
    if not package_path:
        return

    for _importer, modname, _ispkg in pkgutil.iter_modules(package_path):
        # Skip private modules and base classes
        if modname.startswith("_") or modname == "base":
            continue

        module = importlib.import_module(f"{package_name}.{modname}")
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if _implements(attr, IPlanSession):
                register_plan_session(attr, container)


def _implements(cls: object, interface: type) -> bool:
    """
    Check if a class implements an interface.

    Returns True if cls is a concrete subclass of interface
    (not the interface itself and not abstract).
    """
    return (
        isinstance(cls, type)
        and issubclass(cls, interface)
        and cls is not interface
        and not getattr(cls, "__abstractmethods__", set())
    )


def _discover_entrypoint_plugins(container: ServiceContainer) -> None:
    """
    Discover plan sessions registered via entry points.

    External packages can register sessions by adding to pyproject.toml:

        [project.entry-points."indexlog.plugins"]
        spark = "my_package.sessions:SparkPlanSession"
    """
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            plugin_cls = ep.load()
        except (ImportError, AttributeError) as e:
            # A broken external plugin must not break the built-in ones
            _get_logger().warning("Failed to load entry point plugin %s: %s", ep.name, e)
            continue

        if not _implements(plugin_cls, IPlanSession):
            _get_logger().warning(
                "Entry point plugin %s does not implement IPlanSession, skipping", ep.name
            )
            continue
        register_plan_session(plugin_cls, container)


def register_plan_session(cls: type, container: ServiceContainer | None = None) -> type:
    """
    Register a plan session class under its name.

    Usable as a decorator:
        @register_plan_session
        class MySession(IPlanSession):
            ...

    Raises:
        PluginLoadError: If the class cannot be instantiated to read its name
    """
    container = container or get_container()
    try:
        name = cls().name
    except Exception as e:
        raise PluginLoadError(
            f"Could not instantiate plan session {cls.__name__}",
            plugin_name=cls.__name__,
            plugin_type="plan_session",
            cause=e,
        ) from e

    container.register_plan_session(name, cls)
    _get_logger().debug("Registered plan session %s (%s.%s)", name, cls.__module__, cls.__name__)
    return cls
