"""
Dependency injection container for indexlog.

Uses dependency-injector for DI with support for:
- Lazily created singletons
- Interface-based resolution
- A plugin registry for plan sessions
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

from .exceptions import PluginNotFoundError
from .interfaces.plan import IPlanSession

T = TypeVar("T")


class ServiceContainer:
    """
    Dependency injection container for indexlog.

    Combines dependency-injector's DI capabilities with a registry of
    plan session factories keyed by session name.
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        """Initialize the container with empty registries."""
        # Dynamic provider storage (interface -> provider)
        self._providers: dict[type, providers.Provider] = {}

        # Plan session plugins (name -> factory)
        self._plan_sessions: dict[str, Callable[[], IPlanSession]] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Get the global container instance (singleton)."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the global container (for testing)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Core service registration (uses dependency-injector providers)
    # -------------------------------------------------------------------------

    def register_singleton(self, interface: type[T], factory: Callable[[], T]) -> None:
        """
        Register a lazily created singleton service.

        Args:
            interface: The interface/protocol type
            factory: Factory function, called on first resolve
        """
        self._providers[interface] = providers.Singleton(factory)

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Try to resolve a service, returning None if not registered."""
        if interface not in self._providers:
            return None
        return self._providers[interface]()

    # -------------------------------------------------------------------------
    # Plan session registry
    # -------------------------------------------------------------------------

    def register_plan_session(
        self,
        name: str,
        factory: Callable[[], IPlanSession],
    ) -> None:
        """
        Register a plan session factory.

        Args:
            name: Session name (e.g., 'json', 'spark')
            factory: Zero-argument callable (usually the class) creating a session
        """
        self._plan_sessions[name] = factory

    def get_plan_session(self, name: str) -> IPlanSession:
        """
        Create a plan session by name.

        Raises:
            PluginNotFoundError: If no session registered under name
        """
        if name not in self._plan_sessions:
            raise PluginNotFoundError(
                f"No plan session registered: {name}",
                plugin_name=name,
                context={"available": sorted(self._plan_sessions)},
            )
        return self._plan_sessions[name]()

    def list_plan_sessions(self) -> list[str]:
        """List registered plan session names."""
        return sorted(self._plan_sessions)


# -------------------------------------------------------------------------
# Module-level access
# -------------------------------------------------------------------------


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
