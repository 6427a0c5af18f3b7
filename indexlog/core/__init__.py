"""
Core of indexlog: the record models, their collaborators and plumbing.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Plan session plugin registry with auto-discovery
- Application bootstrap for initialization
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    ContractViolation,
    DeserializationError,
    IndexLogConfigError,
    IndexLogException,
    IndexLogPluginError,
    MissingContextError,
    PlanError,
    PluginLoadError,
    PluginNotFoundError,
    SchemaParseError,
)
from .registry import discover_plugins, register_plan_session

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ContractViolation",
    "DeserializationError",
    "IndexLogConfigError",
    "IndexLogException",
    "IndexLogPluginError",
    "MissingContextError",
    "PlanError",
    "PluginLoadError",
    "PluginNotFoundError",
    "SchemaParseError",
    "ServiceContainer",
    "bootstrap",
    "discover_plugins",
    "get_container",
    "is_initialized",
    "register_plan_session",
    "reset",
]
