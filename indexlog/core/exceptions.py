"""
Custom exception hierarchy for indexlog.

Every failure the record model can surface is a typed exception carrying
debugging context. Nothing in indexlog retries; callers decide.

CLI exit codes by family (1 is left to `indexlog compare` for "different"):
    2  plan errors (no session, undecodable plan)
    3  contract violations in a stored record
    4  unreadable records and schema strings
    5  configuration errors
    6  plugin errors
"""

from __future__ import annotations


class IndexLogException(Exception):
    """
    Base exception for all indexlog errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (index name, session, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Plan Errors
# =============================================================================


class PlanError(IndexLogException):
    """Base class for errors raised while resolving a serialized source plan."""

    exit_code: int = 2


class MissingContextError(PlanError):
    """
    No active plan session is available.

    Raised whenever a raw plan has to be deserialized (plan equality,
    resolving the plan of an index) and the caller did not supply a session.
    """

    exit_code: int = 2
    recoverable: bool = False

    def __init__(
        self,
        message: str = "Could not find an active plan session.",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class DeserializationError(PlanError):
    """
    Raw plan text could not be turned back into a plan.

    Raised for malformed text and for plans the session's engine
    does not understand.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        session: str | None = None,
        raw_plan: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if session:
            ctx["session"] = session
        if raw_plan is not None:
            ctx["raw_plan"] = raw_plan if len(raw_plan) <= 64 else raw_plan[:61] + "..."
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Record Errors
# =============================================================================


class SchemaParseError(IndexLogException, ValueError):
    """
    Serialized schema string is not a valid structured type.

    Inherits from ValueError so callers that already guard JSON decoding
    with ValueError keep working.
    """

    exit_code: int = 4
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        schema_string: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if schema_string is not None:
            ctx["schema_string"] = (
                schema_string if len(schema_string) <= 64 else schema_string[:61] + "..."
            )
        super().__init__(message, context=ctx, cause=cause)


class ContractViolation(IndexLogException, AssertionError):
    """
    A stored record breaks an invariant the model relies on.

    This is data corruption or a programming error, never something to
    recover from by picking an arbitrary value.
    """

    exit_code: int = 3
    recoverable: bool = False


# =============================================================================
# Configuration Errors
# =============================================================================


class IndexLogConfigError(IndexLogException):
    """Base class for configuration-related errors."""

    exit_code: int = 5


class ConfigFileError(IndexLogConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(IndexLogConfigError, ValueError):
    """Invalid or missing configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Plugin Errors
# =============================================================================


class IndexLogPluginError(IndexLogException):
    """Base class for plugin-related errors."""

    exit_code: int = 6


class PluginLoadError(IndexLogPluginError):
    """
    Error loading or instantiating a plugin.

    Raised when a plugin module cannot be imported or
    a plugin class cannot be instantiated.
    """

    def __init__(
        self,
        message: str,
        *,
        plugin_name: str | None = None,
        plugin_type: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if plugin_name:
            ctx["plugin_name"] = plugin_name
        if plugin_type:
            ctx["plugin_type"] = plugin_type
        super().__init__(message, context=ctx, cause=cause)


class PluginNotFoundError(IndexLogPluginError):
    """
    Requested plugin not found.

    Raised when a plan session is requested by a name nobody registered.
    """

    def __init__(
        self,
        message: str,
        *,
        plugin_name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if plugin_name:
            ctx["plugin_name"] = plugin_name
        super().__init__(message, context=ctx, cause=cause)
