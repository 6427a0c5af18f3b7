"""
Plan deserialization seam.

Every path that needs a real plan back from its serialized text goes
through deserialize_plan: plan equality and IndexLogEntry.resolved_plan.
The session is always an explicit argument.
"""

from __future__ import annotations

from ..core.di import resolve_or_default
from ..core.exceptions import DeserializationError, IndexLogException, MissingContextError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.plan import IPlanHandle, IPlanSession


def _get_logger() -> ILogger:
    from .logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def require_session(session: IPlanSession | None) -> IPlanSession:
    """Return the session, or raise MissingContextError when there is none."""
    if session is None:
        raise MissingContextError()
    return session


def deserialize_plan(raw_plan: str, session: IPlanSession | None) -> IPlanHandle:
    """
    Turn serialized plan text back into an engine plan.

    Args:
        raw_plan: Serialized plan text
        session: Active plan session supplied by the caller

    Returns:
        Engine handle for the plan

    Raises:
        MissingContextError: If session is None
        DeserializationError: If the engine cannot parse the text
    """
    session = require_session(session)
    _get_logger().debug("Deserializing plan with session %s (%d chars)", session.name, len(raw_plan))

    try:
        return session.deserialize_plan(raw_plan)
    except IndexLogException:
        raise
    except Exception as e:
        # Engines raise their own parse errors; normalize them
        raise DeserializationError(
            f"Plan session {session.name!r} failed to deserialize plan: {e}",
            session=session.name,
            raw_plan=raw_plan,
            cause=e,
        ) from e
