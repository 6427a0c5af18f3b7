"""
Plan engine interface definitions.

indexlog never executes queries. It only needs two things from a query
engine: turning serialized plan text back into a plan, and asking the
engine whether two plans are structurally the same. Engines plug in by
implementing these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IPlanHandle(ABC):
    """A deserialized plan owned by some engine."""

    @abstractmethod
    def fast_equals(self, other: IPlanHandle) -> bool:
        """
        Structural equality as judged by the engine.

        Must ignore lazily computed fields that make two serializations
        of the same plan differ byte for byte.
        """
        pass


class IPlanSession(ABC):
    """
    An active engine session able to deserialize plans.

    Sessions are owned by the caller and passed explicitly to every
    operation that needs one. Implementations must keep
    deserialize_plan free of side effects on shared state so that
    concurrent comparisons need no locking.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Session identifier used for plugin registration.

        Examples: 'json', 'spark'
        """
        pass

    @abstractmethod
    def deserialize_plan(self, raw_plan: str) -> IPlanHandle:
        """
        Parse serialized plan text.

        Args:
            raw_plan: Serialized plan text as stored in a record

        Returns:
            Engine handle for the plan

        Raises:
            DeserializationError: If the text is malformed
        """
        pass
