"""
Component-by-component comparison of two index log entries.

IndexLogEntry.equivalent answers yes or no and stops at the first
mismatch. This service evaluates every component so callers (the
`indexlog compare` command, reuse decisions in an index build) can say
why two entries differ.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ..core.di import resolve_or_default
from ..core.exceptions import MissingContextError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.plan import IPlanSession
from ..core.models.base import ImmutableModel
from ..core.models.index_log_entry import IndexLogEntry


def _get_logger() -> ILogger:
    from .logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


class Outcome(str, Enum):
    """Result of comparing one component."""

    EQUAL = "equal"
    DIFFERENT = "different"
    UNRESOLVED = "unresolved"  # raw plans present, no session


class ComponentResult(ImmutableModel):
    component: str
    outcome: Outcome
    left: str = ""
    right: str = ""


class ComparisonReport(ImmutableModel):
    """Outcome of every equality component, in equality order."""

    left_name: str
    right_name: str
    components: tuple[ComponentResult, ...] = Field(default_factory=tuple)

    @property
    def equal(self) -> bool:
        """False if any component differs, True if all are equal.

        Raises:
            MissingContextError: If nothing differs but the source is unresolved
        """
        if self.differences:
            return False
        unresolved = [c.component for c in self.components if c.outcome == Outcome.UNRESOLVED]
        if unresolved:
            raise MissingContextError(
                "Cannot decide equality without a plan session.",
                context={"unresolved": unresolved},
            )
        return True

    @property
    def differences(self) -> list[ComponentResult]:
        return [c for c in self.components if c.outcome == Outcome.DIFFERENT]

    def get(self, component: str) -> ComponentResult:
        for c in self.components:
            if c.component == component:
                return c
        raise KeyError(component)


def _result(component: str, same: bool, left: object, right: object) -> ComponentResult:
    return ComponentResult(
        component=component,
        outcome=Outcome.EQUAL if same else Outcome.DIFFERENT,
        left=str(left),
        right=str(right),
    )


def _compare_source(
    left: IndexLogEntry, right: IndexLogEntry, session: IPlanSession | None
) -> ComponentResult:
    left_plan, right_plan = left.source.plan, right.source.plan
    if session is None and (left_plan.raw_plan or right_plan.raw_plan):
        # Data and fingerprint can still rule equality out without a session
        if left.source.data != right.source.data or left_plan.fingerprint != right_plan.fingerprint:
            return _result("source", False, "", "")
        return ComponentResult(component="source", outcome=Outcome.UNRESOLVED)
    return _result("source", left.source.equivalent(right.source, session), "", "")


def compare_entries(
    left: IndexLogEntry,
    right: IndexLogEntry,
    session: IPlanSession | None = None,
) -> ComparisonReport:
    """
    Compare two entries component by component.

    Components, in equality order: config, signature, num_buckets,
    content_root, source, state. The source component is UNRESOLVED when a
    raw plan is present, no session is given, and data and fingerprints
    agree.

    Raises:
        ContractViolation: If either entry has an invalid config or not exactly one signature
        DeserializationError: If a raw plan cannot be parsed
    """
    components = (
        _result("config", left.config == right.config, left.config, right.config),
        _result(
            "signature",
            left.signature() == right.signature(),
            left.signature().value,
            right.signature().value,
        ),
        _result("num_buckets", left.num_buckets == right.num_buckets, left.num_buckets, right.num_buckets),
        _result(
            "content_root",
            left.content.root == right.content.root,
            left.content.root,
            right.content.root,
        ),
        _compare_source(left, right, session),
        _result("state", left.state == right.state, left.state, right.state),
    )
    report = ComparisonReport(left_name=left.name, right_name=right.name, components=components)
    _get_logger().debug(
        "Compared %s with %s: %s",
        left.name,
        right.name,
        ", ".join(f"{c.component}={c.outcome}" for c in report.components),
    )
    return report
