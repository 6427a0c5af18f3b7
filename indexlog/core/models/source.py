"""
Source models.

A source is the pair an index was built from: the query plan (serialized
text plus fingerprint) and the data locations that plan reads.

Plan equality is semantic, not textual. Serializing the same plan twice
can produce different text because some plan fields are computed lazily,
so two raw plans are compared by deserializing both and asking the engine.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ...services.plan_serde import deserialize_plan, require_session
from ..interfaces.plan import IPlanSession
from .base import RecordModel
from .content import Content
from .fingerprint import LogicalPlanFingerprint


class SparkPlanProperties(RecordModel):
    """Serialized plan text and the fingerprint taken when it was captured."""

    raw_plan: str = Field(default="", alias="rawPlan")
    fingerprint: LogicalPlanFingerprint


class SparkPlan(RecordModel):
    """The source plan of an index.

    ``==`` is ``equivalent(other)`` without a session, so comparing plans
    that carry raw text raises MissingContextError; pass a session to
    ``equivalent`` instead.
    """

    kind: Literal["Spark"] = "Spark"
    properties: SparkPlanProperties

    @property
    def raw_plan(self) -> str:
        return self.properties.raw_plan

    @property
    def fingerprint(self) -> LogicalPlanFingerprint:
        return self.properties.fingerprint

    def equivalent(self, other: SparkPlan, session: IPlanSession | None = None) -> bool:
        """
        Whether both plans describe the same logical plan.

        Plans are equivalent iff their fingerprints are equal and either
        both raw plans are empty or the session's engine judges the
        deserialized plans structurally equal. A plan with raw text is
        never equivalent to one without.

        Raises:
            MissingContextError: If either raw plan is non-empty and session is None
            DeserializationError: If either raw plan cannot be parsed
        """
        if self.raw_plan or other.raw_plan:
            session = require_session(session)
            if not (self.raw_plan and other.raw_plan):
                return False
            this_plan = deserialize_plan(self.raw_plan, session)
            that_plan = deserialize_plan(other.raw_plan, session)
            if not this_plan.fast_equals(that_plan):
                return False
        return self.fingerprint == other.fingerprint

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparkPlan):
            return NotImplemented
        return self.equivalent(other)

    def __hash__(self) -> int:
        # Raw text varies across serializations of one plan
        return hash(self.fingerprint)


class HdfsProperties(RecordModel):
    content: Content


class Hdfs(RecordModel):
    """A content tree read by the source plan."""

    kind: Literal["HDFS"] = "HDFS"
    properties: HdfsProperties

    @classmethod
    def from_content(cls, content: Content) -> Hdfs:
        return cls(properties=HdfsProperties(content=content))

    @property
    def content(self) -> Content:
        return self.properties.content


class Source(RecordModel):
    """One source plan plus one or more data locations."""

    plan: SparkPlan
    data: tuple[Hdfs, ...] = Field(min_length=1)

    def equivalent(self, other: Source, session: IPlanSession | None = None) -> bool:
        """Plans equivalent (see SparkPlan.equivalent) and data equal in order."""
        return self.plan.equivalent(other.plan, session) and self.data == other.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Source):
            return NotImplemented
        return self.equivalent(other)

    def __hash__(self) -> int:
        return hash((self.plan, self.data))
