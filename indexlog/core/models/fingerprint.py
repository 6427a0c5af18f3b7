"""
Plan fingerprint models.

A fingerprint is what makes a source plan recognizable without looking at
its serialized text: one signature per fingerprinting provider.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from ..exceptions import ContractViolation
from .base import RecordModel


class Signature(RecordModel):
    """Output of one fingerprinting provider over a source plan.

    The value is only meaningful relative to the provider that made it.
    """

    provider: str
    value: str


class LogicalPlanFingerprintProperties(RecordModel):
    """Signatures in insertion order."""

    signatures: tuple[Signature, ...] = Field(default_factory=tuple)


class LogicalPlanFingerprint(RecordModel):
    """Fingerprint of a logical plan.

    Two fingerprints are equal iff their signature sequences are equal
    element by element, in order.
    """

    kind: Literal["LogicalPlan"] = "LogicalPlan"
    properties: LogicalPlanFingerprintProperties = Field(
        default_factory=LogicalPlanFingerprintProperties
    )

    @classmethod
    def from_signatures(cls, *signatures: Signature) -> LogicalPlanFingerprint:
        return cls(properties=LogicalPlanFingerprintProperties(signatures=signatures))

    @property
    def signatures(self) -> tuple[Signature, ...]:
        return self.properties.signatures

    def canonical(self) -> Signature:
        """Return the canonical signature: the first one inserted.

        Raises:
            ContractViolation: If the fingerprint holds no signature at all
        """
        if not self.properties.signatures:
            raise ContractViolation("Plan fingerprint has no signatures.")
        return self.properties.signatures[0]
