"""
Unit tests for plan fingerprints and signatures.

Tests verify:
- Fingerprint equality is element-wise and order-sensitive
- The canonical signature is the first one inserted
- Fingerprints serialize to the persisted shape
"""

import pytest

from indexlog.core.exceptions import ContractViolation
from indexlog.core.models import LogicalPlanFingerprint, Signature


def sig(provider: str, value: str) -> Signature:
    return Signature(provider=provider, value=value)


class TestLogicalPlanFingerprintEquality:
    """Tests for structural fingerprint equality."""

    def test_same_signatures_are_equal(self):
        a = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"), sig("p2", "v2"))
        b = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"), sig("p2", "v2"))
        assert a == b
        assert hash(a) == hash(b)

    def test_order_matters(self):
        a = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"), sig("p2", "v2"))
        b = LogicalPlanFingerprint.from_signatures(sig("p2", "v2"), sig("p1", "v1"))
        assert a != b

    def test_different_value_not_equal(self):
        a = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"))
        b = LogicalPlanFingerprint.from_signatures(sig("p1", "v2"))
        assert a != b

    def test_extra_signature_not_equal(self):
        a = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"))
        b = LogicalPlanFingerprint.from_signatures(sig("p1", "v1"), sig("p2", "v2"))
        assert a != b

    def test_value_relative_to_provider(self):
        """The same value from two providers is two different signatures."""
        assert sig("p1", "same") != sig("p2", "same")


class TestCanonicalSignature:
    """Tests for LogicalPlanFingerprint.canonical()."""

    def test_first_inserted_wins(self):
        fp = LogicalPlanFingerprint.from_signatures(sig("p2", "v2"), sig("p1", "v1"))
        assert fp.canonical() == sig("p2", "v2")

    def test_empty_fingerprint_raises(self):
        with pytest.raises(ContractViolation):
            LogicalPlanFingerprint().canonical()


class TestFingerprintShape:
    """Tests for the persisted field names."""

    def test_to_dict(self):
        fp = LogicalPlanFingerprint.from_signatures(sig("planHash", "abc123"))
        assert fp.to_dict() == {
            "kind": "LogicalPlan",
            "properties": {"signatures": [{"provider": "planHash", "value": "abc123"}]},
        }

    def test_from_dict(self):
        fp = LogicalPlanFingerprint.from_dict(
            {
                "kind": "LogicalPlan",
                "properties": {"signatures": [{"provider": "planHash", "value": "abc123"}]},
            }
        )
        assert fp.signatures == (sig("planHash", "abc123"),)

    def test_wrong_kind_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            LogicalPlanFingerprint.from_dict({"kind": "Physical", "properties": {"signatures": []}})
