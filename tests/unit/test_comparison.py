"""
Unit tests for component-by-component entry comparison.
"""

import pytest

from indexlog.constants import States
from indexlog.core.exceptions import ContractViolation, MissingContextError
from indexlog.core.models import Signature
from indexlog.services.comparison import Outcome, compare_entries

COMPONENTS = ["config", "signature", "num_buckets", "content_root", "source", "state"]


class TestCompareEntries:
    def test_identical(self, make_entry):
        report = compare_entries(make_entry(), make_entry())
        assert [c.component for c in report.components] == COMPONENTS
        assert all(c.outcome == Outcome.EQUAL for c in report.components)
        assert report.equal is True
        assert report.differences == []

    def test_agrees_with_equality(self, make_entry):
        pairs = [
            (make_entry(), make_entry(files=("other",))),
            (make_entry(), make_entry(num_buckets=16)),
            (make_entry(), make_entry(state=States.CREATING)),
        ]
        for left, right in pairs:
            assert compare_entries(left, right).equal == (left == right)

    def test_reports_every_difference(self, make_entry):
        report = compare_entries(
            make_entry(),
            make_entry(num_buckets=16, root="/out/elsewhere", state=States.DELETED),
        )
        assert report.equal is False
        assert [c.component for c in report.differences] == ["num_buckets", "content_root", "state"]

        buckets = report.get("num_buckets")
        assert (buckets.left, buckets.right) == ("4", "16")
        assert report.get("state").right == "DELETED"

    def test_config_rendered(self, make_entry):
        report = compare_entries(make_entry(), make_entry(name="idx2"))
        config = report.get("config")
        assert config.outcome == Outcome.DIFFERENT
        assert config.right == "[indexName: idx2; indexedColumns: a; includedColumns: b]"

    def test_unknown_component(self, make_entry):
        with pytest.raises(KeyError):
            compare_entries(make_entry(), make_entry()).get("nope")

    def test_signature_contract(self, make_entry, make_plan):
        plan = make_plan("", Signature(provider="p1", value="v1"), Signature(provider="p2", value="v2"))
        with pytest.raises(ContractViolation):
            compare_entries(make_entry(plan=plan), make_entry())

    def test_invalid_columns(self, make_entry):
        with pytest.raises(ContractViolation):
            compare_entries(make_entry(indexed=("a",), included=("a",)), make_entry())


class TestRawPlans:
    def test_unresolved_without_session(self, make_entry, make_plan, plan_text):
        left = make_entry(plan=make_plan(plan_text(_hashCode=1)))
        right = make_entry(plan=make_plan(plan_text(_hashCode=2)))

        report = compare_entries(left, right)
        assert report.get("source").outcome == Outcome.UNRESOLVED
        assert report.differences == []
        with pytest.raises(MissingContextError):
            _ = report.equal

    def test_other_difference_decides_without_session(self, make_entry, make_plan, plan_text):
        left = make_entry(plan=make_plan(plan_text()))
        right = make_entry(plan=make_plan(plan_text()), num_buckets=8)
        assert compare_entries(left, right).equal is False

    def test_source_data_difference_decides_without_session(
        self, make_entry, make_plan, plan_text, source_data
    ):
        left = make_entry(plan=make_plan(plan_text()))
        right = make_entry(plan=make_plan(plan_text()), data=(source_data("/data/t2"),))
        report = compare_entries(left, right)
        assert report.get("source").outcome == Outcome.DIFFERENT

    def test_resolved_with_session(self, make_entry, make_plan, plan_text, json_session):
        left = make_entry(plan=make_plan(plan_text(_hashCode=1)))
        right = make_entry(plan=make_plan(plan_text(_hashCode=2)))
        report = compare_entries(left, right, json_session)
        assert report.get("source").outcome == Outcome.EQUAL
        assert report.equal is True

    def test_structural_difference_with_session(self, make_entry, make_plan, plan_text, json_session):
        left = make_entry(plan=make_plan(plan_text()))
        right = make_entry(plan=make_plan(plan_text({"node": "Relation"})))
        report = compare_entries(left, right, json_session)
        assert report.get("source").outcome == Outcome.DIFFERENT
        assert report.equal is False
