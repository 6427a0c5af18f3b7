"""
Unit tests for the plan deserialization seam.
"""

import pytest

from indexlog.core.exceptions import DeserializationError, MissingContextError
from indexlog.core.interfaces.plan import IPlanHandle, IPlanSession
from indexlog.services.plan_serde import deserialize_plan, require_session


class ExplodingSession(IPlanSession):
    """Session whose engine fails with its own exception type."""

    @property
    def name(self) -> str:
        return "exploding"

    def deserialize_plan(self, raw_plan: str) -> IPlanHandle:
        raise RuntimeError("engine could not parse plan")


class TestRequireSession:
    def test_none(self):
        with pytest.raises(MissingContextError, match="Could not find an active plan session"):
            require_session(None)

    def test_passthrough(self, json_session):
        assert require_session(json_session) is json_session


class TestDeserializePlan:
    def test_missing_session(self):
        with pytest.raises(MissingContextError) as exc_info:
            deserialize_plan("{}", None)
        assert exc_info.value.exit_code == 2
        assert exc_info.value.recoverable is False

    def test_delegates_to_session(self, json_session, plan_text):
        plan = deserialize_plan(plan_text(), json_session)
        assert plan.fast_equals(json_session.deserialize_plan(plan_text()))

    def test_session_errors_pass_through(self, json_session):
        with pytest.raises(DeserializationError) as exc_info:
            deserialize_plan("not-a-real-plan", json_session)
        assert exc_info.value.context["session"] == "json"

    def test_engine_errors_normalized(self):
        with pytest.raises(DeserializationError) as exc_info:
            deserialize_plan("x" * 100, ExplodingSession())

        error = exc_info.value
        assert error.context["session"] == "exploding"
        assert len(error.context["raw_plan"]) == 64
        assert error.context["raw_plan"].endswith("...")
        assert isinstance(error.__cause__, RuntimeError)
