"""
JSON plan session.

Reference engine for plans serialized as JSON trees, for example

    {"node": "Project", "columns": ["a"], "children": [
        {"node": "Relation", "path": "/data/t1", "_hashCode": 91817}
    ]}

Keys starting with an underscore hold lazily computed values (cached hash
codes and the like). They depend on when the plan was serialized, not on
what the plan is, so they are dropped before comparing.
"""

from __future__ import annotations

import json
from typing import Any

from ...core.exceptions import DeserializationError
from ...core.interfaces.plan import IPlanHandle, IPlanSession

LAZY_FIELD_PREFIX = "_"


def _strip_lazy_fields(node: Any) -> Any:
    if isinstance(node, dict):
        return {
            k: _strip_lazy_fields(v)
            for k, v in node.items()
            if not k.startswith(LAZY_FIELD_PREFIX)
        }
    if isinstance(node, list):
        return [_strip_lazy_fields(v) for v in node]
    return node


class JsonPlan(IPlanHandle):
    """A JSON plan tree with lazy fields removed."""

    def __init__(self, tree: dict[str, Any]) -> None:
        self._tree = tree

    @property
    def tree(self) -> dict[str, Any]:
        return self._tree

    @property
    def node(self) -> str | None:
        return self._tree.get("node")

    def fast_equals(self, other: IPlanHandle) -> bool:
        return isinstance(other, JsonPlan) and self._tree == other._tree

    def __repr__(self) -> str:
        return f"JsonPlan(node={self.node!r})"


class JsonPlanSession(IPlanSession):
    """Deserializes JSON plan trees. Stateless, so safe to share across threads."""

    @property
    def name(self) -> str:
        return "json"

    def deserialize_plan(self, raw_plan: str) -> JsonPlan:
        try:
            tree = json.loads(raw_plan)
        except json.JSONDecodeError as e:
            raise DeserializationError(
                f"Plan is not valid JSON: {e.msg}",
                session=self.name,
                raw_plan=raw_plan,
                cause=e,
            ) from e

        if not isinstance(tree, dict):
            raise DeserializationError(
                "Plan must be a JSON object",
                session=self.name,
                raw_plan=raw_plan,
            )
        return JsonPlan(_strip_lazy_fields(tree))
