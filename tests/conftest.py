"""
Shared pytest fixtures for indexlog tests.

Provides:
- make_entry: Factory for IndexLogEntry values with sensible defaults
- json_session: The built-in JSON plan session
- Isolation of the global service container and of log file output
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from indexlog.constants import States
from indexlog.core.bootstrap import reset
from indexlog.core.models import (
    Columns,
    Content,
    CoveringIndex,
    CoveringIndexProperties,
    Directory,
    Hdfs,
    IndexLogEntry,
    LogicalPlanFingerprint,
    Signature,
    Source,
    SparkPlan,
    SparkPlanProperties,
    StructField,
    StructType,
)
from indexlog.plugins.plans.json_plan import JsonPlanSession

SCHEMA = StructType(
    fields=(
        StructField(name="a", type="integer"),
        StructField(name="b", type="string"),
    )
)

PLAN_TREE = {
    "node": "Project",
    "columns": ["a", "b"],
    "children": [{"node": "Relation", "path": "/data/t1", "format": "parquet"}],
}


def plan_text(tree: dict[str, Any] | None = None, **lazy: Any) -> str:
    """Serialize a plan tree, adding lazily computed fields to the root."""
    tree = dict(tree or PLAN_TREE)
    tree.update(lazy)
    return json.dumps(tree)


def make_plan(raw_plan: str = "", *signatures: Signature) -> SparkPlan:
    if not signatures:
        signatures = (Signature(provider="planHash", value="abc123"),)
    return SparkPlan(
        properties=SparkPlanProperties(
            raw_plan=raw_plan,
            fingerprint=LogicalPlanFingerprint.from_signatures(*signatures),
        )
    )


def source_data(root: str = "/data/t1") -> Hdfs:
    return Hdfs.from_content(
        Content(root=root, directories=(Directory(path=root, files=("part-0.parquet",)),))
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Keep tests away from the user's config and log files."""
    monkeypatch.setenv("INDEXLOG_LOGGING__FILE", "false")
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    reset()
    yield
    reset()


@pytest.fixture
def json_session() -> JsonPlanSession:
    return JsonPlanSession()


@pytest.fixture
def make_entry() -> Callable[..., IndexLogEntry]:
    """
    Factory for index log entries.

    Defaults describe index "idx1" on column a including b, 4 buckets,
    signature planHash:abc123, output under /out/idx1, ACTIVE.
    """

    def _make(
        name: str = "idx1",
        indexed: tuple[str, ...] = ("a",),
        included: tuple[str, ...] = ("b",),
        num_buckets: int = 4,
        plan: SparkPlan | None = None,
        root: str = "/out/idx1",
        files: tuple[str, ...] = ("part-00000.parquet",),
        data: tuple[Hdfs, ...] | None = None,
        state: str | States = States.ACTIVE,
        schema_string: str | None = None,
        **kwargs: Any,
    ) -> IndexLogEntry:
        return IndexLogEntry(
            name=name,
            derived_dataset=CoveringIndex(
                properties=CoveringIndexProperties(
                    columns=Columns(indexed=indexed, included=included),
                    schema_string=(
                        schema_string
                        if schema_string is not None
                        else IndexLogEntry.schema_string(SCHEMA)
                    ),
                    num_buckets=num_buckets,
                )
            ),
            content=Content(root=root, directories=(Directory(path=f"{root}/v0", files=files),)),
            source=Source(plan=plan or make_plan(), data=data or (source_data(),)),
            state=state,
            **kwargs,
        )

    return _make


@pytest.fixture(name="make_plan")
def make_plan_fixture() -> Callable[..., SparkPlan]:
    """make_plan(raw_plan="", *signatures): a SparkPlan, signature planHash:abc123 by default."""
    return make_plan


@pytest.fixture(name="plan_text")
def plan_text_fixture() -> Callable[..., str]:
    """plan_text(tree=None, **lazy): JSON plan text with extra root fields."""
    return plan_text


@pytest.fixture(name="source_data")
def source_data_fixture() -> Callable[..., Hdfs]:
    return source_data
