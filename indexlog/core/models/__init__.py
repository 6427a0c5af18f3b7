"""
Pydantic models for indexlog.

The record graph, leaves first: Signature and LogicalPlanFingerprint,
SparkPlan, Content, Hdfs, Source, CoveringIndex and IndexLogEntry.
All models are frozen Pydantic v2 models.
"""

from .base import ImmutableModel, IndexLogBaseModel, RecordModel
from .config import LoggingConfig, PlansConfig
from .content import Content, Directory, DirectoryFingerprint, NoOpFingerprint
from .covering_index import Columns, CoveringIndex, CoveringIndexProperties
from .fingerprint import LogicalPlanFingerprint, LogicalPlanFingerprintProperties, Signature
from .index_config import IndexConfig
from .index_log_entry import IndexLogEntry
from .schema import ArrayType, DataType, MapType, StructField, StructType, parse_schema
from .source import Hdfs, HdfsProperties, Source, SparkPlan, SparkPlanProperties

__all__ = [
    "ArrayType",
    "Columns",
    "Content",
    "CoveringIndex",
    "CoveringIndexProperties",
    "DataType",
    "Directory",
    "DirectoryFingerprint",
    "Hdfs",
    "HdfsProperties",
    "ImmutableModel",
    "IndexConfig",
    "IndexLogBaseModel",
    "IndexLogEntry",
    "LoggingConfig",
    "LogicalPlanFingerprint",
    "LogicalPlanFingerprintProperties",
    "MapType",
    "NoOpFingerprint",
    "PlansConfig",
    "RecordModel",
    "Signature",
    "Source",
    "SparkPlan",
    "SparkPlanProperties",
    "StructField",
    "StructType",
    "parse_schema",
]
