"""Public SDK surface for Keeper.

This module provides a stable import path for scripting users.
It re-exports the bucket client, retention helpers, and typed models.
"""

from __future__ import annotations

from core.config import KeeperConfig
from core.naming import SnapshotKey, build_snapshot_key, is_canonical_key, parse_snapshot_key
from core.types import (
    BucketSummary,
    CleanupResult,
    ObjectMetadata,
    RetentionPlan,
    SnapshotObject,
    ValidationResult,
)
from probe.query_engine import DuckDBQueryEngine, QueryEngine
from probe.validation_probe import ValidationProbe
from store.object_store import ObjectStore, S3ObjectStore
from store.retention import plan_retention, select_for_deletion
from store.snapshot_bucket import SnapshotBucket

__all__ = [
    "BucketSummary",
    "CleanupResult",
    "DuckDBQueryEngine",
    "KeeperConfig",
    "ObjectMetadata",
    "ObjectStore",
    "QueryEngine",
    "RetentionPlan",
    "S3ObjectStore",
    "SnapshotBucket",
    "SnapshotKey",
    "SnapshotObject",
    "ValidationProbe",
    "ValidationResult",
    "build_snapshot_key",
    "is_canonical_key",
    "parse_snapshot_key",
    "plan_retention",
    "select_for_deletion",
]
