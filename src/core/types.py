"""Shared typed models.

This module defines immutable data models used by the store, probe,
SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.constants import DEFAULT_KEEP_COUNT
from core.naming import SnapshotKey, is_canonical_key, parse_snapshot_key


@dataclass(frozen=True)
class SnapshotObject:
    """One object in the snapshot bucket.

    Attributes:
        key: Unique object key within the bucket.
        size_bytes: Object size reported by the store.
        last_modified: Last modification time reported by the store.
    """

    key: str
    size_bytes: int = 0
    last_modified: datetime | None = None

    @property
    def is_canonical(self) -> bool:
        """Whether this object is the latest-snapshot alias."""
        return is_canonical_key(self.key)

    @property
    def snapshot_key(self) -> SnapshotKey:
        """Naming scheme parse result for this object's key."""
        return parse_snapshot_key(self.key)

    @property
    def is_dated_snapshot(self) -> bool:
        """Whether this object participates in retention."""
        return self.snapshot_key.is_dated_snapshot

    @property
    def timestamp_token(self) -> str | None:
        """Ordering token for dated snapshots, else None."""
        return self.snapshot_key.timestamp_token


@dataclass(frozen=True)
class ObjectMetadata:
    """Metadata returned by a head-object call.

    Attributes:
        key: Object key.
        size_bytes: Content length in bytes.
        last_modified: Last modification time.
        content_type: Stored content type.
        etag: Entity tag without surrounding quotes.
    """

    key: str
    size_bytes: int
    last_modified: datetime | None
    content_type: str | None
    etag: str | None


@dataclass(frozen=True)
class BucketSummary:
    """Totals for a bucket listing."""

    object_count: int
    total_size_bytes: int


@dataclass(frozen=True)
class RetentionPlan:
    """Keep/delete partition of dated snapshots, newest first.

    Attributes:
        keep: Dated snapshots inside the retention window.
        delete: Dated snapshots beyond the retention window.
        keep_count: Retention window size used to build the plan.
    """

    keep: tuple[SnapshotObject, ...]
    delete: tuple[SnapshotObject, ...]
    keep_count: int = DEFAULT_KEEP_COUNT

    @property
    def delete_keys(self) -> list[str]:
        """Keys to delete in newest-first order."""
        return [item.key for item in self.delete]

    @property
    def keep_keys(self) -> list[str]:
        """Keys retained in newest-first order."""
        return [item.key for item in self.keep]


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of applying a retention plan."""

    deleted_keys: tuple[str, ...]
    kept_keys: tuple[str, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a remote row-count smoke test."""

    url: str
    row_count: int
