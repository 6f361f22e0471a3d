"""Python SDK for snapshot bucket operations.

This module exposes high-level list, upload, inspect, delete, and
retention cleanup operations backed by an object store. It never
prompts; confirmation gating belongs to the command layer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from core.config import KeeperConfig
from core.constants import CANONICAL_SNAPSHOT_KEY, DEFAULT_KEEP_COUNT, UPLOAD_CONTENT_TYPE
from core.errors import KeeperInputNotFoundError, KeeperMissingArgumentError
from core.logging_config import get_logger
from core.types import BucketSummary, CleanupResult, ObjectMetadata, RetentionPlan, SnapshotObject
from store.object_store import ObjectStore, S3ObjectStore
from store.retention import plan_retention

_LOGGER = get_logger(__name__)


class SnapshotBucket:
    """Primary SDK entry point for one snapshot bucket."""

    def __init__(self, config: KeeperConfig, store: ObjectStore | None = None) -> None:
        """Create SDK handle.

        Args:
            config: Runtime configuration.
            store: Optional object store; boto3-backed store when omitted.
        """
        self._config = config
        self._store = store if store is not None else S3ObjectStore.from_config(config)

    @property
    def config(self) -> KeeperConfig:
        """Runtime configuration for this bucket."""
        return self._config

    def list_objects(self, prefix: str = "") -> list[SnapshotObject]:
        """List all objects in the bucket.

        Raises:
            KeeperStoreError: If listing fails.
        """
        return self._store.list(prefix)

    def summarize(self, objects: list[SnapshotObject]) -> BucketSummary:
        """Summarize a listing into object count and total size."""
        return BucketSummary(
            object_count=len(objects),
            total_size_bytes=sum(item.size_bytes for item in objects),
        )

    def upload(self, file_path: str | Path) -> str:
        """Upload a local file under its base name.

        Args:
            file_path: Local file to upload.

        Returns:
            Destination object key.

        Raises:
            KeeperInputNotFoundError: If the file is missing or unreadable.
            KeeperStoreError: If the upload fails.
        """
        source_path = Path(file_path)
        if not source_path.is_file():
            raise KeeperInputNotFoundError(f"File not found: {file_path}")
        try:
            with source_path.open("rb"):
                pass
        except OSError as error:
            raise KeeperInputNotFoundError(
                f"File is not readable: {file_path} ({error.strerror})"
            ) from error
        key = source_path.name
        self._store.put(key, source_path, UPLOAD_CONTENT_TYPE)
        return key

    def delete(self, key: str) -> None:
        """Delete one object without prompting.

        Raises:
            KeeperMissingArgumentError: If key is blank.
            KeeperNotFoundError: If the store reports the key missing.
            KeeperStoreError: If deletion fails.
        """
        if not key:
            raise KeeperMissingArgumentError("No filename specified.")
        self._store.delete(key)

    def info(self, key: str = CANONICAL_SNAPSHOT_KEY) -> ObjectMetadata:
        """Fetch metadata for one object.

        Raises:
            KeeperNotFoundError: If the object does not exist.
            KeeperStoreError: If the request fails.
        """
        return self._store.head(key)

    def plan_cleanup(self, keep_count: int = DEFAULT_KEEP_COUNT) -> RetentionPlan:
        """List the bucket and compute the retention plan.

        Args:
            keep_count: Number of newest dated snapshots to keep.

        Returns:
            Retention plan derived from the current listing.
        """
        return plan_retention(self._store.list(), keep_count)

    def apply_cleanup(
        self,
        plan: RetentionPlan,
        on_delete: Callable[[str], None] | None = None,
    ) -> CleanupResult:
        """Delete every object in a retention plan, newest first.

        Deletions run one at a time and stop at the first failure.

        Args:
            plan: Retention plan to apply.
            on_delete: Optional callback invoked before each deletion.

        Returns:
            Deleted and kept keys.

        Raises:
            KeeperStoreError: If any deletion fails.
        """
        deleted: list[str] = []
        for key in plan.delete_keys:
            if on_delete is not None:
                on_delete(key)
            self._store.delete(key)
            deleted.append(key)
            _LOGGER.info("cleanup_object_deleted", bucket=self._config.bucket_name, key=key)
        _LOGGER.info(
            "cleanup_completed",
            bucket=self._config.bucket_name,
            deleted_count=len(deleted),
            kept_count=len(plan.keep),
        )
        return CleanupResult(deleted_keys=tuple(deleted), kept_keys=tuple(plan.keep_keys))

    def public_url(self, key: str = CANONICAL_SNAPSHOT_KEY) -> str:
        """Return the public r2.dev URL for an object key."""
        return self._config.public_url(key)
