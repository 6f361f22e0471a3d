"""Retention policy for dated snapshot objects.

Only keys following the dated naming scheme take part in retention.
The canonical alias and unrelated objects are filtered out before any
ordering happens, so they can never land in a delete set.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import DEFAULT_KEEP_COUNT
from core.errors import KeeperConfigError
from core.logging_config import get_logger
from core.types import RetentionPlan, SnapshotObject

_LOGGER = get_logger(__name__)


def plan_retention(
    objects: Iterable[SnapshotObject],
    keep_count: int = DEFAULT_KEEP_COUNT,
) -> RetentionPlan:
    """Partition dated snapshots into keep and delete sets.

    Snapshots are ordered newest first by the integer value of their
    timestamp token. Equal tokens keep their listing order.

    Args:
        objects: Bucket listing.
        keep_count: Number of newest dated snapshots to keep.

    Returns:
        Retention plan with both partitions newest first.

    Raises:
        KeeperConfigError: If keep_count is negative.
    """
    if keep_count < 0:
        raise KeeperConfigError(
            f"Invalid keep count {keep_count}: expected zero or a positive integer."
        )
    dated = [item for item in objects if item.is_dated_snapshot]
    ordered = sorted(dated, key=lambda item: item.snapshot_key.ordering_value, reverse=True)
    plan = RetentionPlan(
        keep=tuple(ordered[:keep_count]),
        delete=tuple(ordered[keep_count:]),
        keep_count=keep_count,
    )
    _LOGGER.info(
        "retention_planned",
        dated_count=len(dated),
        keep_count=keep_count,
        delete_count=len(plan.delete),
    )
    return plan


def select_for_deletion(
    objects: Iterable[SnapshotObject],
    keep_count: int = DEFAULT_KEEP_COUNT,
) -> list[str]:
    """Return keys of dated snapshots beyond the retention window.

    Args:
        objects: Bucket listing.
        keep_count: Number of newest dated snapshots to keep.

    Returns:
        Keys to delete, newest first.
    """
    return plan_retention(objects, keep_count).delete_keys
