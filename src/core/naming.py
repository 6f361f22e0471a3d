"""Snapshot object naming scheme.

Dated snapshots are stored as ``changesets-<digits>.parquet`` next to the
canonical ``changesets.parquet`` alias. This module recognizes dated keys
and extracts their ordering token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.constants import CANONICAL_SNAPSHOT_KEY, SNAPSHOT_KEY_PREFIX, SNAPSHOT_KEY_SUFFIX

_DATED_KEY_PATTERN = re.compile(
    re.escape(SNAPSHOT_KEY_PREFIX) + r"([0-9]+)" + re.escape(SNAPSHOT_KEY_SUFFIX)
)


@dataclass(frozen=True)
class SnapshotKey:
    """Parse result for one object key.

    Attributes:
        key: Original object key.
        is_dated_snapshot: Whether the key follows the dated naming scheme.
        timestamp_token: Digit run embedded in a dated key, else None.
    """

    key: str
    is_dated_snapshot: bool
    timestamp_token: str | None = None

    @property
    def ordering_value(self) -> int:
        """Integer value of the timestamp token used for retention ordering."""
        if self.timestamp_token is None:
            raise ValueError(f"Key '{self.key}' is not a dated snapshot and has no ordering value.")
        return int(self.timestamp_token)


def parse_snapshot_key(key: str) -> SnapshotKey:
    """Recognize a dated snapshot key.

    Args:
        key: Object key from a bucket listing.

    Returns:
        Parse result with the verbatim digit token for dated keys.
    """
    match = _DATED_KEY_PATTERN.fullmatch(key)
    if match is None:
        return SnapshotKey(key=key, is_dated_snapshot=False)
    return SnapshotKey(key=key, is_dated_snapshot=True, timestamp_token=match.group(1))


def is_canonical_key(key: str) -> bool:
    """Return True for the fixed latest-snapshot alias."""
    return key == CANONICAL_SNAPSHOT_KEY


def build_snapshot_key(timestamp_token: str) -> str:
    """Build a dated snapshot key from a digit token.

    Args:
        timestamp_token: Digits identifying the snapshot, e.g. ``20251006``.

    Returns:
        Object key such as ``changesets-20251006.parquet``.

    Raises:
        ValueError: If the token is not a non-empty digit run.
    """
    if not timestamp_token.isascii() or not timestamp_token.isdigit():
        raise ValueError(f"Invalid snapshot token '{timestamp_token}': expected digits only.")
    return f"{SNAPSHOT_KEY_PREFIX}{timestamp_token}{SNAPSHOT_KEY_SUFFIX}"
