"""Text formatting helpers for CLI output."""

from __future__ import annotations

from datetime import datetime

from core.types import BucketSummary, ObjectMetadata, SnapshotObject

_SIZE_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB")


def format_size(size_bytes: int) -> str:
    """Render a byte count with binary units, e.g. ``1.5 MiB``."""
    if size_bytes < 1024:
        return f"{size_bytes} Bytes"
    value = float(size_bytes)
    for unit in _SIZE_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.1f} {unit}"


def format_timestamp(value: datetime | None) -> str:
    """Render an optional timestamp as ``YYYY-MM-DD HH:MM:SS``."""
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M:%S")


def format_listing_row(item: SnapshotObject) -> str:
    """Render one listing row as timestamp, size, and key."""
    return f"{format_timestamp(item.last_modified)} {format_size(item.size_bytes):>12} {item.key}"


def format_summary(summary: BucketSummary) -> list[str]:
    """Render listing totals."""
    return [
        f"Total Objects: {summary.object_count}",
        f"   Total Size: {format_size(summary.total_size_bytes)}",
    ]


def format_metadata(metadata: ObjectMetadata) -> list[str]:
    """Render object metadata as key=value rows."""
    return [
        f"key={metadata.key}",
        f"size_bytes={metadata.size_bytes}",
        f"size={format_size(metadata.size_bytes)}",
        f"last_modified={metadata.last_modified.isoformat() if metadata.last_modified else '-'}",
        f"content_type={metadata.content_type or '-'}",
        f"etag={metadata.etag or '-'}",
    ]
