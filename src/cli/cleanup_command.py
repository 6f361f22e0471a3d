"""Retention cleanup command wiring for Keeper CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.runtime import CommandRuntime
from core.constants import CANONICAL_SNAPSHOT_KEY, DEFAULT_KEEP_COUNT
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def add_cleanup_command(subparsers: Any) -> None:
    """Register cleanup subcommand."""
    subparsers.add_parser(
        "cleanup",
        help=f"Remove old files (keeps {DEFAULT_KEEP_COUNT} most recent)",
    )


def run_cleanup_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Prune dated snapshots beyond the retention window.

    One confirmation covers the whole batch. Declining exits before
    any store call is made.
    """
    _ = args
    print("=== Cleaning up old files ===")
    print(
        f"This will keep {CANONICAL_SNAPSHOT_KEY} and the "
        f"{DEFAULT_KEEP_COUNT} most recent timestamped files"
    )
    if not runtime.confirm("Continue? (y/N) "):
        _LOGGER.info("cleanup_cancelled", bucket=runtime.config.bucket_name)
        print("Cancelled.")
        return 0
    plan = runtime.bucket.plan_cleanup(DEFAULT_KEEP_COUNT)
    if not plan.delete:
        print(f"Nothing to delete: {len(plan.keep)} timestamped file(s) within retention.")
        return 0
    result = runtime.bucket.apply_cleanup(
        plan,
        on_delete=lambda key: print(f"Deleting old file: {key}"),
    )
    print(f"Cleanup complete! Deleted {len(result.deleted_keys)} file(s).")
    return 0
