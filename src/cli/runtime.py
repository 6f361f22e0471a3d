"""Collaborators shared by CLI command handlers.

This module builds the per-invocation runtime once at startup so that
handlers receive their store, probe, and confirmation function
explicitly instead of looking them up.
"""

from __future__ import annotations

from dataclasses import dataclass

from cli.confirmation import ConfirmFn, prompt_confirmation
from core.config import KeeperConfig
from probe.query_engine import QueryEngine
from probe.validation_probe import ValidationProbe
from store.object_store import ObjectStore
from store.snapshot_bucket import SnapshotBucket


@dataclass(frozen=True)
class CommandRuntime:
    """Per-invocation collaborators.

    Attributes:
        config: Validated runtime configuration.
        bucket: SDK handle for the snapshot bucket.
        probe: Remote row-count validation probe.
        confirm: Yes/no prompt used to gate destructive commands.
    """

    config: KeeperConfig
    bucket: SnapshotBucket
    probe: ValidationProbe
    confirm: ConfirmFn = prompt_confirmation


def build_runtime(
    config: KeeperConfig,
    store: ObjectStore | None = None,
    engine: QueryEngine | None = None,
    confirm: ConfirmFn = prompt_confirmation,
) -> CommandRuntime:
    """Build runtime collaborators from config.

    Args:
        config: Runtime configuration.
        store: Optional object store override.
        engine: Optional query engine override.
        confirm: Confirmation function.

    Returns:
        Runtime for one CLI invocation.
    """
    return CommandRuntime(
        config=config,
        bucket=SnapshotBucket(config, store),
        probe=ValidationProbe(engine),
        confirm=confirm,
    )
