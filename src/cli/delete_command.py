"""Delete command wiring for Keeper CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.runtime import CommandRuntime
from core.errors import KeeperMissingArgumentError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def add_delete_command(subparsers: Any) -> None:
    """Register delete subcommand."""
    parser = subparsers.add_parser("delete", help="Delete a file from the bucket")
    parser.add_argument("filename", nargs="?", help="Object key to delete")


def run_delete_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Delete one object after an explicit confirmation."""
    if not args.filename:
        raise KeeperMissingArgumentError(
            "No filename specified.\nUsage: keeper delete <filename>"
        )
    bucket_name = runtime.config.bucket_name
    print(f"=== Deleting s3://{bucket_name}/{args.filename} ===")
    if not runtime.confirm("Are you sure? (y/N) "):
        _LOGGER.info("delete_cancelled", bucket=bucket_name, key=args.filename)
        print("Cancelled.")
        return 0
    runtime.bucket.delete(args.filename)
    print("Deleted!")
    return 0
