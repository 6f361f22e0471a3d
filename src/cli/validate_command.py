"""Remote query validation command wiring for Keeper CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.runtime import CommandRuntime
from core.errors import KeeperMissingArgumentError
from probe.query_engine import build_row_count_query


def add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser("validate", help="Test a remote DuckDB query against a URL")
    parser.add_argument("url", nargs="?", help="Public URL of a Parquet snapshot")


def run_validate_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Run a row-count query against a public URL and print the result."""
    if not args.url:
        raise KeeperMissingArgumentError(
            "No URL specified.\n"
            "Usage: keeper validate <public-url>\n"
            f"Example: keeper validate {runtime.config.public_url()}"
        )
    print("=== Testing DuckDB remote query ===")
    print(f"URL: {args.url}")
    print(f"Running: {build_row_count_query(args.url)}")
    result = runtime.probe.validate(args.url)
    print(f"total_changesets={result.row_count}")
    return 0
