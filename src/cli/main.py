"""Keeper CLI entry points.
This module exposes bucket management commands for snapshot files.
It maps argparse commands onto SDK calls and reports failures.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Sequence

from cli.cleanup_command import add_cleanup_command, run_cleanup_command
from cli.delete_command import add_delete_command, run_delete_command
from cli.output import format_listing_row, format_metadata, format_summary
from cli.runtime import CommandRuntime, build_runtime
from cli.validate_command import add_validate_command, run_validate_command
from core.config import KeeperConfig
from core.constants import (
    ACCESS_KEY_ID_ENV,
    ACCOUNT_ID_ENV,
    BUCKET_NAME_ENV,
    CANONICAL_SNAPSHOT_KEY,
    DEFAULT_BUCKET_NAME,
    DEFAULT_KEEP_COUNT,
    LOG_LEVEL_ENV,
    SECRET_ACCESS_KEY_ENV,
)
from core.errors import (
    KeeperError,
    KeeperMissingArgumentError,
    KeeperNotFoundError,
    KeeperUnknownCommandError,
    KeeperUsageError,
)
from core.logging_config import configure_logging, get_logger

_LOGGER = get_logger(__name__)
_HELP_COMMANDS = ("help", "-h", "--help")

CommandHandler = Callable[[CommandRuntime, argparse.Namespace], int]

USAGE_TEXT = f"""Cloudflare R2 snapshot management

Usage: keeper <command> [arguments]

Commands:
  list                    List all files in the bucket
  upload <file>           Upload a parquet file to R2
  delete <filename>       Delete a file from R2
  cleanup                 Remove old files (keeps {DEFAULT_KEEP_COUNT} most recent)
  info [filename]         Show metadata for a file (default: {CANONICAL_SNAPSHOT_KEY})
  public-url              Show your public R2 URLs
  validate <url>          Test DuckDB remote query against a URL
  help                    Show this help message

Environment Variables:
  {ACCOUNT_ID_ENV:<23} Your Cloudflare account ID (required)
  {ACCESS_KEY_ID_ENV:<23} Your R2 access key ID (required)
  {SECRET_ACCESS_KEY_ENV:<23} Your R2 secret access key (required)
  {BUCKET_NAME_ENV:<23} Bucket name (default: {DEFAULT_BUCKET_NAME})
  {LOG_LEVEL_ENV:<23} Structured log level on stderr (default: WARNING)

Examples:
  keeper list
  keeper upload changesets-20251006.parquet
  keeper validate https://pub-xxx.r2.dev/{DEFAULT_BUCKET_NAME}/{CANONICAL_SNAPSHOT_KEY}
  keeper public-url"""


class _KeeperArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as Keeper errors."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise KeeperUsageError(f"{message}\n{self.format_usage().rstrip()}")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = _KeeperArgumentParser(prog="keeper", description="Keeper snapshot bucket CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_list_command(subparsers)
    _add_upload_command(subparsers)
    add_delete_command(subparsers)
    add_cleanup_command(subparsers)
    _add_info_command(subparsers)
    _add_public_url_command(subparsers)
    add_validate_command(subparsers)
    return parser


def main(
    argv: Sequence[str] | None = None,
    runtime: CommandRuntime | None = None,
) -> int:
    """Run the Keeper CLI.

    Args:
        argv: Optional argument vector.
        runtime: Optional prebuilt collaborators; built from env when omitted.

    Returns:
        Process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)
    command = arguments[0] if arguments else "help"
    configure_logging()
    if command in _HELP_COMMANDS:
        print(USAGE_TEXT)
        return 0
    try:
        if command not in _COMMAND_HANDLERS:
            raise KeeperUnknownCommandError(f"Unknown command: {command}")
        args = build_parser().parse_args(arguments)
        active_runtime = runtime
        if active_runtime is None:
            active_runtime = build_runtime(KeeperConfig.from_env())
        configure_logging(active_runtime.config.log_level)
        return _COMMAND_HANDLERS[args.command](active_runtime, args)
    except KeeperUnknownCommandError as error:
        print(f"Error: {error}", file=sys.stderr)
        print()
        print(USAGE_TEXT)
        return 1
    except KeeperError as error:
        _LOGGER.info("command_failed", command=command, error_type=type(error).__name__)
        print(f"Error: {error}", file=sys.stderr)
        return 1


def _run_list_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Handle list command.

    Args:
        runtime: Command collaborators.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    _ = args
    print(f"=== Listing files in bucket: {runtime.config.bucket_name} ===")
    objects = runtime.bucket.list_objects()
    for item in objects:
        print(format_listing_row(item))
    print()
    for line in format_summary(runtime.bucket.summarize(objects)):
        print(line)
    return 0


def _run_upload_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Handle upload command.

    Args:
        runtime: Command collaborators.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if not args.file:
        raise KeeperMissingArgumentError("No file specified.\nUsage: keeper upload <file.parquet>")
    key = runtime.bucket.upload(args.file)
    print(f"=== Uploaded {args.file} to s3://{runtime.config.bucket_name}/{key} ===")
    print("Upload complete!")
    print(f"File should be accessible at {runtime.bucket.public_url(key)}")
    return 0


def _run_info_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Handle info command.

    A missing object is reported as a normal outcome with exit code zero.

    Args:
        runtime: Command collaborators.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    print(f"=== File info: {args.filename} ===")
    try:
        metadata = runtime.bucket.info(args.filename)
    except KeeperNotFoundError:
        print(f"File not found: {args.filename}")
        return 0
    for line in format_metadata(metadata):
        print(line)
    return 0


def _run_public_url_command(runtime: CommandRuntime, args: argparse.Namespace) -> int:
    """Handle public-url command without any network call."""
    _ = args
    print("=== Your R2 Public URLs ===")
    print()
    print("R2.dev domain (free):")
    print(f"  {runtime.bucket.public_url()}")
    print()
    print("To set up a custom domain:")
    print("  1. Go to Cloudflare R2 dashboard")
    print("  2. Click on your bucket")
    print("  3. Settings > Custom Domains > Connect Domain")
    print()
    print("Then update the R2_PUBLIC_URL in your workflow.")
    return 0


def _add_list_command(subparsers: Any) -> None:
    """Register list subcommand."""
    subparsers.add_parser("list", help="List all files in the bucket")


def _add_upload_command(subparsers: Any) -> None:
    """Register upload subcommand."""
    parser = subparsers.add_parser("upload", help="Upload a parquet file")
    parser.add_argument("file", nargs="?", help="Local file, stored under its base name")


def _add_info_command(subparsers: Any) -> None:
    """Register info subcommand."""
    parser = subparsers.add_parser("info", help="Show metadata for a file")
    parser.add_argument(
        "filename",
        nargs="?",
        default=CANONICAL_SNAPSHOT_KEY,
        help=f"Object key (default: {CANONICAL_SNAPSHOT_KEY})",
    )


def _add_public_url_command(subparsers: Any) -> None:
    """Register public-url subcommand."""
    subparsers.add_parser("public-url", help="Show your public R2 URLs")


_COMMAND_HANDLERS: dict[str, CommandHandler] = {
    "list": _run_list_command,
    "upload": _run_upload_command,
    "delete": run_delete_command,
    "cleanup": run_cleanup_command,
    "info": _run_info_command,
    "public-url": _run_public_url_command,
    "validate": run_validate_command,
}
