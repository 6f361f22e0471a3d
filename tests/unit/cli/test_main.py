"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from tests.fakes import FakeObjectStore, make_runtime

_CREDENTIAL_VARS = ("R2_ACCOUNT_ID", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY")


@pytest.mark.parametrize("argv", [[], ["help"], ["--help"], ["-h"]])
def test_cli_help_prints_usage_without_credentials(
    argv: list[str], monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """Help should work with no credentials configured."""
    for name in _CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)

    exit_code = main(argv)
    output = capsys.readouterr().out

    assert exit_code == 0 and "Usage: keeper <command>" in output


def test_cli_unknown_command_prints_usage_and_fails(capsys) -> None:
    """Unknown commands should exit one with an error and usage text."""
    exit_code = main(["frobnicate"], runtime=make_runtime(FakeObjectStore()))
    captured = capsys.readouterr()

    assert (
        exit_code == 1
        and "Unknown command: frobnicate" in captured.err
        and "Usage: keeper" in captured.out
    )


def test_cli_missing_credentials_prints_guidance(
    monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """Commands should fail with export guidance when credentials are absent."""
    for name in _CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)

    exit_code = main(["list"])
    error_output = capsys.readouterr().err

    assert exit_code == 1 and "export R2_ACCOUNT_ID=" in error_output


def test_cli_list_prints_rows_and_summary(capsys) -> None:
    """List should print every object followed by totals."""
    store = FakeObjectStore(["changesets.parquet", "changesets-20251006.parquet"])

    exit_code = main(["list"], runtime=make_runtime(store))
    output = capsys.readouterr().out

    assert (
        exit_code == 0
        and "changesets-20251006.parquet" in output
        and "Total Objects: 2" in output
        and "Total Size: 2.0 KiB" in output
    )


def test_cli_list_reports_store_errors(capsys) -> None:
    """Store failures should exit one with the transport message."""
    store = FakeObjectStore(fail_on="list")

    exit_code = main(["list"], runtime=make_runtime(store))
    error_output = capsys.readouterr().err

    assert exit_code == 1 and "connection reset" in error_output


def test_cli_upload_stores_file(tmp_path: Path, capsys) -> None:
    """Upload should store the file under its base name."""
    source = tmp_path / "changesets-20251006.parquet"
    source.write_bytes(b"PAR1")
    store = FakeObjectStore()

    exit_code = main(["upload", str(source)], runtime=make_runtime(store))
    output = capsys.readouterr().out

    assert exit_code == 0 and store.calls == [("put", "changesets-20251006.parquet")] and (
        "Upload complete!" in output
    )


def test_cli_upload_missing_file_makes_no_store_call(tmp_path: Path, capsys) -> None:
    """Upload of a nonexistent path should fail before any store call."""
    store = FakeObjectStore()

    exit_code = main(["upload", str(tmp_path / "nope.parquet")], runtime=make_runtime(store))
    error_output = capsys.readouterr().err

    assert exit_code == 1 and store.calls == [] and "File not found" in error_output


def test_cli_upload_without_file_fails(capsys) -> None:
    """Upload without an argument should report the missing argument."""
    exit_code = main(["upload"], runtime=make_runtime(FakeObjectStore()))
    error_output = capsys.readouterr().err

    assert exit_code == 1 and "No file specified" in error_output


def test_cli_info_defaults_to_canonical_key(capsys) -> None:
    """Info without a filename should inspect the canonical snapshot."""
    store = FakeObjectStore(["changesets.parquet"])

    exit_code = main(["info"], runtime=make_runtime(store))
    output = capsys.readouterr().out

    assert exit_code == 0 and store.calls == [("head", "changesets.parquet")] and (
        "size_bytes=1024" in output
    )


def test_cli_info_missing_key_is_not_fatal(capsys) -> None:
    """Info on an absent key should print not found and exit zero."""
    exit_code = main(["info", "missing.parquet"], runtime=make_runtime(FakeObjectStore()))
    output = capsys.readouterr().out

    assert exit_code == 0 and "File not found: missing.parquet" in output


def test_cli_public_url_prints_derived_url_without_store_calls(capsys) -> None:
    """Public URL should be computed from config only."""
    store = FakeObjectStore()

    exit_code = main(["public-url"], runtime=make_runtime(store))
    output = capsys.readouterr().out

    assert (
        exit_code == 0
        and "https://pub-acct123.r2.dev/osm-changesets/changesets.parquet" in output
        and store.calls == []
    )


@pytest.mark.parametrize(
    "argv",
    [["list", "extra"], ["upload", "a.parquet", "b.parquet"], ["info", "a", "b"]],
)
def test_cli_usage_errors_exit_one(argv: list[str], capsys) -> None:
    """Unexpected arguments should print an error and exit one without store calls."""
    store = FakeObjectStore()

    exit_code = main(argv, runtime=make_runtime(store))
    error_output = capsys.readouterr().err

    assert (
        exit_code == 1
        and "unrecognized arguments" in error_output
        and "usage: keeper" in error_output
        and store.calls == []
    )
