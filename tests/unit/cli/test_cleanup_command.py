"""Unit tests for cleanup CLI command wiring."""

from __future__ import annotations

from cli.main import main
from tests.fakes import FakeObjectStore, dated_keys, make_runtime

_WEEK_KEYS = dated_keys(
    "20251001", "20251002", "20251003", "20251004", "20251005", "20251006", "20251007"
)


def test_cli_cleanup_declined_makes_no_store_call(capsys) -> None:
    """Declining cleanup should not list or delete anything."""
    store = FakeObjectStore(["changesets.parquet", *_WEEK_KEYS])

    exit_code = main(["cleanup"], runtime=make_runtime(store, answer=False))
    output = capsys.readouterr().out

    assert exit_code == 0 and store.calls == [] and "Cancelled." in output


def test_cli_cleanup_deletes_oldest_beyond_window(capsys) -> None:
    """Confirmed cleanup should delete the two oldest of seven dated snapshots."""
    store = FakeObjectStore(["changesets.parquet", *_WEEK_KEYS])

    exit_code = main(["cleanup"], runtime=make_runtime(store, answer=True))
    _ = capsys.readouterr()

    assert exit_code == 0 and [call for call in store.calls if call[0] == "delete"] == [
        ("delete", "changesets-20251002.parquet"),
        ("delete", "changesets-20251001.parquet"),
    ]


def test_cli_cleanup_keeps_canonical_alias(capsys) -> None:
    """The canonical alias should survive cleanup."""
    store = FakeObjectStore(["changesets.parquet", *_WEEK_KEYS])

    main(["cleanup"], runtime=make_runtime(store, answer=True))
    _ = capsys.readouterr()

    assert "changesets.parquet" in store.objects


def test_cli_cleanup_logs_each_deletion_in_order(capsys) -> None:
    """Each deletion should be announced newest first."""
    store = FakeObjectStore(["changesets.parquet", *_WEEK_KEYS])

    main(["cleanup"], runtime=make_runtime(store, answer=True))
    lines = capsys.readouterr().out.splitlines()

    deletion_lines = [line for line in lines if line.startswith("Deleting old file:")]
    assert deletion_lines == [
        "Deleting old file: changesets-20251002.parquet",
        "Deleting old file: changesets-20251001.parquet",
    ]


def test_cli_cleanup_within_window_deletes_nothing(capsys) -> None:
    """Three dated snapshots should all be kept."""
    store = FakeObjectStore(_WEEK_KEYS[:3])

    exit_code = main(["cleanup"], runtime=make_runtime(store, answer=True))
    output = capsys.readouterr().out

    assert exit_code == 0 and store.calls == [("list", "")] and "Nothing to delete" in output


def test_cli_cleanup_asks_once_for_whole_batch(capsys) -> None:
    """Cleanup should prompt once, not per file."""
    runtime = make_runtime(FakeObjectStore(_WEEK_KEYS), answer=True)

    main(["cleanup"], runtime=runtime)
    _ = capsys.readouterr()

    assert runtime.confirm.prompts == ["Continue? (y/N) "]
