"""Unit tests for the interactive confirmation prompt."""

from __future__ import annotations

import pytest

from cli.confirmation import prompt_confirmation


@pytest.mark.parametrize("reply", ["y", "Y", "yes", "YES", " y"])
def test_prompt_confirmation_accepts_yes(reply: str, monkeypatch: pytest.MonkeyPatch) -> None:
    """Only an explicit yes should confirm."""
    monkeypatch.setattr("builtins.input", lambda prompt: reply)

    assert prompt_confirmation("Continue? (y/N) ") is True


@pytest.mark.parametrize("reply", ["", "n", "N", "no", "sure", "yolo", "yy"])
def test_prompt_confirmation_defaults_to_no(reply: str, monkeypatch: pytest.MonkeyPatch) -> None:
    """Anything else, including an empty reply, should decline."""
    monkeypatch.setattr("builtins.input", lambda prompt: reply)

    assert prompt_confirmation("Continue? (y/N) ") is False


def test_prompt_confirmation_treats_eof_as_no(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Closed stdin should decline."""

    def _raise_eof(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _raise_eof)

    assert prompt_confirmation("Continue? (y/N) ") is False
