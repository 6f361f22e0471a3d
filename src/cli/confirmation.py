"""Interactive confirmation for destructive commands."""

from __future__ import annotations

from typing import Callable

ConfirmFn = Callable[[str], bool]

_AFFIRMATIVE_ANSWERS = ("y", "yes")


def prompt_confirmation(prompt: str) -> bool:
    """Ask a yes/no question on the terminal, defaulting to no.

    Only ``y`` or ``yes`` in any case counts as confirmation.
    End of input counts as a refusal.
    """
    try:
        reply = input(prompt)
    except EOFError:
        print()
        return False
    return reply.strip().lower() in _AFFIRMATIVE_ANSWERS
