"""Keeper exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind maps to one error type so the CLI can report it.
"""

from __future__ import annotations


class KeeperError(Exception):
    """Base exception for all Keeper failures."""


class KeeperConfigError(KeeperError):
    """Raised for missing or invalid runtime configuration."""


class KeeperMissingArgumentError(KeeperError):
    """Raised when a command is missing a required argument."""


class KeeperInputNotFoundError(KeeperError):
    """Raised when a local input file is absent or unreadable."""


class KeeperNotFoundError(KeeperError):
    """Raised when a remote object does not exist."""


class KeeperDependencyError(KeeperError):
    """Raised when an optional runtime dependency is missing."""


class KeeperUnknownCommandError(KeeperError):
    """Raised for commands the dispatcher does not recognize."""


class KeeperStoreError(KeeperError):
    """Raised for object store transport and API failures."""


class KeeperValidationError(KeeperError):
    """Raised when the remote query engine rejects a validation query."""


class KeeperUsageError(KeeperError):
    """Raised when command-line arguments cannot be parsed."""
