"""Runtime configuration model for Keeper.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from core.constants import (
    ACCESS_KEY_ID_ENV,
    ACCOUNT_ID_ENV,
    BUCKET_NAME_ENV,
    CANONICAL_SNAPSHOT_KEY,
    DEFAULT_BUCKET_NAME,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    R2_ENDPOINT_TEMPLATE,
    R2_PUBLIC_URL_TEMPLATE,
    SECRET_ACCESS_KEY_ENV,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import KeeperConfigError

_REQUIRED_CREDENTIAL_VARS = (ACCOUNT_ID_ENV, ACCESS_KEY_ID_ENV, SECRET_ACCESS_KEY_ENV)


@dataclass(frozen=True)
class KeeperConfig:
    """Validated runtime configuration.

    Attributes:
        account_id: Cloudflare account identifier used to derive endpoints.
        access_key_id: Object store access key id.
        secret_access_key: Object store secret access key.
        bucket_name: Bucket holding snapshot objects.
        log_level: Minimum structured log level written to stderr.
    """

    account_id: str
    access_key_id: str
    secret_access_key: str
    bucket_name: str = DEFAULT_BUCKET_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "KeeperConfig":
        """Build config from process environment variables.

        Args:
            environ: Optional mapping used instead of ``os.environ``.

        Returns:
            A validated config object.

        Raises:
            KeeperConfigError: If credentials are missing or values are invalid.
        """
        env = os.environ if environ is None else environ
        missing = [name for name in _REQUIRED_CREDENTIAL_VARS if not env.get(name)]
        if missing:
            raise KeeperConfigError(_missing_credentials_message(missing))
        return cls(
            account_id=env[ACCOUNT_ID_ENV],
            access_key_id=env[ACCESS_KEY_ID_ENV],
            secret_access_key=env[SECRET_ACCESS_KEY_ENV],
            bucket_name=env.get(BUCKET_NAME_ENV) or DEFAULT_BUCKET_NAME,
            log_level=_parse_log_level(env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)),
        )

    @property
    def endpoint_url(self) -> str:
        """S3-compatible endpoint derived from the account id."""
        return R2_ENDPOINT_TEMPLATE.format(account_id=self.account_id)

    def public_url(self, key: str = CANONICAL_SNAPSHOT_KEY) -> str:
        """Return the r2.dev public URL for an object key."""
        return R2_PUBLIC_URL_TEMPLATE.format(
            account_id=self.account_id,
            bucket_name=self.bucket_name,
            key=key,
        )


def _missing_credentials_message(missing: list[str]) -> str:
    """Build the guidance text shown when credentials are absent.

    Args:
        missing: Names of unset environment variables.

    Returns:
        Multi-line operator guidance.
    """
    lines = [
        "R2 credentials not set! Missing: " + ", ".join(missing) + ".",
        "",
        "Please set these environment variables:",
        f"  export {ACCOUNT_ID_ENV}='your-account-id'",
        f"  export {ACCESS_KEY_ID_ENV}='your-access-key-id'",
        f"  export {SECRET_ACCESS_KEY_ENV}='your-secret-access-key'",
        "",
        "Or source them from a file:",
        "  source ~/.r2-credentials",
    ]
    return "\n".join(lines)


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        KeeperConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise KeeperConfigError(
            f"Invalid {LOG_LEVEL_ENV} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            f"Unset {LOG_LEVEL_ENV} or choose a supported level."
        )
    return level
