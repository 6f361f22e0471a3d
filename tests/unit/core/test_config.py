"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import KeeperConfig
from core.errors import KeeperConfigError

_CREDENTIALS = {
    "R2_ACCOUNT_ID": "acct123",
    "R2_ACCESS_KEY_ID": "access",
    "R2_SECRET_ACCESS_KEY": "secret",
}


def test_from_env_reads_credentials_and_default_bucket() -> None:
    """Config should read credentials and fall back to the default bucket."""
    config = KeeperConfig.from_env(dict(_CREDENTIALS))

    assert config.account_id == "acct123" and config.bucket_name == "osm-changesets"


def test_from_env_reads_bucket_override() -> None:
    """Config should honour R2_BUCKET_NAME."""
    config = KeeperConfig.from_env({**_CREDENTIALS, "R2_BUCKET_NAME": "other-bucket"})

    assert config.bucket_name == "other-bucket"


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read os.environ when no mapping is given."""
    for name, value in _CREDENTIALS.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv("R2_BUCKET_NAME", raising=False)
    monkeypatch.delenv("KEEPER_LOG_LEVEL", raising=False)

    config = KeeperConfig.from_env()

    assert config.secret_access_key == "secret" and config.log_level == "WARNING"


def test_from_env_names_every_missing_credential() -> None:
    """Missing credentials should produce guidance listing each variable."""
    with pytest.raises(KeeperConfigError) as error_info:
        KeeperConfig.from_env({"R2_ACCOUNT_ID": "acct123"})

    message = str(error_info.value)
    assert "R2_ACCESS_KEY_ID" in message and "R2_SECRET_ACCESS_KEY" in message


def test_from_env_treats_empty_credential_as_missing() -> None:
    """Blank credential values count as unset."""
    with pytest.raises(KeeperConfigError):
        KeeperConfig.from_env({**_CREDENTIALS, "R2_SECRET_ACCESS_KEY": ""})


def test_from_env_raises_for_invalid_log_level() -> None:
    """Config should fail for unknown log levels."""
    with pytest.raises(KeeperConfigError):
        KeeperConfig.from_env({**_CREDENTIALS, "KEEPER_LOG_LEVEL": "chatty"})


def test_endpoint_url_is_derived_from_account() -> None:
    """Endpoint should embed the account id."""
    config = KeeperConfig.from_env(dict(_CREDENTIALS))

    assert config.endpoint_url == "https://acct123.r2.cloudflarestorage.com"


def test_public_url_defaults_to_canonical_key() -> None:
    """Public URL should point at the canonical snapshot by default."""
    config = KeeperConfig.from_env(dict(_CREDENTIALS))

    assert config.public_url() == "https://pub-acct123.r2.dev/osm-changesets/changesets.parquet"
