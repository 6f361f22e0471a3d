"""Core constants used across Keeper modules.

This module centralizes naming-scheme and store constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_BUCKET_NAME = "osm-changesets"
CANONICAL_SNAPSHOT_KEY = "changesets.parquet"
SNAPSHOT_KEY_PREFIX = "changesets-"
SNAPSHOT_KEY_SUFFIX = ".parquet"
DEFAULT_KEEP_COUNT = 5
UPLOAD_CONTENT_TYPE = "application/octet-stream"
S3_REGION_NAME = "auto"
R2_ENDPOINT_TEMPLATE = "https://{account_id}.r2.cloudflarestorage.com"
R2_PUBLIC_URL_TEMPLATE = "https://pub-{account_id}.r2.dev/{bucket_name}/{key}"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
ACCOUNT_ID_ENV = "R2_ACCOUNT_ID"
ACCESS_KEY_ID_ENV = "R2_ACCESS_KEY_ID"
SECRET_ACCESS_KEY_ENV = "R2_SECRET_ACCESS_KEY"
BUCKET_NAME_ENV = "R2_BUCKET_NAME"
LOG_LEVEL_ENV = "KEEPER_LOG_LEVEL"
ROW_COUNT_QUERY_TEMPLATE = "SELECT COUNT(*) AS total_changesets FROM read_parquet('{url}')"
