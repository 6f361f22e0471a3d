"""Object store capability for the snapshot bucket.

This module defines the list/put/head/delete contract consumed by the
rest of Keeper and its boto3 implementation for S3-compatible stores.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from core.config import KeeperConfig
from core.constants import S3_REGION_NAME
from core.errors import KeeperNotFoundError, KeeperStoreError
from core.logging_config import get_logger
from core.types import ObjectMetadata, SnapshotObject

_LOGGER = get_logger(__name__)
_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class ObjectStore(Protocol):
    """Minimal object store contract over one bucket."""

    def list(self, prefix: str = "") -> list[SnapshotObject]:
        """List every object under a prefix."""

    def put(self, key: str, source_path: Path, content_type: str) -> None:
        """Store a local file under key, replacing any existing object."""

    def head(self, key: str) -> ObjectMetadata:
        """Return object metadata or raise KeeperNotFoundError."""

    def delete(self, key: str) -> None:
        """Delete one object or raise KeeperNotFoundError."""


def create_s3_client(config: KeeperConfig) -> Any:
    """Create boto3 S3 client for the configured R2 account.

    Args:
        config: Runtime config with credentials and account id.

    Returns:
        Boto3 S3 client bound to the account endpoint.
    """
    session = boto3.session.Session(
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=S3_REGION_NAME,
    )
    return session.client("s3", endpoint_url=config.endpoint_url)


class S3ObjectStore:
    """Object store backed by a boto3 S3 client.

    Every call is a single remote round trip with no retries or caching.
    Transport failures surface as KeeperStoreError with the original message.
    """

    def __init__(self, s3_client: Any, bucket: str) -> None:
        """Initialize store over one bucket.

        Args:
            s3_client: Boto3 S3 client.
            bucket: Bucket name.
        """
        self._client = s3_client
        self._bucket = bucket

    @classmethod
    def from_config(cls, config: KeeperConfig) -> "S3ObjectStore":
        """Build a store for the configured bucket."""
        return cls(create_s3_client(config), config.bucket_name)

    @property
    def bucket(self) -> str:
        """Bucket this store operates on."""
        return self._bucket

    def list(self, prefix: str = "") -> list[SnapshotObject]:
        """List every object under a prefix, following pagination.

        Args:
            prefix: Optional key prefix.

        Returns:
            Objects in listing order.

        Raises:
            KeeperStoreError: If any page request fails.
        """
        objects: list[SnapshotObject] = []
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for item in page.get("Contents", []):
                    objects.append(
                        SnapshotObject(
                            key=str(item["Key"]),
                            size_bytes=int(item.get("Size", 0)),
                            last_modified=item.get("LastModified"),
                        )
                    )
        except (BotoCoreError, ClientError) as error:
            raise KeeperStoreError(
                f"Failed to list s3://{self._bucket}/{prefix}: {error}. "
                "Check R2 credentials and bucket name, then retry."
            ) from error
        _LOGGER.debug("objects_listed", bucket=self._bucket, prefix=prefix, count=len(objects))
        return objects

    def put(self, key: str, source_path: Path, content_type: str) -> None:
        """Upload a local file, overwriting any existing object.

        Args:
            key: Destination object key.
            source_path: Local file path.
            content_type: Content type stored with the object.

        Raises:
            KeeperStoreError: If the upload fails.
        """
        try:
            self._client.upload_file(
                str(source_path),
                self._bucket,
                key,
                ExtraArgs={"ContentType": content_type},
            )
        except (BotoCoreError, ClientError, S3UploadFailedError) as error:
            raise KeeperStoreError(
                f"Failed to upload {source_path} to s3://{self._bucket}/{key}: {error}. "
                "Check R2 credentials and retry upload."
            ) from error
        _LOGGER.info("object_uploaded", bucket=self._bucket, key=key, source=str(source_path))

    def head(self, key: str) -> ObjectMetadata:
        """Fetch object metadata.

        Args:
            key: Object key.

        Returns:
            Metadata for the object.

        Raises:
            KeeperNotFoundError: If the object does not exist.
            KeeperStoreError: For any other failure.
        """
        try:
            response = self._client.head_object(Bucket=self._bucket, Key=key)
        except ClientError as error:
            if _error_code(error) in _NOT_FOUND_CODES:
                _LOGGER.info("object_head_missing", bucket=self._bucket, key=key)
                raise KeeperNotFoundError(f"File not found: {key}") from error
            raise _store_error("read metadata for", self._bucket, key, error) from error
        except BotoCoreError as error:
            raise _store_error("read metadata for", self._bucket, key, error) from error
        etag = response.get("ETag")
        return ObjectMetadata(
            key=key,
            size_bytes=int(response.get("ContentLength", 0)),
            last_modified=response.get("LastModified"),
            content_type=response.get("ContentType"),
            etag=etag.strip('"') if etag else None,
        )

    def delete(self, key: str) -> None:
        """Delete one object.

        Args:
            key: Object key.

        Raises:
            KeeperNotFoundError: If the store reports the key missing.
            KeeperStoreError: For any other failure.
        """
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except ClientError as error:
            if _error_code(error) in _NOT_FOUND_CODES:
                raise KeeperNotFoundError(f"File not found: {key}") from error
            raise _store_error("delete", self._bucket, key, error) from error
        except BotoCoreError as error:
            raise _store_error("delete", self._bucket, key, error) from error
        _LOGGER.info("object_deleted", bucket=self._bucket, key=key)


def _error_code(error: ClientError) -> str:
    """Extract the S3 error code from a client error."""
    return str(error.response.get("Error", {}).get("Code", ""))


def _store_error(action: str, bucket: str, key: str, error: Exception) -> KeeperStoreError:
    """Build a store error that keeps the transport message."""
    return KeeperStoreError(f"Failed to {action} s3://{bucket}/{key}: {error}")
