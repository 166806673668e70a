"""S3-compatible object storage (AWS S3, MinIO, etc.).

Directories do not exist in a bucket: make_dir is a no-op and list_dir
treats the key as a "/"-delimited prefix.
"""

from __future__ import annotations

from typing import Any, BinaryIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from unistore.core.config import S3Config
from unistore.infrastructure.exceptions import StorageConfigurationError
from unistore.infrastructure.storage.protocol import (
    OBJECT_KEY_DELIMITER,
    DirEntry,
    StorageHandle,
)
from unistore.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND_ERROR_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class S3StorageService:
    """S3-compatible storage rooted at a bucket.

    Each method issues exactly one client call (none for make_dir and empty
    writes). ClientError and BotoCoreError propagate unchanged, except in
    exists(), which maps a not-found response to False.
    """

    def __init__(
        self,
        bucket: str,
        config: S3Config | None = None,
        client: Any | None = None,
    ) -> None:
        """Initialize the S3 client.

        Args:
            bucket: Bucket name; acts as the storage root.
            config: Region, endpoint and credentials; None fields use the
                boto3 default chain.
            client: Pre-built S3 client; when given, config is ignored.

        Raises:
            StorageConfigurationError: The boto3 session or client could not
                be created (unknown profile, invalid endpoint, ...).
        """
        self.handle = StorageHandle(backend="s3", root=bucket)
        self.bucket = bucket
        self.config = config or S3Config()
        self._client = client if client is not None else self._create_client(self.config)

    @staticmethod
    def _create_client(config: S3Config) -> Any:
        secret = config.secret_key.get_secret_value() if config.secret_key else None
        extra = {} if config.endpoint_url is None else {"endpoint_url": config.endpoint_url}
        try:
            session = boto3.session.Session(
                aws_access_key_id=config.access_key,
                aws_secret_access_key=secret,
                region_name=config.region,
                profile_name=config.profile,
            )
            return session.client("s3", **extra)
        except (BotoCoreError, ValueError) as e:
            raise StorageConfigurationError("s3", str(e)) from e

    def make_dir(self, name: str, path: str) -> None:
        """No-op: object stores have no directories."""
        logger.debug("Skipping make_dir %s/%s on s3://%s", path, name, self.bucket)

    def write(self, key: str, content: str | bytes) -> None:
        """Upload content as the object body. Empty content uploads nothing."""
        if not content:
            return
        body = content.encode("utf-8") if isinstance(content, str) else content
        self._client.put_object(Bucket=self.bucket, Key=key, Body=body)
        logger.debug("Uploaded %d bytes to s3://%s/%s", len(body), self.bucket, key)

    def read(self, key: str) -> BinaryIO:
        """Return the object body stream. Caller closes it."""
        resp = self._client.get_object(Bucket=self.bucket, Key=key)
        logger.debug("Opened s3://%s/%s for reading", self.bucket, key)
        return resp["Body"]

    def list_dir(self, key: str) -> list[DirEntry]:
        """List objects directly under the key prefix.

        Zero-size objects (directory placeholders) are skipped. Entry names
        are full object keys. Only the first page of results is returned.
        """
        prefix = key if key.endswith(OBJECT_KEY_DELIMITER) else key + OBJECT_KEY_DELIMITER
        resp = self._client.list_objects_v2(
            Bucket=self.bucket,
            Prefix=prefix,
            Delimiter=OBJECT_KEY_DELIMITER,
        )
        entries = [
            DirEntry.from_object_key(obj["Key"])
            for obj in resp.get("Contents", [])
            if obj.get("Size", 0) > 0
        ]
        logger.debug("Listed %d objects under s3://%s/%s", len(entries), self.bucket, prefix)
        return entries

    def delete(self, key: str) -> None:
        self._client.delete_object(Bucket=self.bucket, Key=key)
        logger.debug("Deleted s3://%s/%s", self.bucket, key)

    def exists(self, key: str) -> bool:
        """HEAD the object. Not-found returns False; other errors are raised."""
        try:
            self._client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in NOT_FOUND_ERROR_CODES:
                logger.debug("s3://%s/%s does not exist", self.bucket, key)
                return False
            raise
        logger.debug("s3://%s/%s exists", self.bucket, key)
        return True
