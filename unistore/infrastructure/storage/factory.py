"""Storage service factory: creates local or S3 backend from a tag and root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from unistore.infrastructure.exceptions import (
    StorageConfigurationError,
    UnsupportedBackendError,
)
from unistore.infrastructure.storage.protocol import StorageProtocol
from unistore.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from unistore.core.config import S3Config, Settings

logger = get_logger(__name__)


class StorageFactory:
    """Factory for storage service instances. The only place a backend is chosen."""

    @staticmethod
    def create_storage(
        storage_type: str,
        path: str,
        s3_config: "S3Config | None" = None,
    ) -> StorageProtocol:
        """Create a storage service for the given backend tag.

        Args:
            storage_type: "local" or "s3" (exact match).
            path: Base directory (local) or bucket name (s3).
            s3_config: S3 connection settings; if None, built from
                get_settings(). Ignored for the local backend.

        Returns:
            LocalStorageService or S3StorageService.

        Raises:
            UnsupportedBackendError: Unknown storage_type.
            StorageConfigurationError: S3 client could not be configured.
        """
        if storage_type == "local":
            from unistore.infrastructure.storage.local_storage import (
                LocalStorageService,
            )

            logger.info("Using local storage rooted at %s", path)
            return LocalStorageService(storage_root=path)
        if storage_type == "s3":
            try:
                from unistore.infrastructure.storage.s3_storage import (
                    S3StorageService,
                )
            except ImportError as e:
                raise StorageConfigurationError(
                    "s3", "S3 backend requires boto3. Install with: pip install boto3"
                ) from e
            if s3_config is None:
                from unistore.core.config import get_settings

                try:
                    s3_config = get_settings().s3_config()
                except ValidationError as e:
                    raise StorageConfigurationError("s3", str(e)) from e
            logger.info("Using S3 storage in bucket %s", path)
            return S3StorageService(bucket=path, config=s3_config)
        raise UnsupportedBackendError(storage_type)

    @staticmethod
    def create_storage_service(settings: "Settings | None" = None) -> StorageProtocol:
        """Create the storage service named by settings.

        Args:
            settings: Settings; if None, uses get_settings().

        Returns:
            LocalStorageService rooted at storage_root, or S3StorageService
            on s3_bucket.

        Raises:
            UnsupportedBackendError: Unknown storage_backend.
            StorageConfigurationError: Root or bucket missing, or S3 client
                could not be configured.
        """
        from unistore.core.config import get_settings

        s = settings or get_settings()
        backend = s.storage_backend.lower()

        if backend == "local":
            if not s.storage_root:
                raise StorageConfigurationError("local", "STORAGE_ROOT required for local backend")
            return StorageFactory.create_storage("local", s.storage_root)
        if backend == "s3":
            if not s.s3_bucket:
                raise StorageConfigurationError("s3", "S3_BUCKET required for s3 backend")
            try:
                s3_config = s.s3_config()
            except ValidationError as e:
                raise StorageConfigurationError("s3", str(e)) from e
            return StorageFactory.create_storage("s3", s.s3_bucket, s3_config)
        raise UnsupportedBackendError(s.storage_backend)
