"""Infrastructure exceptions for storage backend selection and setup.

Only the factory and adapter construction raise these. Operation errors
(OSError subclasses, botocore errors) reach callers as-is.
"""

from unistore.domain.exceptions import UnistoreException

SUPPORTED_BACKENDS = ("local", "s3")


class StorageException(UnistoreException):
    """Base exception for storage setup failures."""


class UnsupportedBackendError(StorageException):
    """Backend tag passed to the factory is not recognised."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            f"Unsupported storage backend: {backend!r}. "
            f"Supported: {', '.join(repr(b) for b in SUPPORTED_BACKENDS)}",
            "STORAGE_UNSUPPORTED_BACKEND",
            {"backend": backend, "supported": list(SUPPORTED_BACKENDS)},
        )


class StorageConfigurationError(StorageException):
    """Backend could not be configured (client setup, credentials, settings)."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(
            f"Failed to configure {backend} storage: {reason}",
            "STORAGE_CONFIGURATION_ERROR",
            {"backend": backend, "reason": reason},
        )
