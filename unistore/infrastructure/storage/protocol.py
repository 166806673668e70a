"""Storage protocol and shared value types. Implementations: LocalStorageService, S3StorageService."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Literal, Protocol, runtime_checkable

BackendType = Literal["local", "s3"]

OBJECT_KEY_DELIMITER = "/"


@dataclass(frozen=True)
class StorageHandle:
    """Backend kind and root location (directory path or bucket name)."""

    backend: BackendType
    root: str


@dataclass(frozen=True)
class DirEntry:
    """One item returned by list_dir."""

    name: str
    is_dir: bool

    @classmethod
    def from_os_entry(cls, entry: os.DirEntry[str]) -> DirEntry:
        """Entry for a real filesystem item; name is the basename."""
        return cls(name=entry.name, is_dir=entry.is_dir())

    @classmethod
    def from_object_key(cls, key: str) -> DirEntry:
        """Entry for a listed object; name is the full key."""
        return cls(name=key, is_dir=key.endswith(OBJECT_KEY_DELIMITER))


@runtime_checkable
class StorageProtocol(Protocol):
    """Protocol for storage backends (local filesystem, S3-compatible).

    Keys are relative to the backend's root. Errors from the underlying
    filesystem or client are raised unchanged.
    """

    handle: StorageHandle

    def make_dir(self, name: str, path: str) -> None:
        """Create directory path/name (and parents). No-op on object stores."""
        ...

    def write(self, key: str, content: str | bytes) -> None:
        """Write content at key. Empty content performs no write."""
        ...

    def read(self, key: str) -> BinaryIO:
        """Return a live binary stream; the caller must close it."""
        ...

    def list_dir(self, key: str) -> list[DirEntry]:
        """List entries directly under key."""
        ...

    def delete(self, key: str) -> None:
        """Delete the single item at key."""
        ...

    def exists(self, key: str) -> bool:
        """Return True if key exists, False if it is missing."""
        ...
