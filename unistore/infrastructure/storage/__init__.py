"""Storage: local filesystem and S3-compatible backends.

StorageFactory.create_storage(tag, root) returns a backend behind
StorageProtocol (make_dir, write, read, list_dir, delete, exists).
Implementations are loaded lazily inside the factory so that the local
backend never imports boto3.
"""

from unistore.infrastructure.storage.factory import StorageFactory
from unistore.infrastructure.storage.protocol import (
    DirEntry,
    StorageHandle,
    StorageProtocol,
)

__all__ = [
    "DirEntry",
    "StorageFactory",
    "StorageHandle",
    "StorageProtocol",
]
