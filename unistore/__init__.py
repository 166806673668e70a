"""unistore: one file-like interface over local disk and S3-compatible storage.

Usage::

    from unistore import create_storage

    storage = create_storage("local", "/srv/data")
    storage.write("notes.txt", "hello")
    with storage.read("notes.txt") as f:
        data = f.read()
"""

from unistore.core.config import S3Config, Settings, get_settings
from unistore.domain.exceptions import UnistoreException
from unistore.infrastructure.exceptions import (
    StorageConfigurationError,
    StorageException,
    UnsupportedBackendError,
)
from unistore.infrastructure.storage import (
    DirEntry,
    StorageFactory,
    StorageHandle,
    StorageProtocol,
)

create_storage = StorageFactory.create_storage

__all__ = [
    "DirEntry",
    "S3Config",
    "Settings",
    "StorageConfigurationError",
    "StorageException",
    "StorageFactory",
    "StorageHandle",
    "StorageProtocol",
    "UnistoreException",
    "UnsupportedBackendError",
    "create_storage",
    "get_settings",
]
