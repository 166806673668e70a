"""Local filesystem storage: keys are paths relative to a base directory."""

from __future__ import annotations

import os
from typing import BinaryIO

from unistore.infrastructure.storage.protocol import DirEntry, StorageHandle
from unistore.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class LocalStorageService:
    """Filesystem-backed storage rooted at a base directory.

    Every method is a thin wrapper over one os call; OSError subclasses
    (FileNotFoundError, NotADirectoryError, PermissionError, ...) propagate
    to the caller unchanged. The base directory is not created here; use
    make_dir or create it beforehand.
    """

    DIR_MODE = 0o755
    FILE_MODE = 0o644

    def __init__(self, storage_root: str) -> None:
        """Initialize local storage.

        Args:
            storage_root: Base directory all keys are resolved against.
        """
        self.handle = StorageHandle(backend="local", root=storage_root)

    def _get_full_path(self, *parts: str) -> str:
        """Join parts under the root; leading separators never escape it."""
        return os.path.join(self.handle.root, *(p.lstrip("/\\") for p in parts))

    def _open_file(self, path: str, flags: int) -> int:
        return os.open(path, flags, self.FILE_MODE)

    def make_dir(self, name: str, path: str) -> None:
        full_path = self._get_full_path(path, name)
        os.makedirs(full_path, mode=self.DIR_MODE, exist_ok=True)
        logger.debug("Created directory %s", full_path)

    def write(self, key: str, content: str | bytes) -> None:
        """Append content to the file at key, creating it if absent.

        Empty content is a no-op: the file is neither opened nor created.
        """
        if not content:
            return
        data = content.encode("utf-8") if isinstance(content, str) else content
        full_path = self._get_full_path(key)
        with open(full_path, "ab", opener=self._open_file) as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), full_path)

    def read(self, key: str) -> BinaryIO:
        """Open the file at key for binary reading. Caller closes the handle."""
        full_path = self._get_full_path(key)
        logger.debug("Opening %s for reading", full_path)
        return open(full_path, "rb")

    def list_dir(self, key: str) -> list[DirEntry]:
        """Entries directly under key, in the order the filesystem yields them."""
        full_path = self._get_full_path(key)
        with os.scandir(full_path) as it:
            entries = [DirEntry.from_os_entry(entry) for entry in it]
        logger.debug("Listed %d entries under %s", len(entries), full_path)
        return entries

    def delete(self, key: str) -> None:
        full_path = self._get_full_path(key)
        os.remove(full_path)
        logger.debug("Deleted %s", full_path)

    def exists(self, key: str) -> bool:
        """Return True if key exists.

        A missing path returns False; any other stat failure is raised.
        """
        full_path = self._get_full_path(key)
        try:
            os.stat(full_path)
        except FileNotFoundError:
            logger.debug("%s does not exist", full_path)
            return False
        logger.debug("%s exists", full_path)
        return True
