"""Pytest configuration and fixtures for unistore.

Filesystem tests run against a tmp_path root; S3 tests use a MagicMock in
place of the boto3 client, so no network or AWS credentials are needed.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from unistore.core.config import get_settings
from unistore.infrastructure.storage.local_storage import LocalStorageService
from unistore.infrastructure.storage.s3_storage import S3StorageService

_SETTINGS_ENV_VARS = (
    "APP_NAME",
    "DEBUG",
    "STORAGE_BACKEND",
    "STORAGE_ROOT",
    "S3_BUCKET",
    "S3_REGION",
    "S3_ENDPOINT_URL",
    "S3_ACCESS_KEY",
    "S3_SECRET_KEY",
    "S3_PROFILE",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Isolate every test from the caller's env vars and any .env file."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_root(tmp_path: Path) -> Path:
    """A testdir root holding test.txt ("random text") and subdir/1..4.txt."""
    root = tmp_path / "testdir"
    subdir = root / "subdir"
    subdir.mkdir(parents=True)
    for i in range(1, 5):
        (subdir / f"{i}.txt").touch()
    (root / "test.txt").write_bytes(b"random text")
    return root


@pytest.fixture
def local_storage(local_root: Path) -> LocalStorageService:
    return LocalStorageService(storage_root=str(local_root))


@pytest.fixture
def s3_client() -> MagicMock:
    """Stand-in for a boto3 S3 client; get_object returns a readable Body."""
    client = MagicMock()
    client.get_object.side_effect = lambda **_: {"Body": io.BytesIO(b"test content")}
    return client


@pytest.fixture
def s3_storage(s3_client: MagicMock) -> S3StorageService:
    return S3StorageService(bucket="testbucket", client=s3_client)
