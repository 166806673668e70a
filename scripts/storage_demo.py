"""Walk through every storage operation against a configured backend.

Usage:
    python -m scripts.storage_demo [--backend local|s3] [--root ROOT] [--dir DIR]

Backend, root and S3 credentials default to the settings (STORAGE_BACKEND,
STORAGE_ROOT, S3_BUCKET, S3_REGION, ... or .env). Lists DIR, writes
DIR/test.txt, reads it back, then deletes it.
"""

import argparse
import sys

from unistore.core.config import get_settings
from unistore.domain.exceptions import UnistoreException
from unistore.infrastructure.storage import StorageFactory
from unistore.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the demo; exits non-zero on configuration errors."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--backend", help="'local' or 's3' (default: STORAGE_BACKEND)")
    parser.add_argument("--root", help="Base directory or bucket (default from settings)")
    parser.add_argument("--dir", default="output", help="Directory / prefix to use")
    args = parser.parse_args()

    setup_logging()
    settings = get_settings()
    backend = args.backend or settings.storage_backend
    root = args.root or (settings.s3_bucket if backend == "s3" else settings.storage_root)
    if not root:
        print(f"No root configured for {backend} backend", file=sys.stderr)
        sys.exit(1)

    try:
        store = StorageFactory.create_storage(backend, root)
    except UnistoreException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    store.make_dir(args.dir, "")
    for entry in store.list_dir(args.dir):
        print("File:", entry.name)

    key = f"{args.dir}/test.txt"
    print("File exists:", store.exists(key))

    store.write(key, "Hello World")
    with store.read(key) as reader:
        print("File content:", reader.read().decode("utf-8"))

    store.delete(key)
    logger.info("Demo finished against %s://%s", backend, root)


if __name__ == "__main__":
    main()
