"""Core: configuration.

Single place for settings.
"""

from unistore.core.config import S3Config, Settings, get_settings

__all__ = ["S3Config", "Settings", "get_settings"]
