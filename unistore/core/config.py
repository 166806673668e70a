"""Application configuration (settings and environment).

Single source of truth for configuration. Uses pydantic-settings with
.env support. Nothing is read from the environment outside this module:
the S3 adapter receives an explicit S3Config built here or by the caller.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3Config(BaseModel):
    """Connection settings for the S3 adapter.

    Any field left as None falls back to boto3's default chain (environment,
    shared config files, instance metadata).
    """

    model_config = ConfigDict(frozen=True)

    region: str | None = None
    endpoint_url: str | None = None
    access_key: str | None = None
    secret_key: SecretStr | None = None
    profile: str | None = None

    @model_validator(mode="after")
    def validate_credential_pair(self) -> "S3Config":
        """Access key and secret key must be set together."""
        has_secret = bool(self.secret_key and self.secret_key.get_secret_value())
        if bool(self.access_key) != has_secret:
            raise ValueError(
                "access_key and secret_key must be provided together "
                "(or both omitted to use the default credential chain)."
            )
        return self


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    Only storage_backend is validated here; whether a root or bucket is
    present is checked by StorageFactory when a backend is built.
    """

    # App
    app_name: str = "unistore"
    debug: bool = False

    # Storage
    storage_backend: str = "local"
    storage_root: str = "./storage"
    s3_bucket: str | None = None
    s3_region: str | None = None
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: SecretStr | None = None
    s3_profile: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    def s3_config(self) -> S3Config:
        """Build the S3 adapter configuration from these settings.

        Raises:
            pydantic.ValidationError: Only one of access key / secret key set.
        """
        return S3Config(
            region=self.s3_region,
            endpoint_url=self.s3_endpoint_url,
            access_key=self.s3_access_key,
            secret_key=self.s3_secret_key,
            profile=self.s3_profile,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    In tests, call get_settings.cache_clear() after changing env vars so
    the next get_settings() picks up the new values.
    """
    return Settings()
