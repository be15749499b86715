"""Object storage connection settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

# Environment variables that must all be present
REQUIRED_ENV_VARS = (
    "MINIO_ENDPOINT",
    "MINIO_ACCESS_KEY",
    "MINIO_SECRET_KEY",
    "MINIO_BUCKET",
)

# Characters encodeURIComponent leaves untouched besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"


class ConfigError(ValueError):
    """Raised when the storage configuration is missing or malformed."""

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing: list[str] = missing or []


def encode_uri_component(value: str) -> str:
    """Percent-encode a value the way browsers encode a URI component."""
    return quote(value, safe=URI_COMPONENT_SAFE)


@dataclass(frozen=True)
class StorageConfig:
    """Connection parameters for the MinIO bucket.

    Built once at startup and handed to the store and the reconciler.
    """

    endpoint: str
    access_key: str
    secret_key: str
    bucket: str

    def __post_init__(self) -> None:
        parts = urlsplit(self.endpoint)
        if not parts.scheme or not parts.hostname:
            raise ConfigError(
                f"Invalid MINIO_ENDPOINT '{self.endpoint}': "
                + "expected a URL such as https://minio.example.com"
            )
        try:
            _ = parts.port
        except ValueError as e:
            raise ConfigError(f"Invalid port in MINIO_ENDPOINT '{self.endpoint}': {e}") from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StorageConfig:
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            StorageConfig: The parsed configuration

        Raises:
            ConfigError: If any required variable is absent or empty
        """
        env = os.environ if environ is None else environ
        missing = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
        if missing:
            raise ConfigError(
                "Missing required environment variables: " + ", ".join(missing),
                missing=missing,
            )

        return cls(
            endpoint=env["MINIO_ENDPOINT"],
            access_key=env["MINIO_ACCESS_KEY"],
            secret_key=env["MINIO_SECRET_KEY"],
            bucket=env["MINIO_BUCKET"],
        )

    @property
    def secure(self) -> bool:
        return urlsplit(self.endpoint).scheme == "https"

    @property
    def host(self) -> str:
        return urlsplit(self.endpoint).hostname or ""

    @property
    def port(self) -> int:
        explicit = urlsplit(self.endpoint).port
        if explicit:
            return explicit
        return 443 if self.secure else 80

    @property
    def netloc(self) -> str:
        """Host and port in the form the MinIO client expects."""
        return f"{self.host}:{self.port}"

    def public_url(self, object_name: str) -> str:
        """Public URL of an object stored in the configured bucket."""
        base = self.endpoint.rstrip("/")
        return f"{base}/{self.bucket}/{encode_uri_component(object_name)}"
