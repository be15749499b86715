"""MinIO object storage implementation."""

from __future__ import annotations

import io

from minio import Minio

from image_uploader.models.config import StorageConfig


class MinioStore:
    """Puts objects into the configured MinIO bucket."""

    def __init__(self, config: StorageConfig, client: Minio | None = None) -> None:
        """Initialize the store.

        Args:
            config: Connection parameters and target bucket
            client: Pre-built MinIO client, built from ``config`` if omitted
        """
        self.config = config
        self.bucket: str = config.bucket
        self.client = client or Minio(
            config.netloc,
            access_key=config.access_key,
            secret_key=config.secret_key,
            secure=config.secure,
        )

    def put_object(self, object_name: str, data: bytes, content_type: str) -> None:
        """Upload a payload under the given object name.

        Args:
            object_name: Remote object name
            data: Full file contents
            content_type: Value for the Content-Type header

        Raises:
            Exception: Whatever the MinIO client raises (S3Error, urllib3 errors)
        """
        self.client.put_object(
            bucket_name=self.bucket,
            object_name=object_name,
            data=io.BytesIO(data),
            length=len(data),
            content_type=content_type,
        )

    def public_url(self, object_name: str) -> str:
        return self.config.public_url(object_name)
