"""Object storage upload backends."""

from .minio_store import MinioStore
from .retry import RetryError, exponential_backoff, retry_call

__all__ = ["MinioStore", "RetryError", "exponential_backoff", "retry_call"]
