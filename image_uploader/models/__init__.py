"""Data models for the image uploader."""

from .config import ConfigError, StorageConfig
from .upload import ReconcileSummary, UploadFailure, UploadResult

__all__ = [
    "ConfigError",
    "ReconcileSummary",
    "StorageConfig",
    "UploadFailure",
    "UploadResult",
]
