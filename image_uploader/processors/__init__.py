"""Upload orchestration."""

from .reconciler import ImagesFolderNotFoundError, UploadError, UploadReconciler

__all__ = ["ImagesFolderNotFoundError", "UploadError", "UploadReconciler"]
