"""Console progress reporting."""

from .tracker import FileProgressContext, UploadTracker

__all__ = ["FileProgressContext", "UploadTracker"]
