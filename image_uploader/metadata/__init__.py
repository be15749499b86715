"""Persisted upload state."""

from .image_records import ImageRecordStore

__all__ = ["ImageRecordStore"]
