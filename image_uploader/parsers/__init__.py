"""Image discovery and naming utilities."""

from .image_collector import (
    collect_image_files,
    create_object_name,
    get_image_name,
    get_mime_type,
)

__all__ = ["collect_image_files", "create_object_name", "get_image_name", "get_mime_type"]
