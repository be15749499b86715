"""Image file collection and naming utilities."""

from __future__ import annotations

import uuid
from pathlib import Path

# Supported image file extensions
SUPPORTED_IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.gif', '.webp', '.svg', '.bmp'}

MIME_TYPES = {
    '.png': 'image/png',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
    '.svg': 'image/svg+xml',
    '.bmp': 'image/bmp',
}

DEFAULT_MIME_TYPE = 'application/octet-stream'


def collect_image_files(folder_path: Path) -> list[Path]:
    """
    Collect all image files from a folder with supported extensions.

    Files are returned in directory-listing order; anything without a
    supported extension is skipped without comment.

    Args:
        folder_path: Path to the folder to scan

    Returns:
        list[Path]: List of image file paths
    """
    image_files: list[Path] = []
    for file_path in folder_path.iterdir():
        if file_path.is_file() and file_path.suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS:
            image_files.append(file_path)

    return image_files


def get_image_name(file_path: Path) -> str:
    """Logical name of an image: its filename without the extension."""
    return file_path.stem


def get_mime_type(file_path: Path) -> str:
    return MIME_TYPES.get(file_path.suffix.lower(), DEFAULT_MIME_TYPE)


def create_object_name(file_path: Path) -> str:
    """
    Build a unique remote object name for an image.

    Args:
        file_path: Local image path

    Returns:
        str: ``{uuid}-{logical name}{extension}``
    """
    return f"{uuid.uuid4()}-{file_path.stem}{file_path.suffix}"
