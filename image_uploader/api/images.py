"""
Local image listing endpoint
"""
import logging
from pathlib import Path

from fastapi import APIRouter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["images"])


def get_static_images_dir() -> Path:
    """Folder served under /images, resolved against the working directory"""
    return Path.cwd() / "static" / "images"


@router.get("/images")
def list_images() -> list[str]:
    """
    List the PNG images available in the static images folder

    Returns:
        Public paths such as ``/images/cat.png``; empty if the folder cannot be read
    """
    images_dir = get_static_images_dir()
    try:
        return [
            f"/images/{entry.name}"
            for entry in images_dir.iterdir()
            if entry.name.endswith(".png")
        ]
    except OSError as e:
        logger.warning(f"Could not read {images_dir}: {e}")
        return []
