"""Upload local images to MinIO and keep a name-to-URL map."""

__version__ = "0.1.0"
