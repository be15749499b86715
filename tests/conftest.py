"""Pytest configuration and shared fixtures for image uploader tests."""

from io import StringIO
from pathlib import Path
from unittest.mock import Mock

import pytest
from rich.console import Console

from image_uploader.models.config import StorageConfig
from image_uploader.progress.tracker import UploadTracker


# ============================================================================
# Console & Display Fixtures
# ============================================================================


@pytest.fixture
def console():
    """Rich console writing to an in-memory buffer."""
    return Console(file=StringIO(), width=200)


@pytest.fixture
def tracker(console):
    return UploadTracker(console)


# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
def storage_config():
    return StorageConfig(
        endpoint="https://minio.example.com",
        access_key="access",
        secret_key="secret",
        bucket="images",
    )


@pytest.fixture
def mock_store(storage_config):
    """Object store double that accepts every upload."""
    store = Mock()
    store.put_object = Mock(return_value=None)
    store.public_url = Mock(side_effect=storage_config.public_url)
    return store


@pytest.fixture
def sleep_calls():
    """List that records every delay passed to the sleep function."""
    return []


@pytest.fixture
def fake_sleep(sleep_calls):
    return sleep_calls.append


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def images_dir(tmp_path) -> Path:
    folder = tmp_path / "images"
    folder.mkdir()
    return folder


@pytest.fixture
def records_file(tmp_path) -> Path:
    return tmp_path / "images.json"
