#!/usr/bin/env python3
"""
MinIO Image Uploader

A command-line tool that uploads every image in the local images/ folder to a
MinIO bucket and records the public URL of each one in images.json. Images
already listed in images.json are skipped, so the script can simply be run
again to retry failed uploads.

Usage:
    uv run main.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console

from image_uploader.models.config import REQUIRED_ENV_VARS, ConfigError, StorageConfig
from image_uploader.processors.reconciler import ImagesFolderNotFoundError, UploadReconciler
from image_uploader.progress.tracker import UploadTracker
from image_uploader.uploaders.minio_store import MinioStore

# Load environment variables from .env file
_ = load_dotenv()

# Initialize Rich consoles: progress on stdout, fatal errors on stderr
console = Console()
error_console = Console(stderr=True)

BASE_DIR = Path(__file__).resolve().parent
IMAGES_FOLDER = BASE_DIR / "images"
OUTPUT_FILE = BASE_DIR / "images.json"


def load_config() -> StorageConfig | None:
    """
    Build the storage configuration from environment variables.

    Returns:
        StorageConfig | None: The configuration, or None if it is incomplete
    """
    try:
        return StorageConfig.from_env()
    except ConfigError as e:
        error_console.print(f"[red]Error: {e}[/red]")
        error_console.print("Please create a .env file with your MinIO connection settings:")
        for name in REQUIRED_ENV_VARS:
            error_console.print(f"{name}=...")
        return None


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Upload images/ to MinIO and record their URLs in images.json",
    )

    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show tracebacks for fatal errors"
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the image uploader."""
    console.print("[bold blue]=== MinIO Image Uploader ===[/bold blue]\n")

    args = parse_arguments(argv)
    verbose_mode: bool = getattr(args, 'verbose', False)

    config = load_config()
    if config is None:
        sys.exit(1)

    try:
        reconciler = UploadReconciler(
            store=MinioStore(config),
            images_dir=IMAGES_FOLDER,
            records_file=OUTPUT_FILE,
            tracker=UploadTracker(console),
        )
        reconciler.run()

    except ImagesFolderNotFoundError as e:
        error_console.print(f"[red]Error: {e}[/red]")
        error_console.print("Please create an images/ folder and add your images.")
        sys.exit(1)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Upload interrupted by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"\n[red]Fatal error: {e}[/red]")
        if verbose_mode:
            import traceback
            error_console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)

    console.print("\n[green]Done![/green]")
    sys.exit(0)


if __name__ == "__main__":
    main()
