"""Upload reconciliation between the images folder and images.json."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Protocol, final

from image_uploader.metadata.image_records import ImageRecordStore
from image_uploader.models.upload import ReconcileSummary, UploadFailure, UploadResult
from image_uploader.parsers.image_collector import (
    collect_image_files,
    create_object_name,
    get_image_name,
    get_mime_type,
)
from image_uploader.progress.tracker import UploadTracker
from image_uploader.uploaders.retry import (
    BackoffFn,
    RetryError,
    exponential_backoff,
    retry_call,
)


class ObjectStore(Protocol):
    def put_object(self, object_name: str, data: bytes, content_type: str) -> None: ...

    def public_url(self, object_name: str) -> str: ...


class ImagesFolderNotFoundError(FileNotFoundError):
    """Raised when the local images folder does not exist."""


class UploadError(Exception):
    """Raised when a single image could not be uploaded."""


@final
class UploadReconciler:
    """Uploads every local image that has no entry in the records file yet."""

    def __init__(
        self,
        store: ObjectStore,
        images_dir: Path,
        records_file: Path,
        tracker: UploadTracker | None = None,
        max_attempts: int = 3,
        backoff: BackoffFn = exponential_backoff,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        """Initialize the reconciler.

        Args:
            store: Object store receiving the uploads
            images_dir: Folder scanned for images
            records_file: JSON file mapping logical names to URLs
            tracker: Output tracker, a default one is created if omitted
            max_attempts: Upload attempts per file
            backoff: Delay in seconds after a failed attempt
            sleep: Function used to wait between attempts, time.sleep if omitted
        """
        self.store = store
        self.images_dir = images_dir
        self.tracker = tracker or UploadTracker()
        self.records = ImageRecordStore(records_file, self.tracker.console)
        self.max_attempts = max_attempts
        self.backoff = backoff
        self.sleep = sleep or time.sleep

    def run(self) -> ReconcileSummary:
        """Upload missing images and persist the merged records.

        Returns:
            Summary of the run

        Raises:
            ImagesFolderNotFoundError: If the images folder is missing
        """
        if not self.images_dir.is_dir():
            raise ImagesFolderNotFoundError(f"Images folder not found at {self.images_dir}")

        existing = self.records.load()
        if existing:
            self.tracker.display_info(
                f"Found {len(existing)} already uploaded image(s) in {self.records.record_file.name}"
            )

        image_files = collect_image_files(self.images_dir)
        summary = ReconcileSummary(total_images=len(image_files))

        if not image_files:
            self.tracker.display_info(f"No image files found in {self.images_dir}")
            return summary

        files_to_upload = self._select_files_to_upload(image_files, existing)
        summary.skipped_count = len(image_files) - len(files_to_upload)

        self.tracker.console.print(f"Total images: {len(image_files)}")
        self.tracker.console.print(f"Already uploaded: {summary.skipped_count}")
        self.tracker.console.print(f"To upload: {len(files_to_upload)}\n")

        if not files_to_upload:
            self.tracker.display_success("All images are already uploaded!")
            return summary

        self.tracker.display_files_to_upload(files_to_upload)

        results = dict(existing)
        with self.tracker.track_uploads(len(files_to_upload)) as progress:
            for file_path in files_to_upload:
                progress.set_description(f"Uploading {file_path.name}")
                try:
                    result = self.upload_file(file_path)
                    results[result.name] = result.url
                    summary.uploaded_count += 1
                except UploadError as e:
                    self.tracker.display_error(f"Failed to upload {file_path.name}", e)
                    summary.failures.append(UploadFailure(file_path.name, str(e)))
                progress.update()

        try:
            self.records.save(results)
            summary.records_saved = True
            self.tracker.display_success(f"URLs saved to {self.records.record_file}")
        except OSError as e:
            summary.save_error = str(e)
            self.tracker.display_error(f"Failed to save {self.records.record_file.name}", e)

        self.tracker.display_summary(summary)
        return summary

    def upload_file(self, file_path: Path) -> UploadResult:
        """Upload one image with bounded retries.

        Args:
            file_path: Local image path

        Returns:
            UploadResult with the public URL of the new object

        Raises:
            UploadError: If every attempt failed or the file cannot be read
        """
        filename = file_path.name
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise UploadError(f"Failed to read {filename}: {e}") from e

        object_name = create_object_name(file_path)
        content_type = get_mime_type(file_path)

        def attempt_upload() -> None:
            self.store.put_object(object_name, data, content_type)

        def report_failure(attempt: int, max_attempts: int, error: Exception, delay: float | None) -> None:
            self.tracker.display_attempt_failure(filename, attempt, max_attempts, error, delay)

        try:
            retry_call(
                attempt_upload,
                max_attempts=self.max_attempts,
                backoff=self.backoff,
                sleep=self.sleep,
                on_failure=report_failure,
            )
        except RetryError as e:
            raise UploadError(
                f"Failed to upload {filename} after {e.attempts} attempts: {e.last_error}"
            ) from e.last_error

        self.tracker.display_success(f"Uploaded {filename} -> {object_name}")
        return UploadResult(
            name=get_image_name(file_path),
            url=self.store.public_url(object_name),
            object_name=object_name,
            original_filename=filename,
        )

    def _select_files_to_upload(self, image_files: list[Path], existing: dict[str, str]) -> list[Path]:
        """Pick candidates whose logical name is not yet recorded.

        When several files share a logical name, the first one in listing
        order claims it and the rest count as already uploaded.
        """
        files_to_upload: list[Path] = []
        claimed: dict[str, str] = {}
        for file_path in image_files:
            name = get_image_name(file_path)
            if name in existing:
                continue
            if name in claimed:
                self.tracker.display_warning(
                    f"Skipping {file_path.name}: name '{name}' is already taken by {claimed[name]}"
                )
                continue
            claimed[name] = file_path.name
            files_to_upload.append(file_path)
        return files_to_upload
