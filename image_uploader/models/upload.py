"""Upload result data models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UploadResult:
    """Result of handling a single image.

    Results returned by ``UploadReconciler.upload_file`` always describe a
    newly uploaded object, so ``skipped`` is False for them. Images skipped
    because their name is already recorded produce no result and are only
    counted in ``ReconcileSummary.skipped_count``.
    """

    name: str
    url: str
    object_name: str | None
    original_filename: str
    skipped: bool = False


@dataclass
class UploadFailure:
    """An image whose upload exhausted every attempt."""

    filename: str
    error: str


@dataclass
class ReconcileSummary:
    """Counts and failures collected over one reconciler run."""

    total_images: int = 0
    skipped_count: int = 0
    uploaded_count: int = 0
    failures: list[UploadFailure] = field(default_factory=list)
    records_saved: bool = False
    save_error: str | None = None

    @property
    def failed_count(self) -> int:
        return len(self.failures)
