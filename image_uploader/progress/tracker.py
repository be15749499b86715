"""Console output and progress bars for upload runs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import final

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from image_uploader.models.upload import ReconcileSummary


@final
class UploadTracker:
    """Reports upload progress and outcomes on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the tracker.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    @contextmanager
    def track_uploads(self, total_files: int) -> Iterator[FileProgressContext]:
        """Context manager for tracking per-file upload progress.

        Args:
            total_files: Total number of files to upload

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        ) as progress:
            task_id = progress.add_task("Uploading images...", total=total_files)
            yield FileProgressContext(progress, task_id)

    def display_files_to_upload(self, files: list[Path]) -> None:
        self.console.print("Files to upload:")
        for i, file_path in enumerate(files, 1):
            self.console.print(f"  {i}. {file_path.name}")
        self.console.print("")

    def display_attempt_failure(
        self, filename: str, attempt: int, max_attempts: int, error: Exception, delay: float | None
    ) -> None:
        """Report one failed upload attempt and the wait before the next one."""
        self.console.print(
            f"[red]✗ Upload error for {filename} (attempt {attempt}/{max_attempts}): {error}[/red]"
        )
        if delay is not None:
            self.console.print(f"[dim]  Retrying in {delay:g}s...[/dim]")

    def display_summary(self, summary: ReconcileSummary) -> None:
        """Display a summary of the upload run.

        Args:
            summary: Counts and failures collected during the run
        """
        table = Table(title="Upload Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Total images", str(summary.total_images))
        table.add_row("Successfully uploaded", str(summary.uploaded_count))
        table.add_row("Already uploaded (skipped)", str(summary.skipped_count))
        table.add_row("Failed", str(summary.failed_count))

        self.console.print("\n")
        self.console.print(table)

        if summary.failures:
            self.console.print("\n[red]Failed uploads:[/red]")
            for failure in summary.failures:
                self.console.print(f"  - {failure.filename}: {failure.error}")
            self.console.print("\nTo retry failed uploads, simply run the script again.")

    def display_error(self, message: str, exception: Exception | None = None) -> None:
        """Display an error message with optional exception details.

        Args:
            message: Error message to display
            exception: Optional exception for additional context
        """
        self.console.print(f"[red]Error: {message}[/red]")
        if exception:
            self.console.print(f"[dim]Details: {exception}[/dim]")

    def display_warning(self, message: str) -> None:
        self.console.print(f"[yellow]Warning: {message}[/yellow]")

    def display_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {message}[/green]")

    def display_info(self, message: str) -> None:
        self.console.print(f"[blue]Info: {message}[/blue]")


@final
class FileProgressContext:
    """Context for tracking per-file upload progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id

    def update(self, advance: int = 1, description: str | None = None) -> None:
        """Update the upload progress.

        Args:
            advance: Number of files to advance
            description: Optional description update
        """
        self.progress.update(self.task_id, advance=advance, description=description)

    def set_description(self, description: str) -> None:
        self.progress.update(self.task_id, description=description)
