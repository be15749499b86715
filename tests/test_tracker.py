"""Tests for console reporting."""

from image_uploader.models.upload import ReconcileSummary, UploadFailure


class TestDisplaySummary:
    def test_lists_counts_and_failures(self, tracker, console):
        summary = ReconcileSummary(
            total_images=3,
            skipped_count=1,
            uploaded_count=1,
            failures=[UploadFailure("dog.png", "Failed to upload dog.png after 3 attempts: timeout")],
        )

        tracker.display_summary(summary)

        output = console.file.getvalue()
        assert "Upload Summary" in output
        assert "Already uploaded (skipped)" in output
        assert "dog.png: Failed to upload dog.png after 3 attempts: timeout" in output
        assert "run the script again" in output

    def test_no_failure_section_without_failures(self, tracker, console):
        tracker.display_summary(ReconcileSummary(total_images=1, uploaded_count=1))

        assert "Failed uploads" not in console.file.getvalue()


class TestAttemptFailure:
    def test_retry_delay_is_shown(self, tracker, console):
        tracker.display_attempt_failure("cat.png", 1, 3, ConnectionError("refused"), 1.0)

        output = console.file.getvalue()
        assert "attempt 1/3" in output
        assert "Retrying in 1s" in output

    def test_last_attempt_has_no_retry_line(self, tracker, console):
        tracker.display_attempt_failure("cat.png", 3, 3, ConnectionError("refused"), None)

        assert "Retrying" not in console.file.getvalue()
