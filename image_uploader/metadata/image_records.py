"""Persisted name-to-URL records for uploaded images."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console


class ImageRecordStore:
    """Reads and writes the images.json map of logical name to public URL."""

    def __init__(self, record_file: Path | None = None, console: Console | None = None) -> None:
        """Initialize ImageRecordStore.

        Args:
            record_file: Path to the records JSON file
            console: Rich console used for load warnings
        """
        self.record_file: Path = record_file or Path("images.json")
        self.console = console or Console()

    def load(self) -> dict[str, str]:
        """Load existing records, discarding anything that is not a name/URL pair.

        Returns:
            Mapping of logical name to public URL, empty if the file is absent
            or unusable
        """
        if not self.record_file.exists():
            return {}

        try:
            with self.record_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            self._warn(f"Could not load existing {self.record_file.name}: {e}")
            return {}

        if not isinstance(data, dict):
            self._warn(
                f"Ignoring {self.record_file.name}: expected a JSON object, "
                + f"got {type(data).__name__}"
            )
            return {}

        records: dict[str, str] = {}
        for name, url in data.items():
            if isinstance(url, str) and url and name:
                records[name] = url

        dropped = len(data) - len(records)
        if dropped:
            self._warn(
                f"Dropped {dropped} malformed record(s) from {self.record_file.name}"
            )

        return records

    def save(self, records: dict[str, str]) -> None:
        """Overwrite the records file with the full map.

        Raises:
            OSError: If file cannot be written due to permissions or I/O error
        """
        try:
            with self.record_file.open("w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise OSError(f"Failed to write image records to {self.record_file}: {e}") from e

    def _warn(self, message: str) -> None:
        self.console.print(f"[yellow]Warning: {message}[/yellow]")
