"""Error types surfaced to reviewers as a single advisory message."""
from __future__ import annotations

from typing import Iterable


class TrackerError(Exception):
    """Base class for every failure a tracker action can report."""

    default_message = "Unexpected tracker error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class FileReadError(TrackerError):
    default_message = "Could not read the file. Please try again."


class InsufficientDataError(TrackerError):
    default_message = "File does not contain enough data."


class MissingColumnsError(TrackerError):
    """Raised when required headers cannot be located in the first row."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "Required columns not found in the spreadsheet: " + ", ".join(self.missing)
        )


class NoMatchingRowsError(TrackerError):
    default_message = "No rows found matching the specified criteria."


class ProcessingError(TrackerError):
    default_message = "Error processing the file. Check that the format is correct."


class ExportError(TrackerError):
    default_message = "Error exporting the file."
