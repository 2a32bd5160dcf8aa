"""
Link Updater Domain Models.

Immutable value objects describing one run of the updater.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ReplacementTarget:
    """
    Immutable pair of URLs that replace the doki-docs asset references.

    Attributes:
        stylesheet_url: URL written into matching href attributes
        script_url: URL written into matching src attributes
    """

    stylesheet_url: str
    script_url: str


@dataclass(frozen=True)
class FileOutcome:
    """
    Immutable result of processing a single HTML file.

    Attributes:
        path: File that was processed
        succeeded: False if the file could not be read or written
        changed: True if the file was rewritten
        error_message: Description of the failure, if any
        replacements: Number of attribute substitutions made
    """

    path: Path
    succeeded: bool
    changed: bool
    error_message: Optional[str] = None
    replacements: int = 0

    @classmethod
    def updated(cls, path: Path, replacements: int) -> 'FileOutcome':
        return cls(path=path, succeeded=True, changed=True, replacements=replacements)

    @classmethod
    def unchanged(cls, path: Path) -> 'FileOutcome':
        return cls(path=path, succeeded=True, changed=False)

    @classmethod
    def failed(cls, path: Path, error_message: str) -> 'FileOutcome':
        return cls(path=path, succeeded=False, changed=False, error_message=error_message)


@dataclass(frozen=True)
class RunStatistics:
    """
    Immutable run counters.

    Each directory level builds its own statistics and folds in those of
    its subdirectories with ``+``.

    Attributes:
        files_processed: HTML files handed to the rewriter
        files_updated: Files rewritten with new URLs
        files_skipped: Files that needed no change
        files_errored: Files (or directories) that failed
    """

    files_processed: int = 0
    files_updated: int = 0
    files_skipped: int = 0
    files_errored: int = 0

    def __add__(self, other: 'RunStatistics') -> 'RunStatistics':
        if not isinstance(other, RunStatistics):
            return NotImplemented
        return RunStatistics(
            files_processed=self.files_processed + other.files_processed,
            files_updated=self.files_updated + other.files_updated,
            files_skipped=self.files_skipped + other.files_skipped,
            files_errored=self.files_errored + other.files_errored,
        )

    def with_outcome(self, outcome: FileOutcome) -> 'RunStatistics':
        """
        Count one processed file.

        Args:
            outcome: Result returned by the file rewriter

        Returns:
            New statistics including this file
        """
        processed = self.files_processed + 1
        if not outcome.succeeded:
            return replace(self, files_processed=processed, files_errored=self.files_errored + 1)
        if outcome.changed:
            return replace(self, files_processed=processed, files_updated=self.files_updated + 1)
        return replace(self, files_processed=processed, files_skipped=self.files_skipped + 1)

    def with_directory_error(self) -> 'RunStatistics':
        """Count a directory that could not be read."""
        return replace(self, files_errored=self.files_errored + 1)

    @property
    def is_consistent(self) -> bool:
        """
        Check that every processed file landed in exactly one bucket.

        A directory that could not be listed adds to files_errored without
        adding to files_processed, so this is False after such a failure.
        """
        return self.files_processed == (
            self.files_updated + self.files_skipped + self.files_errored
        )

    @property
    def has_updates(self) -> bool:
        return self.files_updated > 0

    @property
    def has_errors(self) -> bool:
        return self.files_errored > 0
