"""Protocol interfaces for dependency injection."""

from pathlib import Path
from typing import Protocol

from .domain.models import FileOutcome, ReplacementTarget, RunStatistics


class StatusReporterProtocol(Protocol):
    """Interface for per-file and per-directory status lines."""

    def file_updated(self, path: Path) -> None:
        ...

    def file_skipped(self, path: Path) -> None:
        ...

    def file_failed(self, path: Path, message: str) -> None:
        ...

    def directory_failed(self, path: Path, message: str) -> None:
        ...


class FileRewriterProtocol(Protocol):
    """Interface for rewriting asset references in one file."""

    def process_file(self, file_path: Path, target: ReplacementTarget) -> FileOutcome:
        """
        Rewrite doki-docs references in a file.

        Args:
            file_path: HTML file to rewrite
            target: URLs to write into matching attributes

        Returns:
            Outcome of the rewrite; failures are returned, never raised
        """
        ...


class DirectoryWalkerProtocol(Protocol):
    """Interface for walking a directory tree."""

    def process_directory(self, root: Path) -> RunStatistics:
        """
        Rewrite every eligible HTML file below root.

        Args:
            root: Directory to walk

        Returns:
            Counters aggregated over root and all its subdirectories
        """
        ...
