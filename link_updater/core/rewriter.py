"""
HTML File Rewriter.

Points doki-docs asset references in one HTML file at new URLs.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from ..console import ConsoleReporter
from ..domain.models import FileOutcome, ReplacementTarget
from ..protocols import StatusReporterProtocol
from .pattern_matcher import AssetPatternMatcher

logger = logging.getLogger(__name__)


class HtmlFileRewriter:
    """
    Rewrites a single HTML file in place.

    Read and write failures are returned as failed outcomes so that a walk
    over many files is never aborted by one bad file.
    """

    ENCODING = 'utf-8'

    def __init__(
        self,
        matcher: AssetPatternMatcher | None = None,
        reporter: StatusReporterProtocol | None = None,
    ):
        """
        Initialize rewriter.

        Args:
            matcher: Pattern matcher to use (creates default if None)
            reporter: Receives one status line per file (stdout if None)
        """
        self.matcher = matcher or AssetPatternMatcher()
        self.reporter = reporter or ConsoleReporter()

    def process_file(self, file_path: Path, target: ReplacementTarget) -> FileOutcome:
        """
        Rewrite doki-docs references in a file.

        The file is written back only when its content changed.

        Args:
            file_path: HTML file to rewrite
            target: URLs to write into matching attributes

        Returns:
            Outcome of the rewrite
        """
        file_path = Path(file_path)

        try:
            # newline='' keeps CRLF line endings intact on write-back
            with open(file_path, encoding=self.ENCODING, newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(file_path, e)

        new_content, replacements = self.matcher.rewrite(content, target)

        if new_content == content:
            logger.debug(f"No doki-docs references changed in {file_path}")
            self.reporter.file_skipped(file_path)
            return FileOutcome.unchanged(file_path)

        try:
            self._replace_content(file_path, new_content)
        except OSError as e:
            return self._fail(file_path, e)

        logger.debug(f"Rewrote {replacements} reference(s) in {file_path}")
        self.reporter.file_updated(file_path)
        return FileOutcome.updated(file_path, replacements)

    def _replace_content(self, file_path: Path, content: str) -> None:
        """
        Swap new content into place without truncating the original first.

        The content goes to a temporary file in the same directory, which
        then replaces the target in one rename. On any failure the
        temporary file is removed and the original is left untouched.

        Args:
            file_path: File to overwrite
            content: New text
        """
        # Resolve so a symlinked file is updated, not replaced by a regular file
        target_path = file_path.resolve()
        mode = stat.S_IMODE(target_path.stat().st_mode)

        tmp = tempfile.NamedTemporaryFile(
            'w',
            encoding=self.ENCODING,
            newline='',
            dir=target_path.parent,
            prefix=f'.{target_path.name}.',
            suffix='.tmp',
            delete=False,
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                tmp.write(content)
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, target_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    def _fail(self, file_path: Path, error: Exception) -> FileOutcome:
        message = str(error) or type(error).__name__
        logger.debug(f"Failed to process {file_path}: {message}")
        self.reporter.file_failed(file_path, message)
        return FileOutcome.failed(file_path, message)


def process_file(file_path: Path | str, css_url: str, js_url: str) -> FileOutcome:
    """
    Rewrite one file with a default rewriter.

    Args:
        file_path: HTML file to rewrite
        css_url: Replacement stylesheet URL
        js_url: Replacement script URL

    Returns:
        Outcome of the rewrite
    """
    target = ReplacementTarget(stylesheet_url=css_url, script_url=js_url)
    return HtmlFileRewriter().process_file(Path(file_path), target)
