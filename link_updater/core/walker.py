"""
Directory Walker.

Walks a directory tree and rewrites every eligible HTML file.
"""

import logging
from pathlib import Path

from ..console import ConsoleReporter
from ..domain.models import ReplacementTarget, RunStatistics
from ..protocols import FileRewriterProtocol, StatusReporterProtocol
from .pattern_matcher import AssetPatternMatcher
from .rewriter import HtmlFileRewriter

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """
    Depth-first walk that feeds HTML files to a file rewriter.

    Hidden directories and dependency caches are skipped together with
    everything below them.
    """

    EXCLUDED_DIRECTORIES = frozenset({'node_modules'})
    HIDDEN_PREFIX = '.'

    def __init__(
        self,
        target: ReplacementTarget,
        rewriter: FileRewriterProtocol | None = None,
        matcher: AssetPatternMatcher | None = None,
        reporter: StatusReporterProtocol | None = None,
    ):
        """
        Initialize walker.

        Args:
            target: URLs to write into matching files
            rewriter: File rewriter to use (creates default if None)
            matcher: Decides which files are HTML (creates default if None)
            reporter: Receives directory errors (stdout if None)
        """
        self.target = target
        self.reporter = reporter or ConsoleReporter()
        self.matcher = matcher or AssetPatternMatcher()
        self.rewriter = rewriter or HtmlFileRewriter(self.matcher, self.reporter)

    def is_excluded_directory(self, path: Path) -> bool:
        """
        Check if a directory must not be traversed.

        Args:
            path: Directory to check

        Returns:
            True for hidden directories and dependency caches
        """
        return path.name.startswith(self.HIDDEN_PREFIX) or path.name in self.EXCLUDED_DIRECTORIES

    def process_directory(self, root: Path) -> RunStatistics:
        """
        Rewrite every eligible HTML file below root.

        A directory that cannot be listed counts as one error and does not
        stop the walk of its siblings.

        Args:
            root: Directory to walk

        Returns:
            Counters aggregated over root and all its subdirectories
        """
        return self._walk(Path(root), set())

    def _walk(self, directory: Path, visited: set[Path]) -> RunStatistics:
        stats = RunStatistics()

        try:
            # Symlinked directories are followed, but each real path only once
            real_path = directory.resolve()
            if real_path in visited:
                logger.debug(f"Already visited, skipping: {directory}")
                return stats
            visited.add(real_path)

            children = sorted(directory.iterdir())
        except OSError as e:
            self.reporter.directory_failed(directory, str(e))
            return stats.with_directory_error()

        logger.debug(f"Scanning {directory} ({len(children)} entries)")

        for child in children:
            try:
                is_dir = child.is_dir()
                is_html = not is_dir and self.matcher.is_html_file(child)
            except OSError as e:
                self.reporter.directory_failed(child, str(e))
                stats = stats.with_directory_error()
                continue

            if is_dir:
                if self.is_excluded_directory(child):
                    logger.debug(f"Excluded directory: {child}")
                    continue
                stats = stats + self._walk(child, visited)
            elif is_html:
                outcome = self.rewriter.process_file(child, self.target)
                stats = stats.with_outcome(outcome)

        return stats


def process_directory(root: Path | str, css_url: str, js_url: str) -> RunStatistics:
    """
    Walk root with a default walker.

    Args:
        root: Directory to walk
        css_url: Replacement stylesheet URL
        js_url: Replacement script URL

    Returns:
        Counters aggregated over the whole tree
    """
    target = ReplacementTarget(stylesheet_url=css_url, script_url=js_url)
    return DirectoryWalker(target).process_directory(Path(root))
