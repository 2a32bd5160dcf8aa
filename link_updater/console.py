"""
Console Output.

Colorized status lines, banners and the run summary.
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from .domain.models import ReplacementTarget, RunStatistics

RULE = '=' * 41


class Colors:
    """ANSI escape sequences."""

    RESET = '\033[0m'
    BRIGHT = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'


class ConsoleReporter:
    """
    Writes human-readable output for a run.

    Colors are only emitted when the stream is a terminal.
    """

    def __init__(self, stream: Optional[TextIO] = None, use_color: Optional[bool] = None):
        """
        Initialize reporter.

        Args:
            stream: Where to write (defaults to stdout)
            use_color: Force colors on or off (defaults to stream.isatty())
        """
        self.stream = stream or sys.stdout
        if use_color is None:
            isatty = getattr(self.stream, 'isatty', None)
            use_color = bool(isatty and isatty())
        self.use_color = use_color

    def paint(self, text: str, *codes: str) -> str:
        """Wrap text in the given color codes when colors are enabled."""
        if not self.use_color or not codes:
            return text
        return ''.join(codes) + text + Colors.RESET

    def line(self, text: str = '') -> None:
        print(text, file=self.stream, flush=True)

    # Per-file and per-directory status

    def file_updated(self, path: Path) -> None:
        self.line(self.paint('[SUCCESS] Updated: ', Colors.GREEN) + str(path))

    def file_skipped(self, path: Path) -> None:
        self.line(self.paint('[SKIPPED] No changes needed: ', Colors.YELLOW) + str(path))

    def file_failed(self, path: Path, message: str) -> None:
        self.line(self.paint('[ERROR] Failed to process: ', Colors.RED) + str(path))
        self.line(self.paint(f'        {message}', Colors.RED))

    def directory_failed(self, path: Path, message: str) -> None:
        self.line(self.paint('[ERROR] Cannot read directory: ', Colors.RED) + str(path))
        self.line(self.paint(f'        {message}', Colors.RED))

    # Session output

    def error(self, message: str) -> None:
        self.line(self.paint(f'[ERROR] {message}', Colors.RED))

    def warning(self, message: str) -> None:
        self.line(self.paint(message, Colors.YELLOW))

    def info(self, message: str) -> None:
        self.line(self.paint(message, Colors.BLUE))

    def fatal(self, message: str) -> None:
        self.line(self.paint(f'[FATAL ERROR] {message}', Colors.RED))

    def banner(self, title: str) -> None:
        self.line(self.paint(RULE, Colors.CYAN))
        self.line(self.paint(title.center(len(RULE)).rstrip(), Colors.BRIGHT, Colors.CYAN))
        self.line(self.paint(RULE, Colors.CYAN))
        self.line()

    def configuration(self, target: ReplacementTarget) -> None:
        self.line()
        self.line(self.paint('Configuration:', Colors.CYAN))
        self.line('  CSS: ' + self.paint(target.stylesheet_url, Colors.GREEN))
        self.line('  JS:  ' + self.paint(target.script_url, Colors.GREEN))
        self.line()

    def summary(self, stats: RunStatistics) -> None:
        """
        Print the summary block and the closing status line.

        Args:
            stats: Counters for the whole run
        """
        self.line()
        self.banner('Processing Complete')
        self.line(self.paint('Summary:', Colors.WHITE))
        self.line('  Files processed: ' + self.paint(str(stats.files_processed), Colors.BLUE))
        self.line('  Files updated:   ' + self.paint(str(stats.files_updated), Colors.GREEN))
        self.line('  Files skipped:   ' + self.paint(str(stats.files_skipped), Colors.YELLOW))
        error_color = Colors.RED if stats.has_errors else Colors.GREEN
        self.line('  Errors:          ' + self.paint(str(stats.files_errored), error_color))
        self.line()

        if stats.has_updates:
            self.line(self.paint('Successfully updated doki-docs references!', Colors.GREEN))
        elif stats.has_errors:
            self.line(self.paint('Completed with errors. Check the output above.', Colors.RED))
        else:
            self.line(self.paint('No files required updates.', Colors.YELLOW))
