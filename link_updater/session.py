"""
Interactive Session.

Asks the operator for the replacement URLs, confirms, walks the tree and
reports the result.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from .console import Colors, ConsoleReporter
from .core.url_validator import is_valid_url
from .core.walker import DirectoryWalker
from .domain.models import ReplacementTarget
from .protocols import DirectoryWalkerProtocol

logger = logging.getLogger(__name__)

CONFIRM_ANSWERS = ('y', 'yes')


class ConsolePrompt:
    """
    Line-oriented input handle shared by the session's prompts.

    Acquire once and close on every exit path, ideally as a context manager.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.closed = False

    def __enter__(self) -> 'ConsolePrompt':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def ask(self, question: str) -> str:
        """
        Write question and read one line of input.

        Args:
            question: Prompt text, written without a trailing newline

        Returns:
            The answer without its line terminator

        Raises:
            EOFError: If input ends before a line is read
        """
        if self.closed:
            raise ValueError("Prompt is closed")

        self.stdout.write(question)
        self.stdout.flush()

        answer = self.stdin.readline()
        if not answer:
            raise EOFError("No input available")
        return answer.rstrip('\r\n')

    def close(self) -> None:
        self.closed = True


WalkerFactory = Callable[[ReplacementTarget], DirectoryWalkerProtocol]


class InteractiveSession:
    """
    One run of the link updater.

    Invalid URLs and a declined confirmation end the session gracefully
    with exit code 0 before any file is touched.
    """

    TITLE = 'DokiDocs Link Updater'

    def __init__(
        self,
        prompt: ConsolePrompt,
        reporter: ConsoleReporter,
        root: Path,
        walker_factory: WalkerFactory | None = None,
    ):
        """
        Initialize session.

        Args:
            prompt: Input handle for the three questions
            reporter: Console output
            root: Directory to walk
            walker_factory: Builds the walker for the captured URLs
        """
        self.prompt = prompt
        self.reporter = reporter
        self.root = Path(root)
        self.walker_factory = walker_factory or self._default_walker

    def _default_walker(self, target: ReplacementTarget) -> DirectoryWalkerProtocol:
        return DirectoryWalker(target, reporter=self.reporter)

    def _ask_url(self, label: str) -> str | None:
        answer = self.prompt.ask(self.reporter.paint(f'Enter {label} URL: ', Colors.BLUE)).strip()
        if is_valid_url(answer):
            return answer

        logger.debug(f"Rejected {label} URL: {answer!r}")
        self.reporter.error(f'Invalid {label} URL provided')
        self.reporter.warning('Please provide a valid HTTP/HTTPS URL')
        return None

    def _confirm(self) -> bool:
        question = self.reporter.paint('Proceed with updating files? (y/N): ', Colors.YELLOW)
        return self.prompt.ask(question).strip().lower() in CONFIRM_ANSWERS

    def run(self) -> int:
        """
        Run the prompt, confirm, walk and report sequence.

        Returns:
            Exit code (0 for completion and graceful aborts)
        """
        self.reporter.banner(self.TITLE)

        css_url = self._ask_url('CSS')
        if css_url is None:
            return 0

        js_url = self._ask_url('JS')
        if js_url is None:
            return 0

        target = ReplacementTarget(stylesheet_url=css_url, script_url=js_url)
        self.reporter.configuration(target)

        if not self._confirm():
            self.reporter.warning('Operation cancelled by user')
            return 0

        self.reporter.line()
        self.reporter.info('Starting file processing...')
        self.reporter.line()

        logger.debug(f"Walking {self.root}")
        stats = self.walker_factory(target).process_directory(self.root)
        logger.debug(f"Finished: {stats}")

        self.reporter.summary(stats)
        return 0
