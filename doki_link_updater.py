#!/usr/bin/env python3
"""
DokiDocs Link Updater.

Rewrites doki-docs.css and doki-docs.js references in every HTML file below
the current directory so they point at the URLs you enter.

Usage:
    python doki_link_updater.py

The tool asks for the stylesheet URL, the script URL and a confirmation.
Hidden directories and node_modules are not scanned.
"""

import logging
import sys
from pathlib import Path

from link_updater import ConsolePrompt, ConsoleReporter, InteractiveSession


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send warnings and errors to stderr; status lines go to stdout."""
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for completion or cancellation, 1 for unexpected failure)
    """
    configure_logging()
    reporter = ConsoleReporter(sys.stdout)

    try:
        with ConsolePrompt(sys.stdin, sys.stdout) as prompt:
            session = InteractiveSession(prompt, reporter, Path.cwd())
            return session.run()
    except (KeyboardInterrupt, EOFError):
        reporter.line()
        reporter.warning('Operation cancelled by user')
        return 0
    except Exception as e:
        logger.error(f"Unhandled error: {e!r}", exc_info=True)
        reporter.fatal(str(e) or type(e).__name__)
        return 1


if __name__ == '__main__':
    sys.exit(main())
