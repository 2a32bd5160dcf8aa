"""
DokiDocs Link Updater.

Points doki-docs stylesheet and script references in a tree of HTML files
at new URLs.

Public API:
    - is_valid_url: Check an absolute http(s) URL
    - process_file: Rewrite one HTML file
    - process_directory: Rewrite every HTML file below a directory
    - InteractiveSession: Prompt-driven run over a directory
"""

from .console import Colors, ConsoleReporter
from .core import (
    AssetPatternMatcher,
    DirectoryWalker,
    HtmlFileRewriter,
    is_valid_url,
    process_directory,
    process_file,
)
from .domain.models import FileOutcome, ReplacementTarget, RunStatistics
from .session import ConsolePrompt, InteractiveSession

__all__ = [
    'AssetPatternMatcher',
    'Colors',
    'ConsolePrompt',
    'ConsoleReporter',
    'DirectoryWalker',
    'FileOutcome',
    'HtmlFileRewriter',
    'InteractiveSession',
    'ReplacementTarget',
    'RunStatistics',
    'is_valid_url',
    'process_directory',
    'process_file',
]

__version__ = '1.0.0'
