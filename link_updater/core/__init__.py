"""Core package - business logic implementations."""

from .pattern_matcher import AssetPatternMatcher
from .rewriter import HtmlFileRewriter, process_file
from .url_validator import is_valid_url
from .walker import DirectoryWalker, process_directory

__all__ = [
    'AssetPatternMatcher',
    'DirectoryWalker',
    'HtmlFileRewriter',
    'is_valid_url',
    'process_directory',
    'process_file',
]
