"""
Asset Pattern Matcher.

Finds doki-docs stylesheet and script references in HTML text.
"""

import re
from pathlib import Path

from ..domain.models import ReplacementTarget


class AssetPatternMatcher:
    """
    Rewrites doki-docs asset references using regular expressions.

    Matches attributes textually, not structurally: a reference inside an
    HTML comment is rewritten too.
    """

    # Only this exact, case-sensitive suffix is treated as HTML
    HTML_SUFFIX = '.html'

    STYLESHEET_MARKER = 'doki-docs.css'
    SCRIPT_MARKER = 'doki-docs.js'

    def __init__(self):
        self.stylesheet_pattern = self._attribute_pattern('href', self.STYLESHEET_MARKER)
        self.script_pattern = self._attribute_pattern('src', self.SCRIPT_MARKER)

    @staticmethod
    def _attribute_pattern(attribute: str, marker: str) -> re.Pattern:
        return re.compile(
            rf"""{attribute}\s*=\s*["'][^"']*{re.escape(marker)}[^"']*["']""",
            re.IGNORECASE,
        )

    def is_html_file(self, path: Path) -> bool:
        """
        Check if path is a regular file named *.html.

        Args:
            path: Path to check

        Returns:
            True if HTML file, False otherwise
        """
        return path.name.endswith(self.HTML_SUFFIX) and path.is_file()

    def rewrite(self, content: str, target: ReplacementTarget) -> tuple[str, int]:
        """
        Replace every stylesheet and script reference in content.

        Args:
            content: HTML text
            target: URLs to substitute

        Returns:
            Tuple of (new_content, number_of_substitutions)
        """
        stylesheet_attr = f'href="{target.stylesheet_url}"'
        script_attr = f'src="{target.script_url}"'

        # Callables keep backslashes in URLs from being read as group references
        content, css_count = self.stylesheet_pattern.subn(lambda _: stylesheet_attr, content)
        content, js_count = self.script_pattern.subn(lambda _: script_attr, content)

        return content, css_count + js_count
