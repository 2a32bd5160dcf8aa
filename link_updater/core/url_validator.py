"""
URL Validator.

Syntactic check for the absolute http(s) URLs written into HTML files.
"""

from typing import Optional
from urllib.parse import urlsplit

ALLOWED_SCHEMES = ('http', 'https')


def is_valid_url(value: Optional[str]) -> bool:
    """
    Check if value is a well-formed absolute http or https URL.

    No network access is performed. Unlike a browser URL parser, which
    percent-encodes spaces, any embedded whitespace is rejected so that a
    URL like "http://example.com/a b.css" is never written into an href.

    Args:
        value: Text entered by the operator

    Returns:
        True if value parses as an absolute URL with an http(s) scheme
    """
    if not value or not value.strip():
        return False

    candidate = value.strip()
    if any(char.isspace() for char in candidate):
        return False

    try:
        parts = urlsplit(candidate)
        # Accessing port validates it (raises ValueError when out of range)
        parts.port
    except ValueError:
        return False

    if parts.scheme not in ALLOWED_SCHEMES:
        return False

    return bool(parts.hostname)
