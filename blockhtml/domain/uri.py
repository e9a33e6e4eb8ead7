"""
Strict URI reference parsing for link hrefs.

urllib.parse accepts nearly any string, so the RFC 3986 character set
and percent-escape syntax are checked before splitting.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

# unreserved / reserved / percent, per RFC 3986 section 2
URI_CHARS_PATTERN = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")


class InvalidURIError(ValueError):
    """Raised when a string is not a valid URI reference."""


def parse_uri(value: str) -> SplitResult:
    """
    Parse a URI reference.

    Raises:
        InvalidURIError: If the value is not a valid URI reference.
    """
    if not URI_CHARS_PATTERN.fullmatch(value):
        raise InvalidURIError(f"Illegal character in URI: {value[:50]!r}")
    if BAD_ESCAPE_PATTERN.search(value):
        raise InvalidURIError(f"Malformed percent-escape in URI: {value[:50]!r}")

    try:
        parts = urlsplit(value)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidURIError(f"Malformed URI: {e}") from e

    if parts.scheme and not SCHEME_PATTERN.fullmatch(parts.scheme):
        raise InvalidURIError(f"Malformed scheme in URI: {parts.scheme!r}")

    return parts
