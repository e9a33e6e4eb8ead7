"""
Link sanitizer - defang hyperlinks in rendered HTML.

Only <a href> is inspected. Every other element, attribute and text node
passes through unchanged.

Key behaviors:
- Forbidden prefixes (javascript:, data:) are rejected before parsing,
  case-insensitively and ignoring leading whitespace
- Hrefs that do not parse as URI references are removed (fail closed)
- Hrefs with a scheme outside the allow-list are removed
- Relative references (paths, fragments, queries) are kept
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import overload

from bs4 import BeautifulSoup

from blockhtml.domain.safe_html import SafeHtml, trusted
from blockhtml.domain.uri import InvalidURIError, parse_uri

logger = logging.getLogger(__name__)

ALLOWED_PROTOCOLS: frozenset[str] = frozenset(["http", "https", "mailto"])
FORBIDDEN_PREFIXES: tuple[str, ...] = ("javascript:", "data:")


def unsafe_href_reason(
    href: str,
    allowed_protocols: Iterable[str] = ALLOWED_PROTOCOLS,
    forbidden_prefixes: Iterable[str] = FORBIDDEN_PREFIXES,
) -> str | None:
    """
    Check an href value.

    Returns None if the href is safe, otherwise the reason it is not.
    """
    lowered = href.lstrip().lower()
    for prefix in forbidden_prefixes:
        if lowered.startswith(prefix.lower()):
            return f"forbidden prefix '{prefix}'"

    try:
        uri = parse_uri(href)
    except InvalidURIError as e:
        return str(e)

    if uri.scheme and uri.scheme not in {p.lower() for p in allowed_protocols}:
        return f"scheme '{uri.scheme}' not allowed"

    return None


def is_safe_href(
    href: str,
    allowed_protocols: Iterable[str] = ALLOWED_PROTOCOLS,
    forbidden_prefixes: Iterable[str] = FORBIDDEN_PREFIXES,
) -> bool:
    """Check if an href may stay on a link."""
    return unsafe_href_reason(href, allowed_protocols, forbidden_prefixes) is None


@overload
def sanitize_links(
    html_content: str,
    allowed_protocols: Iterable[str] = ...,
    forbidden_prefixes: Iterable[str] = ...,
) -> SafeHtml: ...


@overload
def sanitize_links(
    html_content: None,
    allowed_protocols: Iterable[str] = ...,
    forbidden_prefixes: Iterable[str] = ...,
) -> None: ...


def sanitize_links(
    html_content: str | None,
    allowed_protocols: Iterable[str] = ALLOWED_PROTOCOLS,
    forbidden_prefixes: Iterable[str] = FORBIDDEN_PREFIXES,
) -> SafeHtml | None:
    """
    Remove unsafe href attributes from every anchor in an HTML fragment.

    Missing input is returned as None; empty input as empty SafeHtml.
    """
    if html_content is None:
        return None
    if not html_content:
        return trusted(html_content)

    allowed = frozenset(p.lower() for p in allowed_protocols)
    forbidden = tuple(forbidden_prefixes)

    fragment = BeautifulSoup(html_content, "html.parser")

    for link in fragment.find_all("a"):
        href = link.get("href")
        if href is None:
            continue

        reason = unsafe_href_reason(href, allowed, forbidden)
        if reason is not None:
            logger.debug("Removed href %r: %s", href[:50], reason)
            del link["href"]

    return trusted(str(fragment))
