"""
blockhtml - Render block-editor documents to sanitized HTML.
"""

from blockhtml.blocks import DefaultRenderer
from blockhtml.components.document import Document
from blockhtml.domain.links import sanitize_links
from blockhtml.domain.safe_html import SafeHtml, safe_join, trusted

__all__ = [
    "DefaultRenderer",
    "Document",
    "SafeHtml",
    "safe_join",
    "sanitize_links",
    "trusted",
]
