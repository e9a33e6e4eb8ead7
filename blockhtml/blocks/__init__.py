"""
Standard block renderers and their registry.
"""

from blockhtml.blocks.base import BlockRenderer, clean_inline
from blockhtml.blocks.media import CodeBlock, DelimiterBlock, ImageBlock
from blockhtml.blocks.registry import BLOCK_CLASSES, DefaultRenderer, default_renderer
from blockhtml.blocks.text import HeaderBlock, ListBlock, ParagraphBlock, QuoteBlock

__all__ = [
    "BLOCK_CLASSES",
    "BlockRenderer",
    "CodeBlock",
    "DefaultRenderer",
    "DelimiterBlock",
    "HeaderBlock",
    "ImageBlock",
    "ListBlock",
    "ParagraphBlock",
    "QuoteBlock",
    "clean_inline",
    "default_renderer",
]
