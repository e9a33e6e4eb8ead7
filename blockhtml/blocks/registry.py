"""
Standard renderer registry.

Maps the standard block types to their renderers and supplies the
root document validator. The mapping is built once and never mutated,
so one instance can be shared between documents.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from blockhtml.blocks.base import BlockRenderer
from blockhtml.blocks.media import CodeBlock, DelimiterBlock, ImageBlock
from blockhtml.blocks.text import HeaderBlock, ListBlock, ParagraphBlock, QuoteBlock
from blockhtml.domain.schema import DocumentValidator
from blockhtml.rules.loader import load_default_rules
from blockhtml.rules.models import LinkRules, Rules

BLOCK_CLASSES: dict[str, type[BlockRenderer]] = {
    cls.block_type: cls
    for cls in (
        ParagraphBlock,
        HeaderBlock,
        ListBlock,
        QuoteBlock,
        CodeBlock,
        DelimiterBlock,
        ImageBlock,
    )
}


class DefaultRenderer:
    """Registry of the standard block types, configured from rules."""

    def __init__(self, rules: Rules | None = None) -> None:
        self.rules = rules or load_default_rules()

        # Only types with both a renderer and a schema are registered
        mapping: dict[str, BlockRenderer] = {}
        for block_type, schema in self.rules.blocks.schemas.items():
            cls = BLOCK_CLASSES.get(block_type)
            if cls is not None:
                mapping[block_type] = cls(schema, self.rules.inline)
        self._mapping: Mapping[str, BlockRenderer] = MappingProxyType(mapping)

    @property
    def mapping(self) -> Mapping[str, BlockRenderer]:
        return self._mapping

    @property
    def link_rules(self) -> LinkRules:
        return self.rules.links

    def block_renderer(self, block_type: str) -> BlockRenderer | None:
        return self._mapping.get(block_type)

    def validator(self, content: Any) -> DocumentValidator:
        return DocumentValidator(content, self.rules.document)


@lru_cache(maxsize=1)
def default_renderer() -> DefaultRenderer:
    """Shared registry built from the packaged rules."""
    return DefaultRenderer()
