from __future__ import annotations

from typing import Any

import bleach

from blockhtml.domain.safe_html import SafeHtml, trusted
from blockhtml.domain.schema import SchemaValidator
from blockhtml.rules.models import BlockSchema, InlineRules


def clean_inline(text: str, rules: InlineRules) -> SafeHtml:
    """Clean inline markup in block text, stripping disallowed tags."""
    cleaned = bleach.clean(
        text,
        tags=frozenset(rules.allowed_tags),
        attributes={tag: list(attrs) for tag, attrs in rules.allowed_attrs.items()},
        protocols=frozenset(rules.allowed_protocols),
        strip=True,
    )
    return trusted(cleaned)


class BlockRenderer:
    """
    Base for the standard block renderers.

    Subclasses set `block_type` and implement `render`; validation is
    driven by the block's schema from rules.
    """

    block_type = ""

    def __init__(self, schema: BlockSchema, inline: InlineRules) -> None:
        self.schema = schema
        self.inline = inline

    def validator(self, data: Any) -> SchemaValidator:
        return SchemaValidator(self.schema, data, self.block_type)

    def render(self, data: dict[str, Any]) -> SafeHtml:
        raise NotImplementedError

    def inline_html(self, text: Any) -> SafeHtml:
        return clean_inline(str(text or ""), self.inline)
