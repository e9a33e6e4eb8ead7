from __future__ import annotations

from typing import Any

from markupsafe import Markup

from blockhtml.blocks.base import BlockRenderer
from blockhtml.domain.safe_html import SafeHtml


class ParagraphBlock(BlockRenderer):
    block_type = "paragraph"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        return Markup("<p>{}</p>").format(self.inline_html(data.get("text")))


class HeaderBlock(BlockRenderer):
    block_type = "header"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        level = int(data.get("level", 2))
        # Clamp in case validation was skipped
        level = min(max(level, 1), 6)
        return Markup("<h{0}>{1}</h{0}>").format(level, self.inline_html(data.get("text")))


class QuoteBlock(BlockRenderer):
    block_type = "quote"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        body = Markup("<p>{}</p>").format(self.inline_html(data.get("text")))
        if data.get("caption"):
            body += Markup("<cite>{}</cite>").format(self.inline_html(data["caption"]))

        alignment = data.get("alignment")
        if alignment:
            return Markup('<blockquote class="text-{}">{}</blockquote>').format(alignment, body)
        return Markup("<blockquote>{}</blockquote>").format(body)


class ListBlock(BlockRenderer):
    """Ordered or unordered list; items may nest as {content, items}."""

    block_type = "list"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        tag = "ol" if data.get("style") == "ordered" else "ul"
        return self._render_list(tag, data.get("items") or [])

    def _render_list(self, tag: str, items: list[Any]) -> SafeHtml:
        rendered = Markup("")
        for item in items:
            if isinstance(item, dict):
                body = self.inline_html(item.get("content"))
                children = item.get("items") or []
                if children:
                    body += self._render_list(tag, children)
            else:
                body = self.inline_html(item)
            rendered += Markup("<li>{}</li>").format(body)
        return Markup("<{0}>{1}</{0}>").format(tag, rendered)
