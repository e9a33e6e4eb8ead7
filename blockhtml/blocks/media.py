from __future__ import annotations

import logging
from typing import Any

from markupsafe import Markup

from blockhtml.blocks.base import BlockRenderer
from blockhtml.domain.links import is_safe_href
from blockhtml.domain.safe_html import SafeHtml

logger = logging.getLogger(__name__)

IMAGE_PROTOCOLS = frozenset(["http", "https"])

# data key -> figure modifier class
IMAGE_FLAGS: dict[str, str] = {
    "withBorder": "image--bordered",
    "stretched": "image--stretched",
    "withBackground": "image--background",
}


class CodeBlock(BlockRenderer):
    block_type = "code"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        return Markup("<pre><code>{}</code></pre>").format(str(data.get("code", "")))


class DelimiterBlock(BlockRenderer):
    block_type = "delimiter"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        return Markup("<hr>")


class ImageBlock(BlockRenderer):
    block_type = "image"

    def render(self, data: dict[str, Any]) -> SafeHtml:
        url = str((data.get("file") or {}).get("url", ""))
        if not url or not is_safe_href(url, IMAGE_PROTOCOLS):
            logger.debug("Skipped image with unsafe src %r", url[:50])
            return Markup("")

        classes = ["image"] + [css for key, css in IMAGE_FLAGS.items() if data.get(key)]
        caption = self.inline_html(data.get("caption"))

        figure = Markup('<img src="{}" alt="{}">').format(url, caption.striptags())
        if caption:
            figure += Markup("<figcaption>{}</figcaption>").format(caption)
        return Markup('<figure class="{}">{}</figure>').format(" ".join(classes), figure)
