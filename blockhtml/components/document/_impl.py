"""
Document - block editor output to sanitized HTML.

Key behaviors:
- Accepts decoded content or JSON text; undecodable text becomes None
- validate(): root schema check, then per-block checks; errors accumulate
- render(): re-checks the root, renders known blocks in order, joins the
  trusted fragments, then strips unsafe link hrefs
- Unknown block types are skipped by both validate() and render()
- Neither validate() nor render() raises

One Document per request; errors is mutated by validate().
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from blockhtml.blocks.registry import default_renderer
from blockhtml.domain.links import sanitize_links
from blockhtml.domain.safe_html import SafeHtml, safe_join, trusted
from blockhtml.domain.schema import SchemaViolationError
from blockhtml.rules.models import LinkRules

from .models import DocumentError
from .ports import BlockRendererPort, RendererRegistryPort

logger = logging.getLogger(__name__)


def parse_content(raw: Any) -> Any:
    """Decode JSON text; structured input is used as is. Returns None on failure."""
    if isinstance(raw, dict):
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Could not decode document content: %s", e)
        return None


class Document:
    """
    A block editor document bound to a renderer registry.

    Attributes:
        content: Decoded document, or None if decoding failed.
        renderer: Registry of block renderers and the root validator.
        errors: Errors appended by validate(); never cleared.
    """

    def __init__(
        self,
        content: Any,
        renderer: RendererRegistryPort | None = None,
        link_rules: LinkRules | None = None,
    ) -> None:
        self.renderer: RendererRegistryPort = (
            renderer if renderer is not None else default_renderer()
        )
        self.content = parse_content(content)
        # Registries may carry their own link rules; explicit rules win
        if link_rules is None:
            link_rules = getattr(self.renderer, "link_rules", None)
        self.link_rules: LinkRules = link_rules or LinkRules()
        self.errors: list[DocumentError] = []

    def validate(self) -> bool:
        """Validate the document, appending any failures to errors."""
        root_error = self._check_root()
        if root_error is not None:
            self.errors.append(root_error)
            return False

        self._validate_blocks()
        return not self.errors

    def render(self) -> SafeHtml:
        """Render to sanitized HTML; empty if the document root is invalid."""
        if self._check_root() is not None:
            return trusted("")

        fragments: list[SafeHtml] = []
        for i, block in self._blocks():
            block_renderer = self._block_renderer(block)
            if block_renderer is None:
                continue

            try:
                fragment = block_renderer.render(block.get("data"))
            except Exception:
                logger.exception("Renderer for block %d (%r) failed", i, block.get("type"))
                continue
            if not isinstance(fragment, str):
                logger.warning("Renderer for block %d (%r) returned no HTML", i, block.get("type"))
                continue
            fragments.append(trusted(fragment))

        return sanitize_links(
            safe_join(fragments),
            self.link_rules.allowed_protocols,
            self.link_rules.forbidden_prefixes,
        )

    def _check_root(self) -> DocumentError | None:
        try:
            self.renderer.validator(self.content).validate_strict()
        except SchemaViolationError as e:
            return DocumentError(code="schema_violation", message=e.message, path=e.path)
        except Exception as e:
            logger.exception("Root validator failed")
            return DocumentError(code="validator_error", message=f"Root validator failed: {e}")
        return None

    def _validate_blocks(self) -> None:
        for i, block in self._blocks():
            block_renderer = self._block_renderer(block)
            if block_renderer is None:
                continue

            path = f"blocks[{i}]"
            try:
                validator = block_renderer.validator(block.get("data"))
                if validator.valid:
                    continue
                messages = tuple(str(m) for m in validator.errors)
            except Exception as e:
                logger.exception("Validator for block %d (%r) failed", i, block.get("type"))
                self.errors.append(
                    DocumentError(
                        code="validator_error",
                        message=f"Validator for block type '{block.get('type')}' failed: {e}",
                        path=path,
                    )
                )
                continue

            self.errors.append(
                DocumentError(
                    code="invalid_block",
                    message="; ".join(messages) or f"Invalid '{block.get('type')}' block",
                    path=path,
                    details=messages,
                )
            )

    def _blocks(self) -> Iterator[tuple[int, dict[str, Any]]]:
        # Root validation has already passed; guard against permissive validators
        if not isinstance(self.content, dict):
            return
        blocks = self.content.get("blocks")
        if not isinstance(blocks, list):
            return
        for i, block in enumerate(blocks):
            if isinstance(block, dict):
                yield i, block

    def _block_renderer(self, block: dict[str, Any]) -> BlockRendererPort | None:
        block_type = block.get("type")
        block_renderer = (
            self.renderer.block_renderer(block_type) if isinstance(block_type, str) else None
        )
        if block_renderer is None:
            logger.debug("No renderer for block type %r, skipping", block_type)
        return block_renderer
