"""
Document component port definitions.

Collaborators the Document consumes. The standard implementations live
in blockhtml.blocks; any object with the same shape can be injected.
"""

from __future__ import annotations

from typing import Any, Protocol


class ValidatorPort(Protocol):
    """Schema check over one piece of data."""

    @property
    def valid(self) -> bool:
        """Whether the data passed."""
        ...

    @property
    def errors(self) -> list[str]:
        """Failure messages, empty when valid."""
        ...

    def validate_strict(self) -> None:
        """Raise SchemaViolationError if the data is invalid."""
        ...


class BlockRendererPort(Protocol):
    """Rendering and validation for one block type."""

    def render(self, data: Any) -> str:
        """Render block data to an HTML fragment."""
        ...

    def validator(self, data: Any) -> ValidatorPort:
        """Get a validator for block data."""
        ...


class RendererRegistryPort(Protocol):
    """Lookup of block renderers plus the root document validator.

    A registry may also expose `link_rules` (LinkRules); Document uses it
    for link sanitizing unless rules are passed explicitly.
    """

    def block_renderer(self, block_type: str) -> BlockRendererPort | None:
        """Get the renderer for a block type, None if unsupported."""
        ...

    def validator(self, content: Any) -> ValidatorPort:
        """Get the root validator for the whole document."""
        ...
