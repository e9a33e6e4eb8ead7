"""
Document component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Errors ---


@dataclass(frozen=True)
class DocumentError:
    """Document validation error."""

    code: str
    message: str
    path: str | None = None
    details: tuple[str, ...] = ()


# --- Input Models ---


@dataclass(frozen=True)
class ValidateDocumentInput:
    """Input for validating a document."""

    content: dict[str, Any] | str | None


@dataclass(frozen=True)
class RenderDocumentInput:
    """Input for rendering a document to HTML."""

    content: dict[str, Any] | str | None


@dataclass(frozen=True)
class ValidateAndRenderInput:
    """Input for validating, then rendering only if valid."""

    content: dict[str, Any] | str | None


# --- Output Models ---


@dataclass(frozen=True)
class ValidateOutput:
    """Output for validation result."""

    is_valid: bool
    errors: list[DocumentError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RenderOutput:
    """Output for rendered HTML."""

    html: str
    errors: list[DocumentError] = field(default_factory=list)
    success: bool = True
