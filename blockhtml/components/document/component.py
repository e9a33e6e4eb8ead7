"""
Document component - validate and render block editor documents.

Provides validation with collected errors and sanitized HTML rendering.

Invariants:
- I1: Root schema failure skips block checks
- I2: Unknown block types are neither errors nor output
- I3: Rendered links carry only allowed schemes or relative hrefs
- I4: render never records errors
"""

from __future__ import annotations

from ._impl import Document
from .models import (
    RenderDocumentInput,
    RenderOutput,
    ValidateAndRenderInput,
    ValidateDocumentInput,
    ValidateOutput,
)
from .ports import RendererRegistryPort

# --- Component Entry Points ---


def run_validate(
    inp: ValidateDocumentInput,
    *,
    renderer: RendererRegistryPort | None = None,
) -> ValidateOutput:
    """
    Validate a document.

    Args:
        inp: Input containing the raw document.
        renderer: Optional registry, the standard one if omitted.

    Returns:
        ValidateOutput with validation result.
    """
    doc = Document(inp.content, renderer)
    is_valid = doc.validate()

    return ValidateOutput(
        is_valid=is_valid,
        errors=list(doc.errors),
        success=True,
    )


def run_render(
    inp: RenderDocumentInput,
    *,
    renderer: RendererRegistryPort | None = None,
) -> RenderOutput:
    """
    Render a document to sanitized HTML.

    Block-level validity is not checked; use run_validate_and_render for that.
    """
    doc = Document(inp.content, renderer)

    return RenderOutput(html=doc.render(), success=True)


def run_validate_and_render(
    inp: ValidateAndRenderInput,
    *,
    renderer: RendererRegistryPort | None = None,
) -> RenderOutput:
    """
    Validate, then render only if the document is fully valid.

    Returns:
        RenderOutput with HTML, or empty HTML and the errors.
    """
    doc = Document(inp.content, renderer)

    if not doc.validate():
        return RenderOutput(html="", errors=list(doc.errors), success=False)

    return RenderOutput(html=doc.render(), success=True)


def run(
    inp: ValidateDocumentInput | RenderDocumentInput | ValidateAndRenderInput,
    *,
    renderer: RendererRegistryPort | None = None,
) -> ValidateOutput | RenderOutput:
    """
    Main entry point for the document component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ValidateDocumentInput):
        return run_validate(inp, renderer=renderer)
    elif isinstance(inp, RenderDocumentInput):
        return run_render(inp, renderer=renderer)
    elif isinstance(inp, ValidateAndRenderInput):
        return run_validate_and_render(inp, renderer=renderer)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
