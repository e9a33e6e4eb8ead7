"""
Document component - block editor documents to sanitized HTML.
"""

from ._impl import Document, parse_content
from .component import (
    run,
    run_render,
    run_validate,
    run_validate_and_render,
)
from .models import (
    DocumentError,
    RenderDocumentInput,
    RenderOutput,
    ValidateAndRenderInput,
    ValidateDocumentInput,
    ValidateOutput,
)
from .ports import BlockRendererPort, RendererRegistryPort, ValidatorPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "run_validate",
    "run_validate_and_render",
    # Core
    "Document",
    "parse_content",
    # Input models
    "RenderDocumentInput",
    "ValidateAndRenderInput",
    "ValidateDocumentInput",
    # Output models
    "RenderOutput",
    "ValidateOutput",
    "DocumentError",
    # Ports
    "BlockRendererPort",
    "RendererRegistryPort",
    "ValidatorPort",
]
