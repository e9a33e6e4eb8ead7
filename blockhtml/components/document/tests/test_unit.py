"""
Document component unit tests.

Tests for ingestion, validation, rendering and the entry points.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from blockhtml.components.document import (
    Document,
    RenderDocumentInput,
    RenderOutput,
    ValidateAndRenderInput,
    ValidateDocumentInput,
    ValidateOutput,
    run,
    run_render,
    run_validate,
    run_validate_and_render,
)
from blockhtml.domain.schema import SchemaViolationError

# --- Mock Collaborators ---


class MockValidator:
    def __init__(self, errors: list[str] | None = None) -> None:
        self._errors = list(errors or [])

    @property
    def valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def validate_strict(self) -> None:
        if self._errors:
            raise SchemaViolationError(self._errors[0])


class MockBlockRenderer:
    """Renders data['text'] verbatim inside a tag; invalid without a string text."""

    def __init__(self, tag: str = "p") -> None:
        self.tag = tag
        self.validated: list[Any] = []

    def render(self, data: Any) -> str:
        return f"<{self.tag}>{data['text']}</{self.tag}>"

    def validator(self, data: Any) -> MockValidator:
        self.validated.append(data)
        if isinstance(data.get("text"), str):
            return MockValidator()
        return MockValidator(["text must be a string", "text is required"])


class ExplodingBlockRenderer:
    def render(self, data: Any) -> str:
        raise RuntimeError("boom")

    def validator(self, data: Any) -> MockValidator:
        raise RuntimeError("boom")


class MockRegistry:
    def __init__(self, mapping: dict[str, Any], root_error: str | None = None) -> None:
        self.mapping = mapping
        self.root_error = root_error

    def block_renderer(self, block_type: str) -> Any:
        return self.mapping.get(block_type)

    def validator(self, content: Any) -> MockValidator:
        if self.root_error:
            return MockValidator([self.root_error])
        if not isinstance(content, dict) or not isinstance(content.get("blocks"), list):
            return MockValidator(["blocks: Field required"])
        return MockValidator()


class BrokenRootRegistry(MockRegistry):
    def validator(self, content: Any) -> MockValidator:
        raise RuntimeError("schema engine down")


@pytest.fixture
def paragraph() -> MockBlockRenderer:
    return MockBlockRenderer("p")


@pytest.fixture
def registry(paragraph: MockBlockRenderer) -> MockRegistry:
    return MockRegistry({"paragraph": paragraph, "header": MockBlockRenderer("h2")})


def blocks(*items: tuple[str, Any]) -> dict[str, Any]:
    return {"blocks": [{"type": t, "data": d} for t, d in items]}


# --- Ingestion Tests ---


class TestIngestion:
    """Test document construction."""

    def test_structured_content_used_directly(self, registry: MockRegistry) -> None:
        content = blocks(("paragraph", {"text": "Hi"}))
        doc = Document(content, registry)

        assert doc.content is content
        assert doc.errors == []

    def test_json_text_decoded(self, registry: MockRegistry) -> None:
        content = blocks(("paragraph", {"text": "Hi"}))
        doc = Document(json.dumps(content), registry)

        assert doc.content == content

    def test_malformed_json_becomes_none(self, registry: MockRegistry) -> None:
        doc = Document('{"blocks": [', registry)

        assert doc.content is None
        assert doc.errors == []

    def test_deeply_nested_json_becomes_none(self, registry: MockRegistry) -> None:
        doc = Document("[" * 100000 + "]" * 100000, registry)

        assert doc.content is None
        assert doc.render() == ""

    def test_none_content_becomes_none(self, registry: MockRegistry) -> None:
        assert Document(None, registry).content is None

    def test_default_registry_used(self) -> None:
        doc = Document(blocks())

        assert doc.renderer.block_renderer("paragraph") is not None


# --- Validation Tests ---


class TestValidate:
    """Test validation and error collection."""

    def test_valid_document(self, registry: MockRegistry) -> None:
        doc = Document(blocks(("paragraph", {"text": "a"}), ("header", {"text": "b"})), registry)

        assert doc.validate() is True
        assert doc.errors == []

    def test_root_failure_skips_blocks(self, paragraph: MockBlockRenderer) -> None:
        registry = MockRegistry({"paragraph": paragraph}, root_error="bad root")
        doc = Document(blocks(("paragraph", {"text": "a"})), registry)

        assert doc.validate() is False
        assert len(doc.errors) == 1
        assert doc.errors[0].code == "schema_violation"
        assert doc.errors[0].message == "bad root"
        assert paragraph.validated == []

    def test_one_error_per_invalid_block(
        self, registry: MockRegistry, paragraph: MockBlockRenderer
    ) -> None:
        doc = Document(
            blocks(
                ("paragraph", {"text": "a"}),
                ("paragraph", {"text": 1}),
                ("paragraph", {"text": "c"}),
            ),
            registry,
        )

        assert doc.validate() is False
        assert len(doc.errors) == 1
        error = doc.errors[0]
        assert error.code == "invalid_block"
        assert error.path == "blocks[1]"
        assert error.details == ("text must be a string", "text is required")
        # Blocks after the invalid one are still checked
        assert len(paragraph.validated) == 3

    def test_every_invalid_block_reported(self, registry: MockRegistry) -> None:
        doc = Document(blocks(("paragraph", {}), ("header", {"text": None})), registry)

        assert doc.validate() is False
        assert [e.path for e in doc.errors] == ["blocks[0]", "blocks[1]"]

    def test_unknown_type_is_not_an_error(self, registry: MockRegistry) -> None:
        doc = Document(blocks(("paragraph", {"text": "a"}), ("carousel", {"x": 1})), registry)

        assert doc.validate() is True
        assert doc.errors == []

    def test_malformed_json_fails_at_root(self, registry: MockRegistry) -> None:
        doc = Document("not json", registry)

        assert doc.validate() is False
        assert len(doc.errors) == 1
        assert doc.errors[0].code == "schema_violation"

    def test_raising_block_validator_recorded(self, registry: MockRegistry) -> None:
        registry.mapping["broken"] = ExplodingBlockRenderer()
        doc = Document(blocks(("broken", {}), ("paragraph", {"text": "a"})), registry)

        assert doc.validate() is False
        assert len(doc.errors) == 1
        assert doc.errors[0].code == "validator_error"
        assert doc.errors[0].path == "blocks[0]"

    def test_raising_root_validator_recorded(self) -> None:
        doc = Document(blocks(), BrokenRootRegistry({}))

        assert doc.validate() is False
        assert doc.errors[0].code == "validator_error"


# --- Render Tests ---


class TestRender:
    """Test rendering and link sanitization."""

    def test_blocks_joined_in_order(self, registry: MockRegistry) -> None:
        doc = Document(blocks(("header", {"text": "T"}), ("paragraph", {"text": "P"})), registry)

        assert doc.render() == "<h2>T</h2><p>P</p>"

    def test_renderer_output_trusted_verbatim(self, registry: MockRegistry) -> None:
        doc = Document(blocks(("paragraph", {"text": "<b>x</b> &amp; y"})), registry)

        assert doc.render() == "<p><b>x</b> &amp; y</p>"

    def test_unknown_type_omitted(self, registry: MockRegistry) -> None:
        doc = Document(
            blocks(("paragraph", {"text": "a"}), ("carousel", {"text": "x"}), ("header", {"text": "b"})),
            registry,
        )

        assert doc.render() == "<p>a</p><h2>b</h2>"
        assert doc.errors == []

    def test_root_invalid_renders_empty(self) -> None:
        registry = MockRegistry({"paragraph": MockBlockRenderer()}, root_error="bad root")
        doc = Document(blocks(("paragraph", {"text": "a"})), registry)

        assert doc.render() == ""

    def test_render_never_records_errors(self) -> None:
        registry = MockRegistry({}, root_error="bad root")
        doc = Document(blocks(), registry)

        doc.render()

        assert doc.errors == []

    def test_malformed_json_renders_empty(self, registry: MockRegistry) -> None:
        assert Document("{oops", registry).render() == ""

    def test_empty_document_renders_empty(self, registry: MockRegistry) -> None:
        assert Document(blocks(), registry).render() == ""

    def test_render_is_deterministic(self, registry: MockRegistry) -> None:
        doc = Document(
            blocks(("paragraph", {"text": '<a href="ftp://x.org">a</a>'}), ("header", {"text": "b"})),
            registry,
        )

        assert doc.render() == doc.render()

    def test_unsafe_links_defanged(self, registry: MockRegistry) -> None:
        doc = Document(
            blocks(
                ("paragraph", {"text": '<a href="javascript:alert(1)">x</a>'}),
                ("paragraph", {"text": '<a href="https://example.com">y</a>'}),
            ),
            registry,
        )

        assert doc.render() == '<p><a>x</a></p><p><a href="https://example.com">y</a></p>'

    def test_raising_renderer_omitted(self, registry: MockRegistry) -> None:
        registry.mapping["broken"] = ExplodingBlockRenderer()
        doc = Document(blocks(("broken", {}), ("paragraph", {"text": "a"})), registry)

        assert doc.render() == "<p>a</p>"

    def test_render_ignores_block_validity(self, registry: MockRegistry) -> None:
        # render re-checks only the root
        doc = Document(blocks(("paragraph", {"text": 5})), registry)

        assert doc.render() == "<p>5</p>"


# --- Entry Point Tests ---


class TestEntryPoints:
    """Test component entry points."""

    def test_run_validate(self, registry: MockRegistry) -> None:
        result = run_validate(
            ValidateDocumentInput(content=blocks(("paragraph", {}))), renderer=registry
        )

        assert isinstance(result, ValidateOutput)
        assert result.is_valid is False
        assert len(result.errors) == 1

    def test_run_render(self, registry: MockRegistry) -> None:
        result = run_render(
            RenderDocumentInput(content=blocks(("paragraph", {"text": "a"}))), renderer=registry
        )

        assert result.html == "<p>a</p>"
        assert result.success is True

    def test_validate_and_render_valid(self, registry: MockRegistry) -> None:
        result = run_validate_and_render(
            ValidateAndRenderInput(content=blocks(("paragraph", {"text": "a"}))),
            renderer=registry,
        )

        assert result.success is True
        assert result.html == "<p>a</p>"
        assert result.errors == []

    def test_validate_and_render_invalid(self, registry: MockRegistry) -> None:
        result = run_validate_and_render(
            ValidateAndRenderInput(content=blocks(("paragraph", {"text": 1}))),
            renderer=registry,
        )

        assert result.success is False
        assert result.html == ""
        assert result.errors[0].path == "blocks[0]"

    def test_run_dispatches(self, registry: MockRegistry) -> None:
        content = blocks(("paragraph", {"text": "a"}))

        assert isinstance(run(ValidateDocumentInput(content), renderer=registry), ValidateOutput)
        assert isinstance(run(RenderDocumentInput(content), renderer=registry), RenderOutput)

    def test_run_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run("not an input")  # type: ignore[arg-type]
