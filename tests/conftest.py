from typing import Any

import pytest

from blockhtml.blocks import DefaultRenderer
from blockhtml.domain.schema import SchemaViolationError
from blockhtml.rules import load_default_rules

# --- In-memory collaborators ---


class FakeValidator:
    """Validator with fixed errors."""

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


class FakeBlockRenderer:
    """Wraps data['text'] in a tag, verbatim. Records validated data."""

    def __init__(self, tag: str = "p") -> None:
        self.tag = tag
        self.validated: list[Any] = []
        self.rendered: list[Any] = []

    def render(self, data: Any) -> str:
        self.rendered.append(data)
        return f"<{self.tag}>{data['text']}</{self.tag}>"

    def validator(self, data: Any) -> FakeValidator:
        self.validated.append(data)
        if isinstance(data, dict) and isinstance(data.get("text"), str):
            return FakeValidator()
        return FakeValidator(["Field 'text' must be a string."])


class FakeRegistry:
    """Registry over a plain dict; root is valid when content has a blocks list."""

    def __init__(self, mapping: dict[str, Any]) -> None:
        self.mapping = mapping
        self.root_checks = 0

    def block_renderer(self, block_type: str) -> Any:
        return self.mapping.get(block_type)

    def validator(self, content: Any) -> FakeValidator:
        self.root_checks += 1
        if isinstance(content, dict) and isinstance(content.get("blocks"), list):
            return FakeValidator()
        return FakeValidator(["Document must be an object with a 'blocks' list."])


# --- Fixtures ---


@pytest.fixture
def rules():
    return load_default_rules()


@pytest.fixture
def default_registry(rules):
    return DefaultRenderer(rules)


@pytest.fixture
def paragraph_renderer():
    return FakeBlockRenderer("p")


@pytest.fixture
def fake_registry(paragraph_renderer):
    return FakeRegistry({"paragraph": paragraph_renderer})
