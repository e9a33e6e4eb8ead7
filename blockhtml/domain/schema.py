"""
Validators for editor documents and block data.

Both validators expose the same capability:
- `valid` / `errors`: non-throwing mode, all failures collected
- `validate_strict()`: raises SchemaViolationError on the first failure
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from blockhtml.domain.entities import EditorDocument
from blockhtml.rules.models import BlockProperty, BlockSchema, DocumentRules

TYPE_CHECKS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "int": (int,),
    "bool": (bool,),
    "array": (list,),
    "object": (dict,),
}


class SchemaViolationError(ValueError):
    """Raised by strict validation when data violates its schema."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


def _is_type(value: Any, expected: str) -> bool:
    # bool is int in python
    if expected == "int" and isinstance(value, bool):
        return False
    return isinstance(value, TYPE_CHECKS[expected])


class SchemaValidator:
    """Validate one block's data against a BlockSchema."""

    def __init__(self, schema: BlockSchema, data: Any, block_type: str = "block") -> None:
        self.schema = schema
        self.data = data
        self.block_type = block_type
        self._errors: tuple[str, ...] = tuple(self._collect())

    @property
    def valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def validate_strict(self) -> None:
        """
        Raises:
            SchemaViolationError: If the data does not match the schema.
        """
        if self._errors:
            raise SchemaViolationError(self._errors[0])

    def _collect(self) -> list[str]:
        if not isinstance(self.data, dict):
            return [f"Data for block type '{self.block_type}' must be an object."]

        errors: list[str] = []

        for req_field in self.schema.required:
            if req_field not in self.data:
                errors.append(
                    f"Missing required field '{req_field}' for block type '{self.block_type}'."
                )

        for field, props in self.schema.properties.items():
            if field in self.data:
                errors.extend(self._check_field(field, self.data[field], props))

        return errors

    def _check_field(self, field_name: str, value: Any, props: BlockProperty) -> list[str]:
        expected_type = props.type
        if expected_type is not None and not _is_type(value, expected_type):
            return [f"Field '{field_name}' must be of type {expected_type}."]

        errors: list[str] = []

        if props.enum is not None and value not in props.enum:
            allowed = ", ".join(str(v) for v in props.enum)
            errors.append(f"Field '{field_name}' must be one of: {allowed}.")

        # Min/Max are lengths for sized values, bounds for numbers
        if isinstance(value, (str, list)):
            if props.min is not None and len(value) < props.min:
                errors.append(f"Field '{field_name}' too short (min {props.min}).")
            if props.max is not None and len(value) > props.max:
                errors.append(f"Field '{field_name}' too long (max {props.max}).")
        elif isinstance(value, int) and not isinstance(value, bool):
            if props.min is not None and value < props.min:
                errors.append(f"Field '{field_name}' too small (min {props.min}).")
            if props.max is not None and value > props.max:
                errors.append(f"Field '{field_name}' too large (max {props.max}).")

        if isinstance(value, dict):
            for key in props.required or []:
                if key not in value:
                    errors.append(f"Field '{field_name}' is missing key '{key}'.")

        if isinstance(value, list) and props.items is not None:
            for i, item in enumerate(value):
                if not any(_is_type(item, t) for t in props.items):
                    allowed = ", ".join(props.items)
                    errors.append(f"Field '{field_name}[{i}]' must be of type {allowed}.")

        if props.max_bytes is not None:
            try:
                size = len(json.dumps(value).encode("utf-8"))
            except (TypeError, ValueError):
                errors.append(f"Field '{field_name}' is not serializable.")
            else:
                if size > props.max_bytes:
                    errors.append(
                        f"Field '{field_name}' exceeds size limit ({size} > {props.max_bytes})."
                    )

        return errors


def _format_pydantic_error(err: dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else str(err["msg"])


class DocumentValidator:
    """Validate the root structure of an editor document."""

    def __init__(self, content: Any, rules: DocumentRules | None = None) -> None:
        self.content = content
        self.rules = rules
        self._errors: tuple[str, ...] = tuple(self._collect())

    @property
    def valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def validate_strict(self) -> None:
        """
        Raises:
            SchemaViolationError: If the document structure is invalid.
        """
        if self._errors:
            raise SchemaViolationError("; ".join(self._errors))

    def _collect(self) -> list[str]:
        try:
            doc = EditorDocument.model_validate(self.content)
        except ValidationError as e:
            return [_format_pydantic_error(err) for err in e.errors()]

        if self.rules is not None and len(doc.blocks) > self.rules.max_blocks:
            return [f"Document has {len(doc.blocks)} blocks, max is {self.rules.max_blocks}."]

        return []
