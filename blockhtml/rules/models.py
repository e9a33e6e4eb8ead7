from typing import Literal

from pydantic import BaseModel, Field

PropertyType = Literal["string", "int", "bool", "array", "object"]


class LinkRules(BaseModel):
    allowed_protocols: list[str] = Field(default_factory=lambda: ["http", "https", "mailto"])
    forbidden_prefixes: list[str] = Field(default_factory=lambda: ["javascript:", "data:"])

class InlineRules(BaseModel):
    allowed_tags: list[str]
    allowed_attrs: dict[str, list[str]]
    allowed_protocols: list[str]

class DocumentRules(BaseModel):
    max_blocks: int

class BlockProperty(BaseModel):
    type: PropertyType | None = None
    min: int | None = None
    max: int | None = None
    max_bytes: int | None = None
    enum: list[str | int] | None = None
    # object: keys that must be present
    required: list[str] | None = None
    # array: allowed element types
    items: list[PropertyType] | None = None

class BlockSchema(BaseModel):
    required: list[str] = Field(default_factory=list)
    properties: dict[str, BlockProperty] = Field(default_factory=dict)

class BlocksRules(BaseModel):
    schemas: dict[str, BlockSchema]

class Rules(BaseModel):
    links: LinkRules = Field(default_factory=LinkRules)
    inline: InlineRules
    document: DocumentRules
    blocks: BlocksRules
