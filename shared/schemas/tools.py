"""Tool definition, request and result schemas."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SchemaNode(BaseModel):
    """Declarative description of an argument's expected shape.

    Serializes to the JSON-Schema subset the tool listing publishes. Only
    the fields that were explicitly set are emitted, so ``default=None``
    and "no default" stay distinguishable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str | None = None  # string, integer, number, boolean, array, object
    description: str | None = None
    properties: dict[str, SchemaNode] | None = None
    required: list[str] | None = None
    items: SchemaNode | None = None
    enum: list[Any] | None = None
    minimum: float | None = None
    maximum: float | None = None
    default: Any = None
    one_of: list[SchemaNode] | None = Field(default=None, alias="oneOf")

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    def to_json_schema(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str  # e.g. "chat_completion"
    description: str
    input_schema: SchemaNode = Field(alias="inputSchema")

    def to_protocol(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema.to_json_schema(),
        }


class ModuleManifest(BaseModel):
    """Manifest describing a server module and its tools."""

    module_name: str
    description: str
    tools: list[ToolDefinition]


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ContentBlock(BaseModel):
    """A single block of tool output. Only text blocks exist here."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform envelope returned from any tool invocation."""

    content: list[ContentBlock]
    is_error: bool = False

    @classmethod
    def success(cls, payload: Any) -> ToolResult:
        """Wrap a JSON-serializable payload as a single text block."""
        text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
        return cls(content=[ContentBlock(text=text)])

    @classmethod
    def failure(cls, message: str) -> ToolResult:
        return cls(content=[ContentBlock(text=message)], is_error=True)

    @property
    def text(self) -> str:
        """Concatenated text of all content blocks."""
        return "".join(block.text for block in self.content)

    def to_protocol(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "content": [block.model_dump() for block in self.content],
        }
        if self.is_error:
            data["isError"] = True
        return data
