"""Pydantic schemas for the tool servers."""

from shared.schemas.common import HealthResponse
from shared.schemas.tools import (
    ContentBlock,
    ModuleManifest,
    SchemaNode,
    ToolCall,
    ToolDefinition,
    ToolResult,
)

__all__ = [
    "ContentBlock",
    "HealthResponse",
    "ModuleManifest",
    "SchemaNode",
    "ToolCall",
    "ToolDefinition",
    "ToolResult",
]
