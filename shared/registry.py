"""Tool registry - holds a server's tool definitions in listing order."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shared.errors import UnknownToolError
from shared.schemas.tools import ModuleManifest, ToolDefinition


class ToolRegistry:
    """Immutable name -> ToolDefinition table, populated once at startup."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        self._tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in self._tools:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            self._tools[definition.name] = definition

    @classmethod
    def from_manifest(cls, manifest: ModuleManifest) -> ToolRegistry:
        return cls(manifest.tools)

    def list(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def require(self, name: str) -> ToolDefinition:
        definition = self.get(name)
        if definition is None:
            raise UnknownToolError(name)
        return definition

    def to_protocol(self) -> list[dict[str, Any]]:
        """Tool listing in the shape ``tools/list`` returns."""
        return [definition.to_protocol() for definition in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
