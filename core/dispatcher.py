"""Dispatcher - routes tool calls to the adapter that owns them."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from shared.adapter import ToolAdapter
from shared.errors import ArgumentValidationError, ConfigurationError, UnknownToolError
from shared.registry import ToolRegistry
from shared.schemas.tools import ToolCall, ToolResult
from shared.validation import validate

logger = structlog.get_logger()


class Dispatcher:
    """Looks up, validates and routes tool calls. Holds no per-call state."""

    def __init__(self, registry: ToolRegistry, adapters: Iterable[ToolAdapter]):
        self.registry = registry
        self.routes: dict[str, ToolAdapter] = {}
        for adapter in adapters:
            for name in adapter.tool_names():
                if name in self.routes:
                    raise ConfigurationError(f"Tool '{name}' is served by two adapters")
                self.routes[name] = adapter

        unrouted = [name for name in registry.names() if name not in self.routes]
        if unrouted:
            raise ConfigurationError(
                f"No adapter registered for tools: {', '.join(unrouted)}"
            )

    async def call(self, request: ToolCall) -> ToolResult:
        try:
            definition = self.registry.require(request.tool_name)
        except UnknownToolError as e:
            logger.warning("unknown_tool", tool=request.tool_name)
            return ToolResult.failure(str(e))

        try:
            arguments = validate(definition.input_schema, request.arguments)
        except ArgumentValidationError as e:
            logger.warning("validation_failed", tool=request.tool_name, error=str(e))
            return ToolResult.failure(f"Invalid arguments for {request.tool_name}: {e}")

        adapter = self.routes[request.tool_name]
        try:
            return await adapter.invoke(request.tool_name, arguments)
        except Exception as e:
            # Adapters contain backend errors themselves
            logger.error(
                "dispatch_failed", tool=request.tool_name, error=str(e), exc_info=True
            )
            return ToolResult.failure(f"Error: {e}")
