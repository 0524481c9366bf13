"""ToolServer - the transport-independent face of one provider server."""

from __future__ import annotations

import asyncio
from typing import Any

import structlog

from core.dispatcher import Dispatcher
from shared.config import Settings
from shared.registry import ToolRegistry
from shared.schemas.tools import ToolCall, ToolResult

logger = structlog.get_logger()


class ToolServer:
    """Bundles a registry and dispatcher under a server name."""

    def __init__(
        self,
        name: str,
        version: str,
        registry: ToolRegistry,
        dispatcher: Dispatcher,
        instructions: str | None = None,
    ):
        self.name = name
        self.version = version
        self.registry = registry
        self.dispatcher = dispatcher
        self.instructions = instructions

    def list_tools(self) -> list[dict[str, Any]]:
        return self.registry.to_protocol()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        return await self.dispatcher.call(ToolCall(tool_name=name, arguments=arguments or {}))


def run_server(server: ToolServer, settings: Settings) -> None:
    """Serve over the transport selected by ``MCP_MODE``. Blocks."""
    if settings.mcp_mode == "http":
        import uvicorn

        from core.http import create_app

        port = settings.port_for(server.name)
        logger.info(
            "server_starting",
            server=server.name,
            transport="http",
            host=settings.host,
            port=port,
            health=f"http://localhost:{port}/health",
            endpoint=f"http://localhost:{port}/mcp",
        )
        uvicorn.run(
            create_app(server),
            host=settings.host,
            port=port,
            log_level=settings.log_level.lower(),
        )
        return

    from core.stdio import serve_stdio

    logger.info("server_starting", server=server.name, transport="stdio")
    asyncio.run(serve_stdio(server))
