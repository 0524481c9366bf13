"""HTTP transport - FastAPI app exposing the MCP endpoint and a health check."""

from __future__ import annotations

import json

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.protocol import PARSE_ERROR, error_response, handle_payload
from core.server import ToolServer
from shared.schemas.common import HealthResponse

logger = structlog.get_logger()


def create_app(server: ToolServer) -> FastAPI:
    """Build the ASGI app serving ``server``."""
    app = FastAPI(title=server.name, version=server.version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok", server=server.name)

    @app.get("/mcp/tools")
    async def list_tools():
        """Plain JSON tool listing, handy for debugging without a client."""
        return {"tools": server.list_tools()}

    @app.post("/mcp")
    async def mcp(request: Request):
        """Accept one JSON-RPC frame or a batch."""
        try:
            payload = json.loads(await request.body())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("http_frame_invalid", error=str(e))
            return JSONResponse(
                error_response(None, PARSE_ERROR, "Parse error"), status_code=400
            )

        response = await handle_payload(server, payload)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(response)

    return app
