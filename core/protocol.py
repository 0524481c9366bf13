"""MCP JSON-RPC frame handling shared by the stdio and HTTP fronts."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Literal

import structlog
from pydantic import BaseModel, ValidationError

if TYPE_CHECKING:
    from core.server import ToolServer

logger = structlog.get_logger()

SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")
LATEST_PROTOCOL_VERSION = SUPPORTED_PROTOCOL_VERSIONS[0]

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JsonRpcRequest(BaseModel):
    """An incoming request or notification frame."""

    jsonrpc: Literal["2.0"]
    method: str
    id: int | str | None = None
    params: dict[str, Any] | None = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class ProtocolError(Exception):
    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


def error_response(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": {"code": code, "message": message},
    }


def _initialize(server: ToolServer, params: dict[str, Any]) -> dict[str, Any]:
    requested = params.get("protocolVersion")
    version = requested if requested in SUPPORTED_PROTOCOL_VERSIONS else LATEST_PROTOCOL_VERSION
    result: dict[str, Any] = {
        "protocolVersion": version,
        "capabilities": {"tools": {"listChanged": False}},
        "serverInfo": {"name": server.name, "version": server.version},
    }
    if server.instructions:
        result["instructions"] = server.instructions
    return result


async def _call_tool(server: ToolServer, params: dict[str, Any]) -> dict[str, Any]:
    name = params.get("name")
    if not isinstance(name, str) or not name:
        raise ProtocolError(INVALID_PARAMS, "tools/call requires a 'name' string")
    arguments = params.get("arguments") or {}
    if not isinstance(arguments, dict):
        raise ProtocolError(INVALID_PARAMS, "tools/call 'arguments' must be an object")
    result = await server.call_tool(name, arguments)
    return result.to_protocol()


async def _dispatch(server: ToolServer, request: JsonRpcRequest) -> Any:
    params = request.params or {}
    if request.method == "initialize":
        return _initialize(server, params)
    if request.method == "ping":
        return {}
    if request.method == "tools/list":
        return {"tools": server.list_tools()}
    if request.method == "tools/call":
        return await _call_tool(server, params)
    raise ProtocolError(METHOD_NOT_FOUND, f"Method not found: {request.method}")


async def handle_message(server: ToolServer, message: Any) -> dict[str, Any] | None:
    """Handle one decoded frame. Returns the response, or None for notifications."""
    raw_id = message.get("id") if isinstance(message, dict) else None
    try:
        request = JsonRpcRequest.model_validate(message)
    except ValidationError:
        logger.warning("invalid_request_frame", frame=str(message)[:200])
        return error_response(raw_id, INVALID_REQUEST, "Invalid Request")

    if request.is_notification:
        if not request.method.startswith("notifications/"):
            logger.warning("unexpected_notification", method=request.method)
        return None

    try:
        result = await _dispatch(server, request)
    except ProtocolError as e:
        return error_response(request.id, e.code, e.message)
    except Exception as e:
        logger.error("request_failed", method=request.method, error=str(e), exc_info=True)
        return error_response(request.id, INTERNAL_ERROR, str(e))
    return {"jsonrpc": "2.0", "id": request.id, "result": result}


async def handle_payload(server: ToolServer, payload: Any) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Handle a single frame or a batch. Returns None when nothing needs answering."""
    if isinstance(payload, list):
        if not payload:
            return error_response(None, INVALID_REQUEST, "Invalid Request")
        responses = await asyncio.gather(
            *(handle_message(server, message) for message in payload)
        )
        answered = [r for r in responses if r is not None]
        return answered or None
    return await handle_message(server, payload)
