"""Gemini MCP server entry point."""

from __future__ import annotations

import sys

import httpx
import structlog
from google import genai

from core.dispatcher import Dispatcher
from core.server import ToolServer, run_server
from modules.gemini_mcp.manifest import MODULE_NAME, build_manifest
from modules.gemini_mcp.models import build_catalog
from modules.gemini_mcp.tools import GeminiTools, create_client
from shared.config import Settings, get_settings
from shared.errors import ConfigurationError
from shared.log_config import configure_logging
from shared.registry import ToolRegistry

logger = structlog.get_logger()

VERSION = "0.1.0"


def create_server(
    settings: Settings,
    client: genai.Client | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ToolServer:
    """Wire catalog, registry, adapter and dispatcher."""
    catalog = build_catalog(settings.default_models_for(MODULE_NAME))
    try:
        registry = ToolRegistry.from_manifest(build_manifest(catalog))
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    if client is None:
        client = create_client(settings.require_api_key(MODULE_NAME))
    tools = GeminiTools(
        catalog,
        client,
        http_client=http_client,
        image_fetch_timeout=settings.image_fetch_timeout,
    )

    return ToolServer(
        name=MODULE_NAME,
        version=VERSION,
        registry=registry,
        dispatcher=Dispatcher(registry, [tools]),
    )


def main() -> None:
    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        settings.require_api_key(MODULE_NAME)
        server = create_server(settings)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("gemini_module_ready", tools=len(server.registry))
    run_server(server, settings)


if __name__ == "__main__":
    main()
