"""Command line interface for the provider tool servers."""

from __future__ import annotations

import asyncio
import importlib
import json
import sys

import click

from shared.config import get_settings
from shared.errors import ConfigurationError
from shared.log_config import configure_logging

# CLI name -> package holding main.py, manifest.py and models.py
SERVERS = {
    "openai": "modules.openai_mcp",
    "gemini": "modules.gemini_mcp",
}

SERVER_CHOICE = click.Choice(sorted(SERVERS))


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


def _load(server: str, part: str):
    return importlib.import_module(f"{SERVERS[server]}.{part}")


def _catalog(server: str):
    manifest_mod = _load(server, "manifest")
    models_mod = _load(server, "models")
    settings = get_settings()
    return models_mod.build_catalog(settings.default_models_for(manifest_mod.MODULE_NAME))


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
def cli():
    """Generative AI provider tool servers."""
    pass


@cli.command()
@click.argument("server", type=SERVER_CHOICE)
@click.option("--mode", type=click.Choice(["stdio", "http"]), help="Override MCP_MODE.")
@click.option("--port", type=int, help="Override PORT (http mode).")
def serve(server, mode, port):
    """Run a server over stdio or HTTP."""
    from core.server import run_server

    settings = get_settings()
    updates = {}
    if mode:
        updates["mcp_mode"] = mode
    if port:
        updates["port"] = port
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(settings.log_level)
    main_mod = _load(server, "main")
    try:
        tool_server = main_mod.create_server(settings)
    except (ConfigurationError, ValueError) as e:
        _fail(str(e))
    run_server(tool_server, settings)


@cli.command()
@click.argument("server", type=SERVER_CHOICE)
def tools(server):
    """Print the tool listing a server publishes."""
    try:
        catalog = _catalog(server)
    except (ConfigurationError, ValueError) as e:
        _fail(str(e))
    manifest = _load(server, "manifest").build_manifest(catalog)
    listing = [tool.to_protocol() for tool in manifest.tools]
    click.echo(json.dumps({"tools": listing}, indent=2))


@cli.command()
@click.argument("server", type=SERVER_CHOICE)
@click.argument("tool")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
def call(server, tool, raw_args):
    """Invoke one tool and print its result."""
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as e:
        _fail(f"--args is not valid JSON: {e}")
    if not isinstance(arguments, dict):
        _fail("--args must be a JSON object")

    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        tool_server = _load(server, "main").create_server(settings)
    except (ConfigurationError, ValueError) as e:
        _fail(str(e))

    result = run_async(tool_server.call_tool(tool, arguments))
    click.echo(result.text)
    if result.is_error:
        sys.exit(1)


@cli.command()
@click.argument("server", type=SERVER_CHOICE)
@click.option("--category", help="Only show one category.")
def models(server, category):
    """Show the built-in model catalog."""
    try:
        catalog = _catalog(server)
    except (ConfigurationError, ValueError) as e:
        _fail(str(e))

    categories = catalog.list_categories()
    if category:
        if category not in categories:
            _fail(f"Unknown category '{category}', expected one of: {', '.join(categories)}")
        categories = [category]

    for name in categories:
        default = catalog.default_of(name).name
        click.echo(f"{name} (default: {default})")
        for info in catalog.models_of(name):
            click.echo(f"  {info.name:<32} {info.description}")


if __name__ == "__main__":
    cli()
