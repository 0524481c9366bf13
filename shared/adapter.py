"""Base class for provider adapters."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog

from shared.catalog import ModelCatalog
from shared.schemas.tools import ToolResult

logger = structlog.get_logger()

T = TypeVar("T")
R = TypeVar("R")

Handler = Callable[[dict[str, Any]], Awaitable[Any]]

# Number of leading vector values returned for each embedding
EMBEDDING_PREVIEW_SIZE = 5


@dataclass(frozen=True)
class GatedCapability:
    """A tool the schema accepts but no live backend call serves yet."""

    category: str
    note: str
    # Argument names echoed back in the placeholder, in output order
    echo: tuple[str, ...] = ()


async def gather_ordered(
    items: Iterable[T], fn: Callable[[T], Awaitable[R]]
) -> list[R]:
    """Run ``fn`` over ``items`` concurrently; results keep input order."""
    return list(await asyncio.gather(*(fn(item) for item in items)))


def summarize_embedding(values: Iterable[float]) -> dict[str, Any]:
    """Length plus a short prefix instead of the full vector."""
    values = list(values)
    return {
        "embedding_length": len(values),
        "embedding_preview": values[:EMBEDDING_PREVIEW_SIZE],
    }


def as_list(value: str | list[str]) -> list[str]:
    """Normalize a ``string | string[]`` argument to a list."""
    if isinstance(value, list):
        return value
    return [value]


class ToolAdapter:
    """Translates validated tool arguments into one backend's calls.

    Subclasses fill ``handlers`` (tool name -> coroutine taking the
    validated arguments and returning a JSON-serializable payload) and
    ``gated`` (tools answered with a placeholder instead of a call).
    """

    provider: str = "base"

    def __init__(self, catalog: ModelCatalog):
        self.catalog = catalog
        self.handlers: dict[str, Handler] = {}
        self.gated: dict[str, GatedCapability] = {}

    def tool_names(self) -> set[str]:
        return set(self.handlers) | set(self.gated)

    def resolve_model(self, category: str, arguments: dict[str, Any]) -> str:
        return self.catalog.resolve(category, arguments.get("model"))

    def placeholder(self, tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """Payload for an accepted-but-not-executed capability."""
        capability = self.gated[tool_name]
        # Echo the caller's model as given; nothing is sent anywhere
        model = arguments.get("model") or self.catalog.default_of(capability.category).name
        payload: dict[str, Any] = {
            "note": capability.note,
            "model": model,
            "prompt": arguments.get("prompt"),
        }
        for field in capability.echo:
            # Optional fields the caller left out stay out
            if arguments.get(field) is not None:
                payload[field] = arguments[field]
        return payload

    async def invoke(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        """Run a tool and normalize the outcome. Never raises."""
        if tool_name in self.gated:
            logger.info("tool_call_gated", provider=self.provider, tool=tool_name)
            return ToolResult.success(self.placeholder(tool_name, arguments))

        handler = self.handlers.get(tool_name)
        if handler is None:
            return ToolResult.failure(f"Unknown tool: {tool_name}")

        logger.info("tool_call_started", provider=self.provider, tool=tool_name)
        try:
            payload = await handler(arguments)
        except Exception as e:
            logger.error(
                "backend_error",
                provider=self.provider,
                tool=tool_name,
                error=str(e),
                exc_info=True,
            )
            message = str(e) or type(e).__name__
            return ToolResult.failure(f"Error: {message}")

        logger.info("tool_call_finished", provider=self.provider, tool=tool_name)
        return ToolResult.success(payload)
