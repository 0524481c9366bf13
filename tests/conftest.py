"""Shared test fixtures for the tool server test suite.

Provides settings, a small catalog and registry, and a recording adapter so
tests run without network access or real API keys.
"""

from __future__ import annotations

from typing import Any

import pytest

from shared.adapter import GatedCapability, ToolAdapter
from shared.catalog import ModelCatalog, ModelInfo
from shared.config import Settings
from shared.registry import ToolRegistry
from shared.schemas.tools import SchemaNode, ToolDefinition


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


@pytest.fixture
def settings():
    """Settings with dummy keys, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        gemini_api_key="gm-test",
    )


# ---------------------------------------------------------------------------
# Small catalog, registry and adapter for dispatch tests
# ---------------------------------------------------------------------------


class RecordingAdapter(ToolAdapter):
    """Adapter stub that records every backend call it would make."""

    provider = "stub"

    def __init__(self, catalog: ModelCatalog):
        super().__init__(catalog)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_with: Exception | None = None
        self.handlers = {
            "echo": self.echo,
            "make_image": self.make_image,
        }
        self.gated = {
            "make_video": GatedCapability(
                category="video", note="Video access is not enabled", echo=("seconds",)
            ),
        }

    async def echo(self, args: dict[str, Any]) -> dict:
        self.calls.append(("echo", args))
        if self.fail_with is not None:
            raise self.fail_with
        return {"text": args["text"], "model": self.resolve_model("chat", args)}

    async def make_image(self, args: dict[str, Any]) -> dict:
        self.calls.append(("make_image", args))
        return {"model": self.resolve_model("image", args), "size": args["size"]}


@pytest.fixture
def catalog():
    return ModelCatalog(
        {
            "chat": [
                ModelInfo(name="chat-large", description="Large chat model"),
                ModelInfo(name="chat-small", description="Small chat model"),
            ],
            "image": [
                ModelInfo(name="img-2", description="Image model 2"),
                ModelInfo(name="img-1", description="Image model 1"),
            ],
            "video": [ModelInfo(name="vid-1", description="Video model")],
        }
    )


@pytest.fixture
def registry(catalog):
    return ToolRegistry(
        [
            ToolDefinition(
                name="echo",
                description="Echo text back",
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "text": SchemaNode(type="string"),
                        "model": SchemaNode(type="string"),
                        "temperature": SchemaNode(type="number", minimum=0, maximum=2),
                    },
                    required=["text"],
                ),
            ),
            ToolDefinition(
                name="make_image",
                description="Make an image",
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(type="string"),
                        "model": SchemaNode(
                            type="string",
                            enum=["img-2", "img-1"],
                            default=catalog.default_of("image").name,
                        ),
                        "size": SchemaNode(
                            type="string", enum=["small", "large"], default="small"
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="make_video",
                description="Make a video",
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(type="string"),
                        "model": SchemaNode(type="string"),
                        "seconds": SchemaNode(type="number", minimum=1, maximum=60, default=10),
                    },
                    required=["prompt"],
                ),
            ),
        ]
    )


@pytest.fixture
def recording_adapter(catalog):
    return RecordingAdapter(catalog)
