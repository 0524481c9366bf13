"""Tests for server manifests — ensure every tool has a valid definition.

These tests build each server's manifest from its catalog and verify
structural correctness: tool names are unique, schemas only use known
types, and model defaults agree with the catalog.
"""

from __future__ import annotations

import importlib

import pytest

from shared.validation import validate

# Package path of every server with manifest.py and models.py
SERVER_PACKAGES = [
    "modules.openai_mcp",
    "modules.gemini_mcp",
]

VALID_PARAM_TYPES = {"string", "integer", "number", "boolean", "array", "object"}


def _build(package: str):
    """Build a server's catalog and manifest with no overrides."""
    catalog = importlib.import_module(f"{package}.models").build_catalog()
    manifest = importlib.import_module(f"{package}.manifest").build_manifest(catalog)
    return catalog, manifest


def _walk(node, path="inputSchema"):
    """Yield (path, node) for a schema node and all nested nodes."""
    yield path, node
    for name, child in (node.properties or {}).items():
        yield from _walk(child, f"{path}.{name}")
    if node.items is not None:
        yield from _walk(node.items, f"{path}[]")
    for index, alt in enumerate(node.one_of or []):
        yield from _walk(alt, f"{path}.oneOf[{index}]")


# ===================================================================
# Parametrized tests
# ===================================================================


@pytest.mark.parametrize("package", SERVER_PACKAGES)
class TestManifestStructure:
    """Structural validation for server manifests."""

    def test_module_name_matches_package(self, package):
        _, manifest = _build(package)
        expected = package.rsplit(".", 1)[1].replace("_", "-")
        assert manifest.module_name == expected

    def test_has_description(self, package):
        _, manifest = _build(package)
        assert manifest.description

    def test_tool_names_unique(self, package):
        _, manifest = _build(package)
        names = [t.name for t in manifest.tools]
        assert len(names) == len(set(names)), f"{package}: duplicate tool names"

    def test_tool_names_are_snake_case(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            assert tool.name == tool.name.lower()
            assert " " not in tool.name and "." not in tool.name

    def test_every_tool_has_description(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            assert tool.description, f"{package}: {tool.name} has no description"

    def test_input_schema_is_object(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            assert tool.input_schema.type == "object"

    def test_param_types_valid(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            for path, node in _walk(tool.input_schema):
                if node.type is not None:
                    assert node.type in VALID_PARAM_TYPES, f"{tool.name} {path}: {node.type}"

    def test_required_fields_are_declared(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            for path, node in _walk(tool.input_schema):
                for name in node.required or []:
                    assert name in (node.properties or {}), f"{tool.name} {path}: {name}"

    def test_defaults_satisfy_own_constraints(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            for path, node in _walk(tool.input_schema):
                if not node.has_default or node.default is None:
                    continue
                if node.enum is not None:
                    assert node.default in node.enum, f"{tool.name} {path}"
                if node.minimum is not None:
                    assert node.default >= node.minimum, f"{tool.name} {path}"
                if node.maximum is not None:
                    assert node.default <= node.maximum, f"{tool.name} {path}"

    def test_model_enums_come_from_catalog(self, package):
        catalog, manifest = _build(package)
        known = {info.name for c in catalog.list_categories() for info in catalog.models_of(c)}
        for tool in manifest.tools:
            model = (tool.input_schema.properties or {}).get("model")
            if model is not None and model.enum is not None:
                assert set(model.enum) <= known, f"{tool.name}"

    def test_listing_is_json_schema(self, package):
        _, manifest = _build(package)
        for tool in manifest.tools:
            listed = tool.to_protocol()
            assert set(listed) == {"name", "description", "inputSchema"}
            assert "one_of" not in str(listed["inputSchema"])


# ===================================================================
# Catalog-driven defaults
# ===================================================================


def test_openai_image_default_is_catalog_default():
    catalog, manifest = _build("modules.openai_mcp")
    tool = next(t for t in manifest.tools if t.name == "create_image")

    resolved = validate(tool.input_schema, {"prompt": "a cat"})

    assert resolved["model"] == catalog.default_of("image").name == "gpt-image-1"
    assert resolved["size"] == "1024x1024"
    assert resolved["n"] == 1


def test_override_changes_manifest_default():
    from modules.openai_mcp.manifest import build_manifest
    from modules.openai_mcp.models import build_catalog

    manifest = build_manifest(build_catalog({"image": "dall-e-3"}))
    tool = next(t for t in manifest.tools if t.name == "create_image")

    assert tool.input_schema.properties["model"].default == "dall-e-3"
    assert "Always use dall-e-3" in tool.description


def test_gemini_chat_default_in_descriptions():
    catalog, manifest = _build("modules.gemini_mcp")
    chat_default = catalog.default_of("chat").name
    for name in ("generate_content", "chat"):
        tool = next(t for t in manifest.tools if t.name == name)
        assert f"Always use {chat_default}" in tool.description


@pytest.mark.parametrize(
    "package,tools",
    [
        (
            "modules.openai_mcp",
            [
                "chat_completion",
                "create_image",
                "create_embedding",
                "text_to_speech",
                "create_video",
                "list_models",
                "get_model_info",
                "list_model_catalog",
            ],
        ),
        (
            "modules.gemini_mcp",
            [
                "generate_content",
                "chat",
                "embed_content",
                "count_tokens",
                "analyze_image",
                "create_video",
                "generate_image",
                "list_models",
            ],
        ),
    ],
)
def test_tool_listing_order(package, tools):
    _, manifest = _build(package)
    assert [t.name for t in manifest.tools] == tools
