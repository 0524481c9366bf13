"""Gemini server manifest: tool definitions."""

from __future__ import annotations

from shared.catalog import ModelCatalog
from shared.schemas.tools import ModuleManifest, SchemaNode, ToolDefinition

MODULE_NAME = "gemini-mcp"

TASK_TYPES = [
    "RETRIEVAL_QUERY",
    "RETRIEVAL_DOCUMENT",
    "SEMANTIC_SIMILARITY",
    "CLASSIFICATION",
    "CLUSTERING",
]
ASPECT_RATIOS = ["1:1", "16:9", "9:16", "4:3", "3:4"]
VIDEO_RESOLUTIONS = ["720p", "1080p"]
DEFAULT_IMAGE_PROMPT = "Describe this image in detail"


def _model_node(catalog: ModelCatalog, category: str, enum: bool = False) -> SchemaNode:
    names = [info.name for info in catalog.models_of(category)]
    default = names[0]
    description = f"The Gemini model to use ({', '.join(names)})"
    if enum:
        return SchemaNode(type="string", enum=names, default=default, description=description)
    return SchemaNode(type="string", default=default, description=description)


def build_manifest(catalog: ModelCatalog) -> ModuleManifest:
    """Tool table for the Gemini server, rendered from the catalog."""
    chat_default = catalog.default_of("chat").name

    generation_params = {
        "systemInstruction": SchemaNode(
            type="string",
            description="System instruction to guide the model behavior",
        ),
        "temperature": SchemaNode(
            type="number",
            minimum=0,
            maximum=2,
            description="Controls randomness (0-2)",
        ),
        "maxOutputTokens": SchemaNode(
            type="number",
            minimum=1,
            description="Maximum number of tokens to generate",
        ),
    }

    return ModuleManifest(
        module_name=MODULE_NAME,
        description="Google Gemini text, chat, embedding, vision, image and video capabilities.",
        tools=[
            ToolDefinition(
                name="generate_content",
                description=(
                    "Generate text content using Google Gemini models. Supports "
                    f"various generation parameters. Always use {chat_default} "
                    "unless the user explicitly asks for another model."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(
                            type="string",
                            description="The text prompt to generate content from",
                        ),
                        "model": _model_node(catalog, "chat"),
                        **generation_params,
                        "topP": SchemaNode(
                            type="number",
                            minimum=0,
                            maximum=1,
                            description="Nucleus sampling parameter",
                        ),
                        "topK": SchemaNode(
                            type="number",
                            minimum=1,
                            description="Top-k sampling parameter",
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="chat",
                description=(
                    "Have a multi-turn conversation with Gemini. All messages but "
                    "the last are sent as history; the last one is the new turn. "
                    f"Always use {chat_default} unless the user explicitly asks for "
                    "another model."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "messages": SchemaNode(
                            type="array",
                            description="Array of messages in the conversation",
                            items=SchemaNode(
                                type="object",
                                properties={
                                    "role": SchemaNode(type="string", enum=["user", "model"]),
                                    "content": SchemaNode(type="string"),
                                },
                                required=["role", "content"],
                            ),
                        ),
                        "model": _model_node(catalog, "chat"),
                        **generation_params,
                    },
                    required=["messages"],
                ),
            ),
            ToolDefinition(
                name="embed_content",
                description=(
                    "Generate embeddings for text content. Useful for semantic search "
                    "and similarity. Returns the vector length and a short preview "
                    "per input."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "content": SchemaNode(
                            one_of=[
                                SchemaNode(type="string"),
                                SchemaNode(type="array", items=SchemaNode(type="string")),
                            ],
                            description="Text content to embed (string or array of strings)",
                        ),
                        "model": _model_node(catalog, "embedding"),
                        "taskType": SchemaNode(
                            type="string",
                            enum=TASK_TYPES,
                            description="The type of task for the embedding",
                        ),
                    },
                    required=["content"],
                ),
            ),
            ToolDefinition(
                name="count_tokens",
                description="Count the number of tokens in a given text for a specific model.",
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "content": SchemaNode(
                            type="string",
                            description="The text to count tokens for",
                        ),
                        "model": _model_node(catalog, "chat"),
                    },
                    required=["content"],
                ),
            ),
            ToolDefinition(
                name="analyze_image",
                description=(
                    "Analyze an image using Gemini's vision capabilities. Provide an "
                    "image URL and a prompt."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "imageUrl": SchemaNode(
                            type="string",
                            description="URL of the image to analyze",
                        ),
                        "prompt": SchemaNode(
                            type="string",
                            default=DEFAULT_IMAGE_PROMPT,
                            description="The prompt/question about the image",
                        ),
                        "model": _model_node(catalog, "chat"),
                    },
                    required=["imageUrl"],
                ),
            ),
            ToolDefinition(
                name="create_video",
                description=(
                    "Generate videos using Google Veo. Veo access must be enabled "
                    "for the API key; the call is accepted and its resolved "
                    "parameters are echoed back."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(
                            type="string",
                            description="A text description of the desired video",
                        ),
                        "model": _model_node(catalog, "video", enum=True),
                        "duration": SchemaNode(
                            type="number",
                            minimum=1,
                            maximum=60,
                            default=10,
                            description="Video duration in seconds",
                        ),
                        "resolution": SchemaNode(
                            type="string",
                            enum=VIDEO_RESOLUTIONS,
                            default="1080p",
                            description="Video resolution",
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="generate_image",
                description=(
                    "Generate images using Imagen or Nano Banana. Image generation "
                    "access must be enabled for the API key; the call is accepted "
                    "and its resolved parameters are echoed back."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(
                            type="string",
                            description="A text description of the desired image",
                        ),
                        "model": _model_node(catalog, "image", enum=True),
                        "aspectRatio": SchemaNode(
                            type="string",
                            enum=ASPECT_RATIOS,
                            default="1:1",
                            description="Image aspect ratio",
                        ),
                        "negativePrompt": SchemaNode(
                            type="string",
                            description="What to avoid in the generated image",
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="list_models",
                description="List available Gemini models",
                input_schema=SchemaNode(type="object", properties={}),
            ),
        ],
    )
