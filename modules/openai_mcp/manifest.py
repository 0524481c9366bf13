"""OpenAI server manifest: tool definitions."""

from __future__ import annotations

from shared.catalog import ModelCatalog
from shared.schemas.tools import ModuleManifest, SchemaNode, ToolDefinition

MODULE_NAME = "openai-mcp"

VOICES = [
    "alloy", "ash", "ballad", "coral", "echo", "fable",
    "nova", "onyx", "sage", "shimmer", "verse",
]
AUDIO_FORMATS = ["mp3", "opus", "aac", "flac", "wav", "pcm"]
IMAGE_SIZES = [
    "256x256", "512x512", "1024x1024", "1792x1024", "1024x1792",
    "1536x1024", "1024x1536", "auto",
]
IMAGE_QUALITIES = ["standard", "hd", "low", "medium", "high", "auto"]
VIDEO_SIZES = ["1280x720", "1920x1080"]


def _names(catalog: ModelCatalog, category: str) -> list[str]:
    return [info.name for info in catalog.models_of(category)]


def build_manifest(catalog: ModelCatalog) -> ModuleManifest:
    """Tool table for the OpenAI server.

    Descriptions and model defaults are rendered from the catalog so a
    configured default shows up everywhere at once.
    """
    chat_default = catalog.default_of("chat").name
    image_default = catalog.default_of("image").name
    embedding_default = catalog.default_of("embedding").name
    speech_default = catalog.default_of("speech").name
    video_default = catalog.default_of("video").name

    return ModuleManifest(
        module_name=MODULE_NAME,
        description="OpenAI chat, image, embedding, speech and video capabilities.",
        tools=[
            ToolDefinition(
                name="chat_completion",
                description=(
                    "Generate a chat completion using OpenAI's GPT models. Supports "
                    "conversation history with system, user, and assistant messages. "
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
                                    "role": SchemaNode(
                                        type="string",
                                        enum=["system", "developer", "user", "assistant"],
                                    ),
                                    "content": SchemaNode(type="string"),
                                },
                                required=["role", "content"],
                            ),
                        ),
                        "model": SchemaNode(
                            type="string",
                            default=chat_default,
                            description=(
                                f"The model to use for completion (default: {chat_default})"
                            ),
                        ),
                        "temperature": SchemaNode(
                            type="number",
                            minimum=0,
                            maximum=2,
                            description="Sampling temperature (0-2)",
                        ),
                        "max_tokens": SchemaNode(
                            type="number",
                            minimum=1,
                            description="Maximum tokens to generate",
                        ),
                    },
                    required=["messages"],
                ),
            ),
            ToolDefinition(
                name="create_image",
                description=(
                    "Generate images from a text prompt. Returns image URLs or "
                    f"base64 data depending on the model. Always use {image_default} "
                    "unless the user explicitly asks for another model."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(
                            type="string",
                            description="A text description of the desired image",
                        ),
                        "model": SchemaNode(
                            type="string",
                            enum=_names(catalog, "image"),
                            default=image_default,
                            description="Image generation model",
                        ),
                        "size": SchemaNode(
                            type="string",
                            enum=IMAGE_SIZES,
                            default="1024x1024",
                        ),
                        "quality": SchemaNode(
                            type="string",
                            enum=IMAGE_QUALITIES,
                            description=(
                                "standard/hd for DALL-E 3, low/medium/high/auto for "
                                "GPT Image models"
                            ),
                        ),
                        "n": SchemaNode(
                            type="number",
                            minimum=1,
                            maximum=10,
                            default=1,
                            description="Number of images to generate",
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="create_embedding",
                description=(
                    "Create embeddings for text using OpenAI's embedding models. "
                    "Useful for semantic search and similarity comparisons. Returns "
                    "the vector length and a short preview per input."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "input": SchemaNode(
                            one_of=[
                                SchemaNode(type="string"),
                                SchemaNode(type="array", items=SchemaNode(type="string")),
                            ],
                            description="Text to embed (string or array of strings)",
                        ),
                        "model": SchemaNode(
                            type="string",
                            default=embedding_default,
                            description=(
                                "The embedding model to use "
                                f"({', '.join(_names(catalog, 'embedding'))})"
                            ),
                        ),
                        "dimensions": SchemaNode(
                            type="number",
                            minimum=1,
                            description="Output dimensions (text-embedding-3 models only)",
                        ),
                    },
                    required=["input"],
                ),
            ),
            ToolDefinition(
                name="text_to_speech",
                description=(
                    "Convert text to speech using OpenAI's TTS models. Returns audio "
                    "data as base64."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "input": SchemaNode(
                            type="string",
                            description="The text to generate audio for",
                        ),
                        "model": SchemaNode(
                            type="string",
                            enum=_names(catalog, "speech"),
                            default=speech_default,
                        ),
                        "voice": SchemaNode(type="string", enum=VOICES, default="alloy"),
                        "response_format": SchemaNode(
                            type="string",
                            enum=AUDIO_FORMATS,
                            default="mp3",
                            description="Audio container/codec",
                        ),
                        "speed": SchemaNode(
                            type="number",
                            minimum=0.25,
                            maximum=4.0,
                            description="Playback speed multiplier",
                        ),
                        "instructions": SchemaNode(
                            type="string",
                            description="Voice style instructions (gpt-4o-mini-tts only)",
                        ),
                    },
                    required=["input"],
                ),
            ),
            ToolDefinition(
                name="create_video",
                description=(
                    "Generate videos using Sora 2. Video generation requires "
                    "allow-listed API access; the call is accepted and its resolved "
                    "parameters are echoed back."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "prompt": SchemaNode(
                            type="string",
                            description="A text description of the desired video",
                        ),
                        "model": SchemaNode(
                            type="string",
                            enum=_names(catalog, "video"),
                            default=video_default,
                            description="The Sora model to use",
                        ),
                        "size": SchemaNode(
                            type="string",
                            enum=VIDEO_SIZES,
                            default="1280x720",
                            description="Video resolution",
                        ),
                        "seconds": SchemaNode(
                            type="number",
                            minimum=1,
                            maximum=60,
                            default=10,
                            description="Video duration in seconds (1-60)",
                        ),
                    },
                    required=["prompt"],
                ),
            ),
            ToolDefinition(
                name="list_models",
                description="List all models available to the configured OpenAI API key",
                input_schema=SchemaNode(type="object", properties={}),
            ),
            ToolDefinition(
                name="get_model_info",
                description=(
                    "Look up a model in the built-in catalog. Reports its category "
                    "and description, or known=false for models the catalog does "
                    "not list."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "name": SchemaNode(
                            type="string",
                            description="Model name (case-insensitive)",
                        ),
                    },
                    required=["name"],
                ),
            ),
            ToolDefinition(
                name="list_model_catalog",
                description=(
                    "List the built-in model catalog grouped by category, with the "
                    "default model of each category."
                ),
                input_schema=SchemaNode(
                    type="object",
                    properties={
                        "category": SchemaNode(
                            type="string",
                            enum=catalog.list_categories(),
                            description="Only list this category",
                        ),
                    },
                ),
            ),
        ],
    )
