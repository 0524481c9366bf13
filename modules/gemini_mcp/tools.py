"""Google Gemini tool implementations."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog
from google import genai
from google.genai import types

from shared.adapter import GatedCapability, ToolAdapter, as_list, gather_ordered, summarize_embedding
from shared.catalog import ModelCatalog
from shared.errors import BackendError

logger = structlog.get_logger()

VEO_NOTE = (
    "Veo 3 API integration requires Google AI Studio access. Please check "
    "ai.google.dev for the latest API documentation."
)
IMAGEN_NOTE = (
    "Imagen / Nano Banana API integration requires Google AI Studio access. "
    "Please check ai.google.dev for documentation."
)

# Blocking is left to the calling agent
SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold=types.HarmBlockThreshold.BLOCK_NONE)
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]

DEFAULT_IMAGE_MIME = "image/jpeg"


def create_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _usage(response: Any) -> dict | None:
    usage = getattr(response, "usage_metadata", None)
    if usage is None:
        return None
    return usage.model_dump(mode="json", by_alias=True, exclude_none=True)


def _finish_reason(response: Any) -> Any:
    if not response.candidates:
        return None
    return _enum_value(response.candidates[0].finish_reason)


class GeminiTools(ToolAdapter):
    """Adapter from the uniform tool contract to the Gemini API.

    The google-genai client is synchronous here, so every call runs in a
    worker thread to keep the event loop free.
    """

    provider = "google"

    def __init__(
        self,
        catalog: ModelCatalog,
        client: genai.Client,
        http_client: httpx.AsyncClient | None = None,
        image_fetch_timeout: float = 30.0,
    ):
        super().__init__(catalog)
        self.client = client
        self.http_client = http_client
        self.image_fetch_timeout = image_fetch_timeout
        self.handlers = {
            "generate_content": self.generate_content,
            "chat": self.chat,
            "embed_content": self.embed_content,
            "count_tokens": self.count_tokens,
            "analyze_image": self.analyze_image,
            "list_models": self.list_models,
        }
        self.gated = {
            "create_video": GatedCapability(
                category="video", note=VEO_NOTE, echo=("duration", "resolution")
            ),
            "generate_image": GatedCapability(
                category="image", note=IMAGEN_NOTE, echo=("aspectRatio", "negativePrompt")
            ),
        }

    def _generation_config(self, args: dict[str, Any]) -> types.GenerateContentConfig:
        """Map the uniform generation arguments onto Gemini's config names."""
        max_tokens = args.get("maxOutputTokens")
        top_k = args.get("topK")
        return types.GenerateContentConfig(
            system_instruction=args.get("systemInstruction"),
            temperature=args.get("temperature"),
            max_output_tokens=int(max_tokens) if max_tokens is not None else None,
            top_p=args.get("topP"),
            top_k=top_k,
            safety_settings=SAFETY_SETTINGS,
        )

    async def generate_content(self, args: dict[str, Any]) -> dict:
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.resolve_model("chat", args),
            contents=args["prompt"],
            config=self._generation_config(args),
        )
        return {
            "text": response.text,
            "usageMetadata": _usage(response),
            "finishReason": _finish_reason(response),
        }

    def _send_chat(
        self,
        model: str,
        config: types.GenerateContentConfig,
        history: list[types.Content],
        message: str,
    ):
        session = self.client.chats.create(model=model, config=config, history=history)
        return session.send_message(message)

    async def chat(self, args: dict[str, Any]) -> dict:
        """All but the last message become history; the last is sent."""
        messages = args["messages"]
        if not messages:
            raise BackendError("messages must not be empty")
        for index, msg in enumerate(messages):
            if not isinstance(msg, dict) or not msg.get("role") or msg.get("content") is None:
                raise BackendError(f"messages[{index}] needs role and content")

        history = [
            types.Content(role=msg["role"], parts=[types.Part(text=msg["content"])])
            for msg in messages[:-1]
        ]
        response = await asyncio.to_thread(
            self._send_chat,
            self.resolve_model("chat", args),
            self._generation_config(args),
            history,
            messages[-1]["content"],
        )
        return {
            "text": response.text,
            "usageMetadata": _usage(response),
            "finishReason": _finish_reason(response),
        }

    async def embed_content(self, args: dict[str, Any]) -> dict:
        """Embed each item concurrently; output order follows input order."""
        model = self.resolve_model("embedding", args)
        config = None
        if args.get("taskType"):
            config = types.EmbedContentConfig(task_type=args["taskType"])

        async def _embed(text: str) -> list[float]:
            response = await asyncio.to_thread(
                self.client.models.embed_content,
                model=model,
                contents=text,
                config=config,
            )
            if not response.embeddings:
                raise BackendError(f"Gemini returned no embedding for model {model}")
            return list(response.embeddings[0].values or [])

        vectors = await gather_ordered(as_list(args["content"]), _embed)
        return {
            "model": model,
            "embeddings": [
                {"index": index, **summarize_embedding(values)}
                for index, values in enumerate(vectors)
            ],
        }

    async def count_tokens(self, args: dict[str, Any]) -> dict:
        response = await asyncio.to_thread(
            self.client.models.count_tokens,
            model=self.resolve_model("chat", args),
            contents=args["content"],
        )
        return {"totalTokens": response.total_tokens}

    async def _fetch_image(self, url: str) -> tuple[bytes, str]:
        if self.http_client is not None:
            response = await self.http_client.get(url, follow_redirects=True)
        else:
            async with httpx.AsyncClient(timeout=self.image_fetch_timeout) as client:
                response = await client.get(url, follow_redirects=True)

        if response.status_code >= 400:
            raise BackendError(f"Failed to fetch image from {url}: HTTP {response.status_code}")
        content_type = response.headers.get("content-type") or DEFAULT_IMAGE_MIME
        mime_type = content_type.split(";")[0].strip() or DEFAULT_IMAGE_MIME
        return response.content, mime_type

    async def analyze_image(self, args: dict[str, Any]) -> dict:
        data, mime_type = await self._fetch_image(args["imageUrl"])
        logger.info("image_fetched", mime_type=mime_type, size=len(data))

        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.resolve_model("chat", args),
            contents=[
                types.Part.from_bytes(data=data, mime_type=mime_type),
                args["prompt"],
            ],
            config=types.GenerateContentConfig(safety_settings=SAFETY_SETTINGS),
        )
        return {
            "text": response.text,
            "usageMetadata": _usage(response),
            "image": {"mime_type": mime_type, "size_bytes": len(data)},
        }

    async def list_models(self, args: dict[str, Any]) -> dict:
        models = []
        for category in self.catalog.list_categories():
            for info in self.catalog.models_of(category):
                models.append(
                    {"id": info.name, "description": info.description, "category": category}
                )
        return {"models": models}
