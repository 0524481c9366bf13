"""OpenAI tool implementations."""

from __future__ import annotations

import base64
from typing import Any

import structlog
from openai import AsyncOpenAI

from shared.adapter import GatedCapability, ToolAdapter, as_list, gather_ordered, summarize_embedding
from shared.catalog import ModelCatalog
from shared.errors import ModelNotFoundError

logger = structlog.get_logger()

SORA_NOTE = (
    "Sora 2 API integration requires OpenAI API access. Please check "
    "platform.openai.com/docs for the latest API documentation."
)


def create_client(api_key: str) -> AsyncOpenAI:
    """OpenAI client with SDK-level retries disabled; calls are made once."""
    return AsyncOpenAI(api_key=api_key, max_retries=0)


class OpenAITools(ToolAdapter):
    """Adapter from the uniform tool contract to the OpenAI API."""

    provider = "openai"

    def __init__(self, catalog: ModelCatalog, client: AsyncOpenAI):
        super().__init__(catalog)
        self.client = client
        self.handlers = {
            "chat_completion": self.chat_completion,
            "create_image": self.create_image,
            "create_embedding": self.create_embedding,
            "text_to_speech": self.text_to_speech,
            "list_models": self.list_models,
            "get_model_info": self.get_model_info,
            "list_model_catalog": self.list_model_catalog,
        }
        self.gated = {
            "create_video": GatedCapability(
                category="video", note=SORA_NOTE, echo=("size", "seconds")
            ),
        }

    async def chat_completion(self, args: dict[str, Any]) -> dict:
        """Send the conversation as-is and return the first choice."""
        kwargs: dict[str, Any] = {
            "model": self.resolve_model("chat", args),
            "messages": args["messages"],
        }
        if args.get("temperature") is not None:
            kwargs["temperature"] = args["temperature"]
        # Newer models reject max_tokens; max_completion_tokens works everywhere
        if args.get("max_tokens") is not None:
            kwargs["max_completion_tokens"] = int(args["max_tokens"])

        response = await self.client.chat.completions.create(**kwargs)

        choice = response.choices[0] if response.choices else None
        return {
            "id": response.id,
            "model": response.model,
            "message": choice.message.model_dump(exclude_none=True) if choice else None,
            "finish_reason": choice.finish_reason if choice else None,
            "usage": response.usage.model_dump(exclude_none=True) if response.usage else None,
        }

    async def create_image(self, args: dict[str, Any]) -> dict:
        model = self.resolve_model("image", args)
        kwargs: dict[str, Any] = {
            "model": model,
            "prompt": args["prompt"],
            "size": args["size"],
            "n": int(args["n"]),
        }
        if args.get("quality"):
            kwargs["quality"] = args["quality"]

        response = await self.client.images.generate(**kwargs)

        images = []
        for image in response.data or []:
            entry = {
                "url": image.url,
                "b64_json": image.b64_json,
                "revised_prompt": image.revised_prompt,
            }
            images.append({k: v for k, v in entry.items() if v is not None})
        return {"created": response.created, "model": model, "images": images}

    async def create_embedding(self, args: dict[str, Any]) -> dict:
        """Embed each input separately; output order follows input order."""
        model = self.resolve_model("embedding", args)
        texts = as_list(args["input"])
        dimensions = args.get("dimensions")

        async def _embed(text: str):
            kwargs: dict[str, Any] = {"model": model, "input": text}
            if dimensions is not None:
                kwargs["dimensions"] = int(dimensions)
            return await self.client.embeddings.create(**kwargs)

        responses = await gather_ordered(texts, _embed)

        embeddings = []
        prompt_tokens = 0
        total_tokens = 0
        for index, response in enumerate(responses):
            embeddings.append({"index": index, **summarize_embedding(response.data[0].embedding)})
            if response.usage:
                prompt_tokens += response.usage.prompt_tokens
                total_tokens += response.usage.total_tokens

        return {
            "model": responses[0].model if responses else model,
            "embeddings": embeddings,
            "usage": {"prompt_tokens": prompt_tokens, "total_tokens": total_tokens},
        }

    async def text_to_speech(self, args: dict[str, Any]) -> dict:
        kwargs: dict[str, Any] = {
            "model": self.resolve_model("speech", args),
            "voice": args["voice"],
            "input": args["input"],
            "response_format": args["response_format"],
        }
        if args.get("speed") is not None:
            kwargs["speed"] = args["speed"]
        if args.get("instructions"):
            kwargs["instructions"] = args["instructions"]

        response = await self.client.audio.speech.create(**kwargs)
        audio = await response.aread()

        encoded = base64.b64encode(audio).decode("ascii")
        return {
            "format": args["response_format"],
            "base64_length": len(encoded),
            "audio_base64": encoded,
        }

    async def list_models(self, args: dict[str, Any]) -> dict:
        page = await self.client.models.list()
        models = sorted(
            ({"id": m.id, "owned_by": m.owned_by} for m in page.data),
            key=lambda m: m["id"],
        )
        return {"models": models}

    async def get_model_info(self, args: dict[str, Any]) -> dict:
        name = args["name"]
        try:
            info = self.catalog.find(name)
        except ModelNotFoundError:
            return {"name": name, "known": False}

        category = self.catalog.category_of(info.name)
        return {
            "name": info.name,
            "description": info.description,
            "category": category,
            "is_default": self.catalog.default_of(category).name == info.name,
            "known": True,
        }

    async def list_model_catalog(self, args: dict[str, Any]) -> dict:
        categories = self.catalog.as_dict()
        if args.get("category"):
            categories = {args["category"]: categories[args["category"]]}
        return {
            "default_models": {
                category: self.catalog.default_of(category).name for category in categories
            },
            "categories": categories,
        }
