"""Canned OpenAI API payloads for adapter tests."""

from __future__ import annotations

CHAT_COMPLETION_RESPONSE = {
    "id": "chatcmpl-abc123",
    "object": "chat.completion",
    "created": 1760000000,
    "model": "gpt-5.1-2025-11-13",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello there!"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 12, "completion_tokens": 3, "total_tokens": 15},
}

IMAGES_RESPONSE = {
    "created": 1760000000,
    "data": [
        {"b64_json": "aGVsbG8=", "revised_prompt": "A watercolor lighthouse at dusk"},
    ],
}

DALLE_IMAGES_RESPONSE = {
    "created": 1760000000,
    "data": [
        {"url": "https://images.example.com/1.png"},
        {"url": "https://images.example.com/2.png"},
    ],
}


def embedding_response(values: list[float], tokens: int = 2) -> dict:
    return {
        "object": "list",
        "model": "text-embedding-3-large",
        "data": [{"object": "embedding", "index": 0, "embedding": values}],
        "usage": {"prompt_tokens": tokens, "total_tokens": tokens},
    }


MODELS_LIST = [
    {"id": "gpt-5.1", "object": "model", "created": 1760000000, "owned_by": "system"},
    {"id": "dall-e-3", "object": "model", "created": 1700000000, "owned_by": "system"},
    {"id": "ft:gpt-4o:acme", "object": "model", "created": 1750000000, "owned_by": "acme"},
]
