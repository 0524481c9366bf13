"""Gemini API response builders for adapter tests."""

from __future__ import annotations

from google.genai import types

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def content_response(text: str = "A red bicycle leaning on a wall.") -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)]),
                finish_reason=types.FinishReason.STOP,
            )
        ],
        usage_metadata=types.GenerateContentResponseUsageMetadata(
            prompt_token_count=8,
            candidates_token_count=9,
            total_token_count=17,
        ),
    )


def embedding_response(values: list[float]) -> types.EmbedContentResponse:
    return types.EmbedContentResponse(embeddings=[types.ContentEmbedding(values=values)])
