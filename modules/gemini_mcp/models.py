"""Gemini model catalog. First entry of each category is its default."""

from __future__ import annotations

from shared.catalog import ModelCatalog, ModelInfo

GEMINI_MODELS: dict[str, list[ModelInfo]] = {
    "chat": [
        ModelInfo(name="gemini-3-pro-preview", description="Gemini 3 Pro - most advanced multimodal model"),
        ModelInfo(name="gemini-2.5-pro", description="Gemini 2.5 Pro - strong reasoning, long context"),
        ModelInfo(name="gemini-2.5-flash", description="Gemini 2.5 Flash - fast and efficient"),
        ModelInfo(name="gemini-2.5-flash-lite", description="Gemini 2.5 Flash-Lite - lowest latency and cost"),
        ModelInfo(name="gemini-2.0-flash", description="Gemini 2.0 Flash - previous generation workhorse"),
        ModelInfo(name="gemini-2.0-flash-lite", description="Gemini 2.0 Flash-Lite - lightweight and fast"),
    ],
    "embedding": [
        ModelInfo(name="gemini-embedding-001", description="Gemini embedding model (up to 3072 dimensions)"),
        ModelInfo(name="text-embedding-004", description="Text embedding model (768 dimensions)"),
    ],
    "image": [
        ModelInfo(name="imagen-3.0-generate-002", description="Imagen 3 - high-quality image generation"),
        ModelInfo(name="imagen-4.0-generate-001", description="Imagen 4 - latest image generation"),
        ModelInfo(name="gemini-2.5-flash-image", description="Nano Banana - fast image generation and editing"),
        ModelInfo(name="gemini-3-pro-image-preview", description="Nano Banana Pro - studio-quality image generation"),
    ],
    "video": [
        ModelInfo(name="veo-3.0-generate-001", description="Veo 3 - video generation with native audio"),
        ModelInfo(name="veo-3.0-fast-generate-001", description="Veo 3 Fast - quicker, lower cost video"),
        ModelInfo(name="veo-2.0-generate-001", description="Veo 2 - previous generation video model"),
    ],
}


def build_catalog(defaults: dict[str, str] | None = None) -> ModelCatalog:
    return ModelCatalog(GEMINI_MODELS, defaults=defaults)
