"""OpenAI model catalog. First entry of each category is its default."""

from __future__ import annotations

from shared.catalog import ModelCatalog, ModelInfo

OPENAI_MODELS: dict[str, list[ModelInfo]] = {
    # Text generation
    "chat": [
        ModelInfo(name="gpt-5.1", description="Latest GPT-5.1, tuned for coding and agentic tasks"),
        ModelInfo(name="gpt-5", description="Previous generation GPT-5"),
        ModelInfo(name="gpt-5-pro", description="GPT-5 with more compute per answer"),
        ModelInfo(name="gpt-5-mini", description="Fast, cost-efficient GPT-5"),
        ModelInfo(name="gpt-5-nano", description="Fastest and cheapest GPT-5"),
        ModelInfo(name="gpt-4.1", description="GPT-4.1, strong at tool calling and instruction following"),
        ModelInfo(name="gpt-4.1-mini", description="Smaller GPT-4.1"),
        ModelInfo(name="gpt-4.1-nano", description="Nano GPT-4.1"),
        ModelInfo(name="gpt-4o", description="GPT-4o multimodal model"),
        ModelInfo(name="gpt-4o-mini", description="Smaller GPT-4o"),
        ModelInfo(name="gpt-4-turbo", description="Previous generation GPT-4 Turbo"),
        ModelInfo(name="gpt-3.5-turbo", description="Legacy GPT-3.5 Turbo"),
    ],
    "coding": [
        ModelInfo(name="gpt-5.1-codex", description="GPT-5.1 based coding model"),
        ModelInfo(name="gpt-5.1-codex-max", description="Codex tuned for long-running coding tasks"),
        ModelInfo(name="gpt-5-codex", description="GPT-5 based coding model"),
        ModelInfo(name="gpt-5.1-codex-mini", description="Lower cost Codex"),
    ],
    # o-series reasoning and research
    "research": [
        ModelInfo(name="o3", description="o-series reasoning model"),
        ModelInfo(name="o3-mini", description="Small o3"),
        ModelInfo(name="o3-pro", description="o3 with more compute"),
        ModelInfo(name="o4-mini", description="Fast, inexpensive o4 model"),
        ModelInfo(name="o3-deep-research", description="Deep research model"),
        ModelInfo(name="o4-mini-deep-research", description="Small deep research model"),
        ModelInfo(name="o1", description="Early o-series model"),
        ModelInfo(name="o1-pro", description="o1 with more compute"),
    ],
    "image": [
        ModelInfo(name="gpt-image-1", description="GPT Image 1, generation and editing"),
        ModelInfo(name="gpt-image-1-mini", description="Smaller GPT Image 1"),
        ModelInfo(name="dall-e-3", description="DALL-E 3 (no longer recommended)"),
        ModelInfo(name="dall-e-2", description="DALL-E 2 (legacy)"),
    ],
    "video": [
        ModelInfo(name="sora-2", description="Video generation with synchronized audio"),
        ModelInfo(name="sora-2-pro", description="Higher quality Sora 2"),
    ],
    # Text to speech
    "speech": [
        ModelInfo(name="tts-1", description="Low latency text to speech"),
        ModelInfo(name="tts-1-hd", description="Higher quality text to speech"),
        ModelInfo(name="gpt-4o-mini-tts", description="Steerable GPT-4o mini speech model"),
    ],
    # Realtime and audio-native chat
    "audio": [
        ModelInfo(name="gpt-realtime", description="Realtime text and audio model"),
        ModelInfo(name="gpt-realtime-mini", description="Smaller realtime model"),
        ModelInfo(name="gpt-audio", description="Audio input and output"),
        ModelInfo(name="gpt-audio-mini", description="Smaller audio model"),
        ModelInfo(name="gpt-4o-audio-preview", description="GPT-4o audio model"),
        ModelInfo(name="gpt-4o-realtime-preview", description="GPT-4o realtime model"),
    ],
    "embedding": [
        ModelInfo(name="text-embedding-3-large", description="Most capable embedding model (3072 dims)"),
        ModelInfo(name="text-embedding-3-small", description="Efficient embedding model (1536 dims)"),
        ModelInfo(name="text-embedding-ada-002", description="Legacy embedding model"),
    ],
    "etc": [
        ModelInfo(name="computer-use-preview", description="Preview model for the computer use tool"),
        ModelInfo(name="gpt-4o-search-preview", description="GPT-4o tuned for web search"),
        ModelInfo(name="gpt-4o-mini-search-preview", description="Smaller search preview model"),
        ModelInfo(name="omni-moderation-latest", description="Flags harmful text and images"),
        ModelInfo(name="gpt-oss-120b", description="Open-weight model, Apache 2.0 (large)"),
        ModelInfo(name="gpt-oss-20b", description="Open-weight model, Apache 2.0 (medium)"),
    ],
}


def build_catalog(defaults: dict[str, str] | None = None) -> ModelCatalog:
    return ModelCatalog(OPENAI_MODELS, defaults=defaults)
