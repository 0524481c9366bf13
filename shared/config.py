"""Configuration management using Pydantic Settings."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError

# Default HTTP ports per server when PORT is not set
DEFAULT_PORTS: dict[str, int] = {
    "openai-mcp": 3500,
    "gemini-mcp": 3501,
}


def parse_mapping(v: object) -> dict[str, str]:
    """Parse a mapping from a JSON object string, 'k=v,k=v' string, or dict."""
    if isinstance(v, dict):
        return {str(k): str(val) for k, val in v.items()}
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return {}
        if v.startswith("{"):
            data = json.loads(v)
            if not isinstance(data, dict):
                raise ValueError(f"Expected a JSON object, got: {v}")
            return {str(k): str(val) for k, val in data.items()}
        result = {}
        for item in v.split(","):
            if not item.strip():
                continue
            key, sep, value = item.partition("=")
            if not sep:
                raise ValueError(f"Expected 'category=model', got: {item.strip()}")
            result[key.strip()] = value.strip()
        return result
    raise ValueError(f"Cannot parse mapping from {type(v).__name__}")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider API keys
    openai_api_key: str = ""
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )

    # Transport
    mcp_mode: Literal["stdio", "http"] = "stdio"
    host: str = "0.0.0.0"
    # Unset means the per-server default from DEFAULT_PORTS
    port: int | None = None

    log_level: str = "INFO"

    # Category default overrides, e.g. '{"image": "dall-e-3"}' or 'image=dall-e-3'.
    # Stored as str to avoid pydantic-settings JSON parse issues with env vars.
    # Use parse_mapping() at the point of use.
    openai_default_models: str = ""
    gemini_default_models: str = ""

    # analyze_image downloads the image before sending it inline
    image_fetch_timeout: float = 30.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("mcp_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower() or "stdio"
        return v

    def api_key_for(self, server: str) -> str:
        """Return the credential configured for a server (may be empty)."""
        if server == "openai-mcp":
            return self.openai_api_key
        if server == "gemini-mcp":
            return self.gemini_api_key
        raise ConfigurationError(f"Unknown server: {server}")

    def require_api_key(self, server: str) -> str:
        """Return the server's credential or raise ConfigurationError."""
        key = self.api_key_for(server)
        if not key:
            env_name = "OPENAI_API_KEY" if server == "openai-mcp" else "GEMINI_API_KEY"
            raise ConfigurationError(f"{env_name} environment variable is required")
        return key

    def default_models_for(self, server: str) -> dict[str, str]:
        """Category default overrides for a server."""
        raw = (
            self.openai_default_models
            if server == "openai-mcp"
            else self.gemini_default_models
        )
        try:
            return parse_mapping(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid default model overrides: {e}") from e

    def port_for(self, server: str) -> int:
        """Configured HTTP port, or the server's default."""
        if self.port is not None:
            return self.port
        return DEFAULT_PORTS.get(server, 3500)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
