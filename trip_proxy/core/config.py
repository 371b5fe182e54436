from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Travel Hub AI Proxy"
    proxy_prefix: str = "/api"

    gemini_api_key: str = Field(default="", description="Google Generative Language API key")
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_text_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_image_model: str = "imagen-4.0-generate-001"

    # Low temperature keeps the itinerary JSON free of formatting drift.
    itinerary_temperature: float = 0.1
    strict_itinerary_validation: bool = False
    upstream_timeout_seconds: Optional[float] = 120.0

    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
