# app/core/config.py
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General configuration
    app_name: str = "Voice Feedback API"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # MongoDB configuration
    mongo_uri: str
    mongo_db_name: str = "voice_feedback"

    # OpenAI configuration
    openai_api_key: str
    openai_base_url: str = "https://api.openai.com/v1"

    # Realtime session defaults
    realtime_model: str = "gpt-4o-realtime-preview-2024-12-17"
    realtime_voice: str = "verse"
    transcription_model: str = "whisper-1"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
