"""Environment-driven settings for the AI question service and game defaults."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash", validation_alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/models",
        validation_alias="GEMINI_BASE_URL",
    )
    gemini_timeout_seconds: float = Field(default=60.0, validation_alias="GEMINI_TIMEOUT_SECONDS")
    # Fixed seed makes tile layouts and blind-bag draws repeatable for rehearsals
    shuffle_seed: int | None = Field(default=None, validation_alias="KEYWORD_SHUFFLE_SEED")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
