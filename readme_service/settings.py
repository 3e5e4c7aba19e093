# /readme_service/settings.py
# This file defines the configuration settings for the README Generator API.
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore") # Create .env file in project root with GEMINI and GITHUB tokens.

    app_name: str = "README Generator API"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # GitHub
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN") # From .env, for higher rate limits.
    github_api_base: str = "https://api.github.com"
    http_timeout_s: float | None = Field(default=None, alias="HTTP_TIMEOUT_S") # None means calls wait indefinitely.

    # Repo fetching / context management
    max_config_files: int = 10 # Config files (Dockerfile, tsconfig.json, ...) whose content goes into the prompt.

    # Gemini (OpenAI-compatible endpoint)
    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY") # From .env.
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    gemini_model: str = "gemini-2.5-flash"
    llm_max_tokens: int = 8192 # A full README can be long.
    llm_temperature: float = 0.7

    # Optional Django UI (basic)
    enable_django_ui: bool = Field(default=False, alias="ENABLE_DJANGO_UI")


settings = Settings()
