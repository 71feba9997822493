"""Configuration management for the Chat Playground service.

Uses Pydantic Settings for type-safe configuration with .env file support.
API keys and provider endpoints are loaded from environment variables.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from chat_playground.models.chat_options import ChatOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # LLM provider: "openai" or "ollama" (OpenAI-compatible endpoint)
    llm_provider: str = "openai"
    openai_api_key: str = ""
    openai_base_url: str | None = None
    ollama_base_url: str = "http://localhost:11434/v1"
    ollama_model: str = "llama3.2"

    # Client-level default chat options, applied to every call
    chat_model: str = "gpt-4o"
    chat_max_tokens: int = 300
    chat_temperature: float = 0.5
    chat_frequency_penalty: float = 0.2
    chat_presence_penalty: float = 0.1
    chat_top_p: float = 1.0

    llm_timeout_seconds: float = 60.0
    llm_max_retries: int = 2

    # Directory holding external prompt files; None uses the packaged prompts
    prompts_dir: Path | None = None

    # Service Configuration
    port: int = 8000
    allowed_origins: str = "http://localhost:3000"

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse allowed origins as list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def default_chat_options(self) -> ChatOptions:
        """Chat options shared by every prompt unless a call overrides them."""
        return ChatOptions(
            model=self.chat_model,
            max_tokens=self.chat_max_tokens,
            temperature=self.chat_temperature,
            frequency_penalty=self.chat_frequency_penalty,
            presence_penalty=self.chat_presence_penalty,
            top_p=self.chat_top_p,
        )


settings = Settings()
