"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "emerge"
    debug: bool = False
    database_url: str = "sqlite:///./emerge.db"
    api_prefix: str = "/api"

    # Single implicit user until accounts exist
    default_user_id: int = 1
    default_username: str = "default"

    recent_activity_limit: int = 5

    # AI providers
    ai_provider: str = "gemini"
    ai_timeout_seconds: float = 20.0
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"


settings = Settings()
