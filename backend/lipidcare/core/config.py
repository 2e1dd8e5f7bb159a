"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "LipidCare Routine Service"
    debug: bool = False
    log_level: str = "INFO"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    openai_temperature: float = 0.7
    generation_timeout_seconds: float = 45.0
    fallback_delay_seconds: float = 2.0
    schedule_locale: str = "Korean"
    max_sessions: int = 1000
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "lipidcare"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
