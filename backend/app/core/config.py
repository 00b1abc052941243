"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Resolve25 Backend"
    debug: bool = False
    log_level: str = "INFO"
    database_url: str = "postgresql+psycopg2://postgres@localhost:5432/resolve25"
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o"
    openai_image_model: str = "dall-e-3"
    llm_temperature: float | None = None
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "resolve25"
    scheduler_enabled: bool = False
    scheduler_timezone: str = "UTC"
    job_suggestion_hour: int = 9
    job_suggestion_minute: int = 0
    jobs_run_on_startup: bool = False
    emergency_fund_target_default: str = "40000"
    process_task_simulate_latency: bool = True
    unsplash_access_key: str | None = None
    unsplash_api_url: str = "https://api.unsplash.com"
    unsplash_timeout_seconds: float = 10.0


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
