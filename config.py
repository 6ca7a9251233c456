"""
Runtime configuration for the transaction service and its load client.

Values come from environment variables (or a local `.env` file).
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_origins: List[str] = Field(["*"], alias="CORS_ORIGINS")

    # Load test client
    loadtest_base_url: str = Field("http://localhost:8080", alias="LOADTEST_BASE_URL")
    loadtest_calls: int = Field(1000, alias="LOADTEST_CALLS")
    loadtest_workers: int = Field(5, alias="LOADTEST_WORKERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings so the environment is parsed once per process"""
    return Settings()
