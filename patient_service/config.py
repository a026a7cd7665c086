"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - database_url is always an async driver URL (postgresql:// is rewritten to asyncpg)
    - get_settings() is cached (lru_cache); the app and Alembic share one instance
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Patient service settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    database_url: str = (
        "postgresql+asyncpg://patients:patients@db:5432/patients"
    )
    database_pool_size: int = 20
    database_max_overflow: int = 10

    cors_origins: list[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_asyncpg_driver(cls, v: str) -> str:
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
