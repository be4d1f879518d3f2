"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL is required (no default, never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Internal error details are exposed only when ENVIRONMENT=development

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Small pool defaults: serverless invocations hold few connections each
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgres:// URLs; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5

    # Runtime
    environment: str = "production"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
