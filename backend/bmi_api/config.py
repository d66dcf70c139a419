"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service starts with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PORT read unprefixed: Heroku/Railway-style platforms inject it that way
    - Unparsable PORT falls back to the default instead of failing startup
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3000
MAX_PORT = 65535


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: object) -> object:
        """'abc', '' or anything outside 0..65535 in PORT → default port."""
        if isinstance(v, str):
            try:
                v = int(v)
            except ValueError:
                return DEFAULT_PORT
        if isinstance(v, int) and not 0 <= v <= MAX_PORT:
            return DEFAULT_PORT
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
