"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Retrieval ─────────────────────────────────────────
    fetch_connect_timeout: float = 10.0
    fetch_read_timeout: float = 20.0
    fetch_follow_redirects: bool = True
    fetch_user_agent: str = "HtmlAnalyzer/1.0"
    fetch_max_lines: int = 100_000

    # ── Logging ───────────────────────────────────────────
    log_level: str = "WARNING"

    # ── HTTP API ──────────────────────────────────────────
    allowed_origins: str = "*"


@lru_cache
def get_settings() -> Settings:
    return Settings()
