"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Autodidact"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./autodidact.db"

    # Cookie signing
    secret_key: str = "change-me-in-production-use-env"

    # Session cookie for guest
    session_cookie_name: str = "autodidact_session_id"
    session_cookie_max_age: int = 60 * 60 * 24 * 30  # 30 days

    # Auth cookie (session-based for logged-in users)
    auth_cookie_name: str = "autodidact_auth"
    auth_cookie_max_age: int = 60 * 60 * 24 * 14  # 14 days

    # Free tier: distinct questions an anonymous visitor may open
    free_question_quota: int = 5

    # Client side
    api_base_url: str = "http://127.0.0.1:8000"
    request_timeout: float = 10.0
    tour_store_path: str = str(Path.home() / ".autodidact" / "local_storage.json")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
