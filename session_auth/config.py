"""Application configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_path: str = "/data/session-auth.db"

    # Server
    public_url: str = "http://localhost:9000"
    log_level: str = "info"

    # Session cookie
    session_cookie_name: str = "chocolatechip"
    session_max_age_seconds: int = 60 * 60
    session_cookie_secure: bool = False  # Set true behind HTTPS
    session_cookie_httponly: bool = True

    # Expired session sweep
    session_cleanup_minutes: int = 15

    # Credentials
    bcrypt_rounds: int = 6
    min_password_length: int = 4

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
