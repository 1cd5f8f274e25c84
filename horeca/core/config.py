# horeca/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

    DATABASE_URL: str
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Horeca Menu Management API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:3000"

    SESSION_COOKIE_NAME: str = "session_id"
    SESSION_MAX_AGE: int = 86400 * 30  # 30 days
    SESSION_COOKIE_SECURE: bool = True
    SESSION_COOKIE_HTTPONLY: bool = True
    SESSION_COOKIE_SAMESITE: str = "lax"
    SESSION_COOKIE_DOMAIN: str | None = None

    BCRYPT_ROUNDS: int = 10

    # Calendar year reported as "this year" by /sales when no year is requested
    SALES_REFERENCE_YEAR: int = 2025

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert CORS_ORIGINS string to list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


settings = Settings()
