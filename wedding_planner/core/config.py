# File: wedding_planner/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    # ---------------------------
    # Meta / Pydantic settings
    # ---------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # ---------------------------
    # Database (SQLite locally, PostgreSQL when DATABASE_URL says so)
    # ---------------------------
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./weddingwizard.db")

    # ---------------------------
    # Security / Session
    # ---------------------------
    SECRET_KEY: str = os.getenv("SECRET_KEY", "fallback-secret-key")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60)))
    SESSION_COOKIE_NAME: str = os.getenv("SESSION_COOKIE_NAME", "weddingwizard.sid")

    # ---------------------------
    # API / Project
    # ---------------------------
    API_STR: str = os.getenv("API_STR", "/api")
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Wedding Wizard")
    # gunicorn bind port, also the default local CORS origin
    PORT: int = int(os.getenv("PORT", "5000"))

    # ---------------------------
    # Environment / Logging
    # ---------------------------
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")  # development | staging | production
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")

    # Demo data on startup (development only)
    SEED_DEMO_DATA: bool = os.getenv("SEED_DEMO_DATA", "false").lower() == "true"

    # ---------------------------
    # Derived / Convenience
    # ---------------------------
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        """
        Origins allowed to send credentialed requests.
        Production reads ALLOWED_ORIGINS (comma separated); other environments
        fall back to the app port and the Vite dev server.
        """
        explicit = [url.strip() for url in self.ALLOWED_ORIGINS.split(",") if url.strip()]
        if explicit:
            return explicit
        if self.is_production:
            return []
        return [f"http://localhost:{self.PORT}", "http://localhost:5173"]


settings = Settings()
