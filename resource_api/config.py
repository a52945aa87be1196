"""
Resource API - Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a local .env
       file), validates types/ranges, and provides a singleton `settings`.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Required values:
    PORT is the only required variable. If it is missing, constructing
    Settings raises pydantic.ValidationError and the process exits before
    anything is served.

Database connection:
    DATABASE_URL wins when set. Otherwise the URL is assembled from the
    libpq-style PGHOST / PGPORT / PGUSER / PGPASSWORD / PGDATABASE variables.
    Heroku/Render style URLs (postgres://, postgresql://) are rewritten to the
    asyncpg driver.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

ASYNC_PG_DRIVER = "postgresql+asyncpg"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(ge=1, le=65535, description="HTTP listen port (required)")

    # Comma-separated list of allowed origins; "*" allows any origin
    cors_origins: str = Field(default="*")

    log_level: str = Field(default="INFO")

    # ── Database ──────────────────────────────────────────────────────────
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the PG* variables when set",
    )
    pghost: str = Field(default="localhost")
    pgport: int = Field(default=5432, ge=1, le=65535)
    pguser: str = Field(default="postgres")
    pgpassword: str = Field(default="")
    pgdatabase: str = Field(default="postgres")

    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── Discord webhook ───────────────────────────────────────────────────
    # Both id and token must be present for notifications to be sent
    discord_id: Optional[str] = Field(default=None)
    discord_token: Optional[str] = Field(default=None)
    discord_api_base: str = Field(default="https://discord.com/api")
    notification_avatar_url: str = Field(default="https://i.imgur.com/AfFp7pu.png")
    frontend_url: str = Field(default="https://new-resource.netlify.app")

    # ── Notification retry (tenacity) ─────────────────────────────────────
    notify_max_attempts: int = Field(default=3, ge=1, le=10)
    notify_min_wait: float = Field(default=1.0, ge=0, le=30)
    notify_max_wait: float = Field(default=10.0, ge=0, le=120)
    notify_timeout: float = Field(default=10.0, gt=0, le=120)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("discord_id", "discord_token")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def sqlalchemy_url(self) -> str:
        """
        The async SQLAlchemy URL for the configured database.

        postgres://u:p@h/db    → postgresql+asyncpg://u:p@h/db
        postgresql://u:p@h/db  → postgresql+asyncpg://u:p@h/db
        sqlite+aiosqlite:///x  → unchanged
        """
        if self.database_url:
            url = self.database_url
            for prefix in ("postgres://", "postgresql://"):
                if url.startswith(prefix):
                    return ASYNC_PG_DRIVER + "://" + url[len(prefix):]
            return url

        return URL.create(
            ASYNC_PG_DRIVER,
            username=self.pguser,
            password=self.pgpassword or None,
            host=self.pghost,
            port=self.pgport,
            database=self.pgdatabase,
        ).render_as_string(hide_password=False)

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.discord_id and self.discord_token)

    @property
    def webhook_url(self) -> Optional[str]:
        """Discord execute-webhook endpoint, or None when not configured."""
        if not self.notifications_enabled:
            return None
        base = self.discord_api_base.rstrip("/")
        return f"{base}/webhooks/{self.discord_id}/{self.discord_token}"


# Singleton instance, imported throughout the application.
# Raises pydantic.ValidationError at import when PORT is not set.
settings = Settings()
