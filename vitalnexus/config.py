"""
Application Settings

Loaded once from the environment (and an optional `.env` file at the
working directory). Import the shared instance:

    from vitalnexus.config import settings
"""
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Runtime configuration for the VitalNexus backend."""

    model_config = SettingsConfigDict(
        env_prefix="VITALNEXUS_",
        env_file=".env",
        extra="ignore",
    )

    # ── Service ────────────────────────────────────────────────────────────
    app_name: str = "VitalNexus Health API"
    version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None

    # ── Storage ────────────────────────────────────────────────────────────
    # Accepts either VITALNEXUS_DATABASE_URL or the conventional DATABASE_URL.
    database_url: str = Field(
        default="sqlite:///./vitalnexus.db",
        validation_alias=AliasChoices("VITALNEXUS_DATABASE_URL", "DATABASE_URL"),
    )

    # ── Consultation store ─────────────────────────────────────────────────
    consultation_cache_dir: str = "./.consultation_cache"
    consultation_ttl_seconds: int = Field(default=3600, gt=0)

    # ── HTTP ───────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=4000, gt=0, lt=65536)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.upper() if isinstance(v, str) else v


settings = Settings()
