"""
Central configuration loader.
Reads from environment variables (via .env); everything has a default.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Business Ideas API"
    APP_VERSION: str = "1.0.0"

    # API Server
    HOST: str = Field(default="localhost", validation_alias="HOST")
    PORT: int = Field(default=3001, validation_alias="PORT")
    SERVER_RELOAD: bool = Field(default=False, validation_alias="SERVER_RELOAD")
    CORS_ORIGINS: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    # Database
    DATABASE_PATH: Path = Field(
        default=_REPO_ROOT / "data" / "business_ideas.db",
        validation_alias="DATABASE_PATH",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_db_path(settings: Optional[Settings] = None) -> Path:
    return (settings or get_settings()).DATABASE_PATH
