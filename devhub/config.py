"""Configuration for the DevHub dashboard service."""
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Load .env from project root (one level above devhub/)
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=False)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # GitHub
    github_api_base: str = Field(default="https://api.github.com")
    github_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for each outbound GitHub request"
    )

    # Proxy endpoint
    proxy_propagate_status: bool = Field(
        default=False,
        description="Relay the upstream status code instead of always answering 200"
    )

    # Dashboard
    leaderboard_size: int = Field(default=5, ge=0)

    # Server
    server_host: str = Field(default="0.0.0.0")
    server_port: int = Field(default=3000)

    # Application Settings
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    class Config:
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()


settings = get_settings()
