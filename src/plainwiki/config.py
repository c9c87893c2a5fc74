"""Application configuration."""

import logging
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_path: Path = Path("data")
    templates_dir: Path = TEMPLATES_DIR
    app_title: str = "PlainWiki"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PLAINWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


def load_settings() -> Settings:
    """Load settings once at startup.

    Invalid configuration is logged and replaced by the defaults so the
    server still starts.
    """
    try:
        return Settings()
    except ValidationError as e:
        logger.error("Error loading configuration, using defaults: %s", e)
        return Settings.model_construct()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
