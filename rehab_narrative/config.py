"""Configuration management for Rehab Narrative."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from rehab_narrative.lexicon import Lexicon, default_lexicon, load_lexicon


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REHAB_NARRATIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Lexicon
    lexicon_path: Optional[Path] = Field(
        default=None,
        description="JSON file overriding deficit phrases and vocabulary",
    )

    # Session
    archive_path: Path = Field(
        default=Path("./data/sessions/archive.json"),
        description="File backing the archive of generated notes",
    )
    history_limit: int = Field(
        default=50,
        ge=1,
        description="Max undo/redo snapshots kept per session",
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8080)
    api_key: str = Field(
        default="",
        description="API key for authenticating requests",
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @property
    def has_lexicon_override(self) -> bool:
        """Check if a lexicon override file is configured."""
        return self.lexicon_path is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_lexicon() -> Lexicon:
    """Lexicon from the configured override file, or the packaged default.

    Cached like the settings; clear both caches after changing the override.
    """
    settings = get_settings()
    if settings.has_lexicon_override:
        return load_lexicon(settings.lexicon_path)
    return default_lexicon()
