"""
Application configuration settings.
Reads from CLIMBLOG_* environment variables and .env file.
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from climblog.services.layout_config import DEFAULT_DB_NAME


class Settings(BaseSettings):
    """Application settings."""

    # Store file, relative to the working directory
    DB_PATH: str = DEFAULT_DB_NAME

    # Start with an empty log when the store file does not exist yet
    CREATE_MISSING_DB: bool = True

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="CLIMBLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    @property
    def db_path(self) -> Path:
        """Store file as a Path."""
        return Path(self.DB_PATH)


# Global settings instance
settings = Settings()
