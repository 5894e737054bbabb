"""
Configuration module for smart_speller.

This module defines the settings for the spelling corrector, including the
corpus location, the edit-distance bound of the deletion index and the
sentence candidate budget.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file from the working tree, regardless of current working directory
load_dotenv(find_dotenv(".env"))

DEFAULT_CORPUS_FILENAME = "frequency_dictionary_en.txt"


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Configuration settings for smart_speller.

    Settings are loaded from .env files and environment variables.
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment",
    )
    SERVICE_NAME: str = "smart_speller"
    VERSION: str = "1.0.0"

    # Corpus Settings
    CORPUS_PATH: str | None = Field(
        default=None,
        description="Override for the frequency dictionary; the bundled corpus is used when unset",
    )
    CORPUS_ENCODING: str = "utf-8"

    # Correction Settings
    MAX_EDIT_DISTANCE: int = Field(
        default=2, ge=1, le=3, description="Maximum deletion depth indexed and searched"
    )
    MAX_SENTENCE_CANDIDATES: int = Field(
        default=12, ge=1, description="Candidate budget for sentence expansion"
    )

    # Metrics Configuration
    ENABLE_METRICS: bool = Field(
        default=True, description="Record Prometheus metrics for index build and lookups"
    )

    @property
    def _package_dir(self) -> Path:
        """Get the package directory path (where this config.py file is located)."""
        return Path(__file__).parent

    @property
    def effective_corpus_path(self) -> str:
        """Get effective corpus path, supporting external overrides."""
        if self.CORPUS_PATH:
            return self.CORPUS_PATH
        return str(self._package_dir / "data" / DEFAULT_CORPUS_FILENAME)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="SMART_SPELLER_",
    )


# Create a single instance for the application to use
settings = Settings()
