"""
Configuration management for the resume extraction pipeline.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent
DATA_DIR = ROOT_DIR / "data"


class StorageSettings(BaseSettings):
    """Local document storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    root_dir: Path = DATA_DIR / "resumes"
    max_document_bytes: int = 10 * 1024 * 1024  # 10MB

    @field_validator("max_document_bytes")
    @classmethod
    def validate_max_document_bytes(cls, v: int) -> int:
        """Document size limit must be positive."""
        if v <= 0:
            raise ValueError("max_document_bytes must be positive")
        return v


class ParserSettings(BaseSettings):
    """Text extraction and parsing configuration."""

    model_config = SettingsConfigDict(env_prefix="PARSER_")

    # PDF text reader; there is no fallback between the two
    pdf_backend: Literal["pypdf", "pdfplumber"] = "pypdf"

    # Bound on fetch + decode, in seconds (None disables the limit)
    timeout_seconds: Optional[float] = None

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Timeout must be positive when set."""
        if v is not None and v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "resume_extraction.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "resume-extraction"
    version: str = "0.1.0"
    description: str = "Resume text extraction and structuring pipeline"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    parser: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
