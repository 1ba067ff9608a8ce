"""
Utility modules for the resume extraction pipeline.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from resume_extraction.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    DATA_DIR,
)
from resume_extraction.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    PDF_MIME_TYPE,
    DOCX_MIME_TYPE,
    SUPPORTED_MIME_TYPES,
    SectionType,
    ErrorCode,
)
from resume_extraction.utils.logger import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "DATA_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "PDF_MIME_TYPE",
    "DOCX_MIME_TYPE",
    "SUPPORTED_MIME_TYPES",
    "SectionType",
    "ErrorCode",
    # Logger
    "setup_logging",
    "get_logger",
]
