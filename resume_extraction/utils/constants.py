"""
Application-wide constants for the resume extraction pipeline.

This module contains constant values used throughout the application.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resume-extraction"
APP_DISPLAY_NAME: Final[str] = "Resume Text Extraction Pipeline"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Document Types
# =============================================================================

PDF_MIME_TYPE: Final[str] = "application/pdf"
DOCX_MIME_TYPE: Final[str] = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
FALLBACK_MIME_TYPE: Final[str] = "application/octet-stream"

SUPPORTED_MIME_TYPES: Final[tuple[str, ...]] = (
    PDF_MIME_TYPE,
    DOCX_MIME_TYPE,
)

# Extension to MIME type, as resolved for uploaded resume files
EXTENSION_MIME_TYPES: Final[dict[str, str]] = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
}


# =============================================================================
# Parsing Constants
# =============================================================================

# Characters that separate entries on a skills line
SKILL_DELIMITERS: Final[tuple[str, ...]] = (",", ";", "|", "•", "·")

# Skill token length bounds (exclusive)
MIN_SKILL_LENGTH: Final[int] = 1
MAX_SKILL_LENGTH: Final[int] = 50

# Company / title / institution / field line length bounds (exclusive)
MIN_FIELD_LINE_LENGTH: Final[int] = 3
MAX_FIELD_LINE_LENGTH: Final[int] = 100

# Upper bound (exclusive) for reusing an education trigger line as institution
MAX_EDUCATION_TRIGGER_LENGTH: Final[int] = 200

# Whitespace recognized when trimming lines and matching section patterns,
# including no-break, ideographic and zero-width no-break spaces
WHITESPACE_CHARS: Final[str] = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# End-date tokens meaning the position is ongoing
ONGOING_END_DATES: Final[frozenset[str]] = frozenset({"present", "current"})


# =============================================================================
# Enums
# =============================================================================


class SectionType(str, Enum):
    """Resume sections recognized by the segmenter."""

    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"


class ErrorCode(str, Enum):
    """Distinguishable failure kinds raised by the pipeline."""

    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"
    EXTRACTION_FAILED = "EXTRACTION_FAILED"
