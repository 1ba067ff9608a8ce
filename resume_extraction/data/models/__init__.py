"""
Pydantic models for parsed resume data.
"""

from .base import EmbeddedModel
from .resume import (
    EducationEntry,
    ExperienceEntry,
    ParsedResumeData,
    ResumeParseResult,
)

__all__ = [
    "EmbeddedModel",
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResumeData",
    "ResumeParseResult",
]
