"""
Data layer for the resume extraction pipeline.

Holds the pydantic models that make up the pipeline's output record.
"""

from resume_extraction.data.models import (
    EducationEntry,
    ExperienceEntry,
    ParsedResumeData,
    ResumeParseResult,
)

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResumeData",
    "ResumeParseResult",
]
