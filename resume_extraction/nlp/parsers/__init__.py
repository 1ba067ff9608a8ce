"""
Resume section parsers for extracting structured information.

Each parser consumes the content lines of one section (see
resume_extraction.nlp.preprocessor) and returns that section's records.
"""

from .skills_parser import SkillsParser
from .experience_parser import ExperienceParser, ExperienceDraft
from .education_parser import EducationParser, EducationDraft

__all__ = [
    "SkillsParser",
    "ExperienceParser",
    "ExperienceDraft",
    "EducationParser",
    "EducationDraft",
]
