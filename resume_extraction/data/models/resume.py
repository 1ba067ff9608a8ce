"""
Parsed resume data models.

Defines the structured record produced from a resume's text: skills, work
experience entries and education entries, plus the raw text they came from.
"""

from typing import Optional

from pydantic import Field

from .base import EmbeddedModel


class ExperienceEntry(EmbeddedModel):
    """A work experience entry."""

    company: str
    title: str
    start_date: str
    end_date: Optional[str] = None  # None when the position is ongoing
    description: str = ""


class EducationEntry(EmbeddedModel):
    """An education entry."""

    institution: str
    degree: str
    field: str = ""
    graduation_date: str = ""


class ParsedResumeData(EmbeddedModel):
    """Structured data extracted from a resume."""

    skills: list[str] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if no section produced any data."""
        return not (self.skills or self.experience or self.education)


class ResumeParseResult(EmbeddedModel):
    """Raw text of a resume together with the data parsed from it."""

    raw_text: str
    parsed_data: ParsedResumeData = Field(default_factory=ParsedResumeData)
