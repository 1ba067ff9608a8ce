"""
Education parser for resumes.

Builds education entries from the lines of an education section. A line
mentioning a degree or a graduation year starts a new entry; following lines
fill the institution and then the field of study.
"""

import re
from dataclasses import dataclass
from typing import Optional

from resume_extraction.data.models import EducationEntry
from resume_extraction.nlp.preprocessor import EDUCATION_RULE, SectionRule
from resume_extraction.utils.constants import (
    MAX_EDUCATION_TRIGGER_LENGTH,
    MAX_FIELD_LINE_LENGTH,
    MIN_FIELD_LINE_LENGTH,
)
from resume_extraction.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class EducationDraft:
    """An education entry still being assembled line by line."""

    degree: str = ""
    graduation_date: str = ""
    institution: str = ""
    field: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.institution and self.degree)

    def add_line(self, line: str) -> None:
        """Assign a line to the first empty slot: institution, then field."""
        if not (MIN_FIELD_LINE_LENGTH < len(line) < MAX_FIELD_LINE_LENGTH):
            return

        if not self.institution:
            self.institution = line
        elif not self.field:
            self.field = line

    def finalize(self) -> EducationEntry:
        return EducationEntry(
            institution=self.institution,
            degree=self.degree,
            field=self.field,
            graduation_date=self.graduation_date,
        )


class EducationParser:
    """Parser for extracting education from education-section lines."""

    YEAR_PATTERN = re.compile(r"\b(19|20)\d{2}\b", re.ASCII)

    # Unanchored: abbreviations also match inside longer words
    DEGREE_PATTERN = re.compile(
        r"(bachelor|master|phd|doctorate|associate|b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?)",
        re.IGNORECASE | re.ASCII,
    )

    def __init__(self, rule: SectionRule = EDUCATION_RULE):
        self.rule = rule

    def parse(self, education_lines: list[str]) -> list[EducationEntry]:
        """
        Parse education entries from the lines of an education section.

        Entries lacking an institution or a degree are dropped.

        Args:
            education_lines: Content lines of the education section

        Returns:
            Education entries in document order
        """
        education: list[EducationEntry] = []
        current: Optional[EducationDraft] = None

        for line in education_lines:
            if self.rule.is_closing(line):
                break

            year_match = self.YEAR_PATTERN.search(line)
            degree_match = self.DEGREE_PATTERN.search(line)

            if year_match or degree_match:
                self._flush(current, education)
                current = EducationDraft(
                    degree=degree_match.group(0) if degree_match else "",
                    graduation_date=year_match.group(0) if year_match else "",
                )
                # The trigger line doubles as the institution guess
                if MIN_FIELD_LINE_LENGTH < len(line) < MAX_EDUCATION_TRIGGER_LENGTH:
                    current.institution = line
            elif current is not None:
                current.add_line(line)

        self._flush(current, education)

        logger.debug(f"Parsed {len(education)} education entries")
        return education

    def _flush(
        self,
        draft: Optional[EducationDraft],
        education: list[EducationEntry],
    ) -> None:
        if draft is not None and draft.is_complete:
            education.append(draft.finalize())
