"""
Work experience parser for resumes.

Builds experience entries from the lines of an experience section. A date
range line starts a new entry; the following lines fill, in order, the
company, the job title and then the description.
"""

import re
from dataclasses import dataclass
from typing import Optional

from resume_extraction.data.models import ExperienceEntry
from resume_extraction.nlp.preprocessor import EXPERIENCE_RULE, SPACE_CLASS, SectionRule
from resume_extraction.utils.constants import (
    MAX_FIELD_LINE_LENGTH,
    MIN_FIELD_LINE_LENGTH,
    ONGOING_END_DATES,
)
from resume_extraction.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ExperienceDraft:
    """An experience entry still being assembled line by line."""

    start_date: str
    end_date: Optional[str] = None
    company: str = ""
    title: str = ""
    description: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.company and self.title)

    def add_line(self, line: str) -> None:
        """Assign a line to the first empty slot: company, title, then description."""
        fits = MIN_FIELD_LINE_LENGTH < len(line) < MAX_FIELD_LINE_LENGTH

        if not self.company and fits:
            self.company = line
        elif not self.title and fits:
            self.title = line
        else:
            self.description += (" " if self.description else "") + line

    def finalize(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            description=self.description,
        )


class ExperienceParser:
    """Parser for extracting work experience from experience-section lines."""

    # "2019 - 2021", "Jan 2020 to Present", "March 2018 – current"
    DATE_RANGE_PATTERN = re.compile(
        rf"(\d{{4}}|\w+[{SPACE_CLASS}]+\d{{4}})[{SPACE_CLASS}]*[-–—to]+[{SPACE_CLASS}]*"
        rf"(\d{{4}}|\w+[{SPACE_CLASS}]+\d{{4}}|present|current)",
        re.IGNORECASE | re.ASCII,
    )

    def __init__(self, rule: SectionRule = EXPERIENCE_RULE):
        self.rule = rule

    def parse(self, experience_lines: list[str]) -> list[ExperienceEntry]:
        """
        Parse experience entries from the lines of an experience section.

        Entries lacking a company or a title are dropped.

        Args:
            experience_lines: Content lines of the experience section

        Returns:
            Experience entries in document order
        """
        experiences: list[ExperienceEntry] = []
        current: Optional[ExperienceDraft] = None

        for line in experience_lines:
            if self.rule.is_closing(line):
                break

            date_match = self.DATE_RANGE_PATTERN.search(line)

            if date_match:
                self._flush(current, experiences)
                current = self._start_entry(date_match)
            elif current is not None:
                current.add_line(line)

        self._flush(current, experiences)

        logger.debug(f"Parsed {len(experiences)} experience entries")
        return experiences

    def _start_entry(self, date_match: re.Match) -> ExperienceDraft:
        start_date, end_date = date_match.group(1), date_match.group(2)

        if end_date.lower() in ONGOING_END_DATES:
            end_date = None

        return ExperienceDraft(start_date=start_date, end_date=end_date)

    def _flush(
        self,
        draft: Optional[ExperienceDraft],
        experiences: list[ExperienceEntry],
    ) -> None:
        if draft is not None and draft.is_complete:
            experiences.append(draft.finalize())
