"""
Text preprocessing for resume parsing.

Splits extracted text into lines and detects the skills, experience and
education sections by their header lines.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from resume_extraction.utils.constants import WHITESPACE_CHARS, SectionType
from resume_extraction.utils.logger import get_logger

logger = get_logger(__name__)

# Escaped members of WHITESPACE_CHARS, for use inside a character class;
# patterns are compiled with re.ASCII, which would narrow \s
SPACE_CLASS = re.escape(WHITESPACE_CHARS)


def split_lines(text: str) -> list[str]:
    """Split text into stripped, non-empty lines, keeping their order."""
    stripped = (line.strip(WHITESPACE_CHARS) for line in text.split("\n"))
    return [line for line in stripped if line]


@dataclass(frozen=True)
class SectionRule:
    """
    How one section is found in a resume.

    A section opens on a line that is entirely one of its header phrases
    (optionally followed by colons/whitespace) and closes on a line that
    starts with one of its closing words. When ``stop_on_close`` is set the
    first closing line ends the scan; otherwise a later header reopens it.
    """

    section_type: SectionType
    header_pattern: re.Pattern
    closing_pattern: re.Pattern
    stop_on_close: bool = True

    def is_header(self, line: str) -> bool:
        return self.header_pattern.match(line) is not None

    def is_closing(self, line: str) -> bool:
        return self.closing_pattern.match(line) is not None

    def iter_section_lines(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the content lines of this section, headers excluded."""
        in_section = False

        for line in lines:
            if self.is_header(line):
                in_section = True
                continue

            if in_section and self.is_closing(line):
                if self.stop_on_close:
                    return
                in_section = False

            if in_section:
                yield line


def _header(*phrases: str) -> re.Pattern:
    return re.compile(rf"^({'|'.join(phrases)})[{SPACE_CLASS}:]*$", re.IGNORECASE | re.ASCII)


def _closing(*words: str) -> re.Pattern:
    return re.compile(rf"^({'|'.join(words)})", re.IGNORECASE | re.ASCII)


SKILLS_RULE = SectionRule(
    section_type=SectionType.SKILLS,
    header_pattern=_header(r"skills?", r"technical skills?", "core competencies", "technologies"),
    closing_pattern=_closing("experience", "education", "work history", "employment"),
    stop_on_close=False,
)

EXPERIENCE_RULE = SectionRule(
    section_type=SectionType.EXPERIENCE,
    header_pattern=_header("experience", "work history", "employment", "professional experience"),
    closing_pattern=_closing("education", "certifications", "projects"),
)

EDUCATION_RULE = SectionRule(
    section_type=SectionType.EDUCATION,
    header_pattern=_header("education", "academic background", "qualifications"),
    closing_pattern=_closing("experience", "certifications", "projects", "skills"),
)

SECTION_RULES: dict[SectionType, SectionRule] = {
    rule.section_type: rule for rule in (SKILLS_RULE, EXPERIENCE_RULE, EDUCATION_RULE)
}


@dataclass
class SegmentedSections:
    """Content lines of each recognized section."""

    skill_lines: list[str] = field(default_factory=list)
    experience_lines: list[str] = field(default_factory=list)
    education_lines: list[str] = field(default_factory=list)


class SectionSegmenter:
    """
    Partitions resume lines into skills, experience and education content.

    Each section is found by its own pass over the full line list, so the
    passes never interfere with one another. Lines outside any recognized
    section are dropped.
    """

    def __init__(self, rules: dict[SectionType, SectionRule] = SECTION_RULES):
        self.rules = rules

    def section_lines(self, lines: list[str], section_type: SectionType) -> list[str]:
        """Collect the content lines of one section."""
        return list(self.rules[section_type].iter_section_lines(lines))

    def segment(self, lines: list[str]) -> SegmentedSections:
        """
        Segment resume lines into sections.

        Args:
            lines: Stripped, non-empty lines (see split_lines)

        Returns:
            SegmentedSections with the content lines of each section
        """
        sections = SegmentedSections(
            skill_lines=self.section_lines(lines, SectionType.SKILLS),
            experience_lines=self.section_lines(lines, SectionType.EXPERIENCE),
            education_lines=self.section_lines(lines, SectionType.EDUCATION),
        )

        logger.debug(
            f"Segmented {len(lines)} lines: {len(sections.skill_lines)} skills, "
            f"{len(sections.experience_lines)} experience, "
            f"{len(sections.education_lines)} education"
        )
        return sections
