"""
Skills parser for resumes.

Tokenizes the lines of a skills section into a list of skill names.
"""

import re

from resume_extraction.utils.constants import (
    MAX_SKILL_LENGTH,
    MIN_SKILL_LENGTH,
    SKILL_DELIMITERS,
    WHITESPACE_CHARS,
)
from resume_extraction.utils.logger import get_logger

logger = get_logger(__name__)


class SkillsParser:
    """Parser for extracting skills from skills-section lines."""

    DELIMITER_PATTERN = re.compile("|".join(re.escape(d) for d in SKILL_DELIMITERS))

    def parse(self, skill_lines: list[str]) -> list[str]:
        """
        Parse skills from the lines of a skills section.

        Args:
            skill_lines: Content lines of the skills section

        Returns:
            Skill names in first-seen order, without exact duplicates
        """
        skills: list[str] = []

        for line in skill_lines:
            skills.extend(self._tokenize(line))

        # Exact-match dedup; "Python" and "python" are different skills
        return list(dict.fromkeys(skills))

    def _tokenize(self, line: str) -> list[str]:
        """Split a line on skill delimiters, keeping tokens of plausible length."""
        tokens = []
        for token in self.DELIMITER_PATTERN.split(line):
            token = token.strip(WHITESPACE_CHARS)
            if MIN_SKILL_LENGTH < len(token) < MAX_SKILL_LENGTH:
                tokens.append(token)
        return tokens
