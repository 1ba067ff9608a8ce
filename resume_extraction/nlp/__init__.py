"""
Resume parsing pipeline.

Main Components:
- ResumeParser: Main orchestrator for parsing resumes
- ExtractorFactory: Document text extraction (PDF, DOCX)
- SectionSegmenter: Skills / experience / education section detection
- SkillsParser: Skills tokenization
- ExperienceParser: Work experience extraction
- EducationParser: Education extraction
"""

from .resume_parser import (
    ResumeParser,
    get_resume_parser,
    parse_resume,
)

from .preprocessor import (
    SectionRule,
    SectionSegmenter,
    SegmentedSections,
    SECTION_RULES,
    split_lines,
)

from .extractors import (
    ExtractorFactory,
    ExtractionResult,
    BaseExtractor,
    PDFExtractor,
    DOCXExtractor,
)

from .parsers import (
    SkillsParser,
    ExperienceParser,
    EducationParser,
)

__all__ = [
    # Main parser
    "ResumeParser",
    "get_resume_parser",
    "parse_resume",
    # Preprocessor
    "SectionRule",
    "SectionSegmenter",
    "SegmentedSections",
    "SECTION_RULES",
    "split_lines",
    # Extractors
    "ExtractorFactory",
    "ExtractionResult",
    "BaseExtractor",
    "PDFExtractor",
    "DOCXExtractor",
    # Parsers
    "SkillsParser",
    "ExperienceParser",
    "EducationParser",
]
