"""
Main resume parser orchestrator.

Coordinates document fetching, text extraction, section detection and the
section parsers to turn a stored resume into structured data.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Optional

from resume_extraction.data.models import ParsedResumeData, ResumeParseResult
from resume_extraction.exceptions import (
    DownloadFailedError,
    ExtractionFailedError,
    ResumeParsingError,
)
from resume_extraction.services.storage_service import StorageService, get_storage_service
from resume_extraction.utils.config import get_settings
from resume_extraction.utils.logger import get_logger

from .extractors import ExtractionResult, ExtractorFactory
from .parsers import EducationParser, ExperienceParser, SkillsParser
from .preprocessor import SectionSegmenter, split_lines

logger = get_logger(__name__)


class ResumeParser:
    """
    Main resume parser that orchestrates the parsing pipeline.

    Pipeline:
    1. Check the declared MIME type is supported
    2. Fetch the document bytes from storage
    3. Extract text from the document (PDF or DOCX)
    4. Split the text into lines and detect sections
    5. Extract skills, work experience and education
    6. Return the raw text with the structured data

    The parser keeps no per-call state, so one instance can serve
    concurrent calls.
    """

    def __init__(
        self,
        storage: Optional[StorageService] = None,
        extractor_factory: Optional[ExtractorFactory] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the resume parser.

        Args:
            storage: Storage service supplying document bytes. Defaults to the
                configured local storage.
            extractor_factory: Extractor dispatch by MIME type
            timeout: Default bound in seconds on fetch + extraction. Defaults
                to the configured value (no bound when unset).
        """
        self.storage = storage or get_storage_service()
        self.extractor_factory = extractor_factory or ExtractorFactory()
        self.timeout = timeout if timeout is not None else get_settings().parser.timeout_seconds
        self.segmenter = SectionSegmenter()
        self.skills_parser = SkillsParser()
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()

    def parse_resume(
        self,
        storage_path: str,
        mime_type: str,
        timeout: Optional[float] = None,
    ) -> ResumeParseResult:
        """
        Parse a stored resume.

        Args:
            storage_path: Location of the document in storage
            mime_type: Declared MIME type of the document
            timeout: Bound in seconds on fetch + extraction, overriding the
                parser default

        Returns:
            ResumeParseResult with the raw text and parsed data

        Raises:
            UnsupportedFormatError: If the MIME type is not PDF or DOCX
            DownloadFailedError: If storage cannot supply the document
            ExtractionFailedError: If no text can be extracted, or the
                timeout expires
        """
        start_time = time.time()

        # Reject before any fetch is attempted
        self.extractor_factory.get_extractor(mime_type)

        timeout = timeout if timeout is not None else self.timeout
        logger.debug(f"Parsing resume {storage_path} ({mime_type})")

        try:
            extraction = self._run_with_timeout(storage_path, mime_type, timeout)
        except ResumeParsingError as e:
            logger.error(f"Error parsing resume {storage_path}: [{e.code.value}] {e}")
            raise

        result = ResumeParseResult(
            raw_text=extraction.text,
            parsed_data=self.parse_text(extraction.text),
        )

        elapsed_ms = int((time.time() - start_time) * 1000)
        data = result.parsed_data
        logger.info(
            f"Parsed resume {storage_path} in {elapsed_ms}ms: "
            f"{len(data.skills)} skills, {len(data.experience)} experience, "
            f"{len(data.education)} education"
        )
        return result

    def parse_bytes(self, content: bytes, mime_type: str) -> ResumeParseResult:
        """
        Parse a resume from bytes already in memory.

        Raises:
            UnsupportedFormatError: If the MIME type is not PDF or DOCX
            ExtractionFailedError: If no text can be extracted
        """
        extraction = self.extractor_factory.extract_from_bytes(content, mime_type)
        return ResumeParseResult(
            raw_text=extraction.text,
            parsed_data=self.parse_text(extraction.text),
        )

    def parse_text(self, text: str) -> ParsedResumeData:
        """
        Extract structured data from resume text.

        Finding nothing is not an error; the lists are simply empty.
        """
        lines = split_lines(text)
        sections = self.segmenter.segment(lines)

        return ParsedResumeData(
            skills=self.skills_parser.parse(sections.skill_lines),
            experience=self.experience_parser.parse(sections.experience_lines),
            education=self.education_parser.parse(sections.education_lines),
        )

    def _fetch_and_extract(self, storage_path: str, mime_type: str) -> ExtractionResult:
        """Fetch document bytes and extract their text."""
        try:
            document = self.storage.fetch_bytes(storage_path)
        except DownloadFailedError:
            raise
        except Exception as e:
            raise DownloadFailedError(storage_path) from e

        extraction = self.extractor_factory.extract_from_bytes(document.content, mime_type)

        for warning in extraction.warnings:
            logger.warning(f"{storage_path}: {warning}")

        return extraction

    def _run_with_timeout(
        self,
        storage_path: str,
        mime_type: str,
        timeout: Optional[float],
    ) -> ExtractionResult:
        """Run fetch + extraction, bounded by the timeout when one is set."""
        if timeout is None:
            return self._fetch_and_extract(storage_path, mime_type)

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="resume-extract")
        future = executor.submit(self._fetch_and_extract, storage_path, mime_type)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            future.cancel()
            raise ExtractionFailedError(
                mime_type,
                f"Extraction of {storage_path} timed out after {timeout}s",
            ) from e
        finally:
            executor.shutdown(wait=False)


# Singleton instance
_resume_parser: Optional[ResumeParser] = None


def get_resume_parser() -> ResumeParser:
    """Get the resume parser singleton instance."""
    global _resume_parser
    if _resume_parser is None:
        _resume_parser = ResumeParser()
    return _resume_parser


def parse_resume(storage_path: str, mime_type: str) -> ResumeParseResult:
    """Parse a stored resume with the default parser."""
    return get_resume_parser().parse_resume(storage_path, mime_type)
