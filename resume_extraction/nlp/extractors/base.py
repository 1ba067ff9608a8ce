"""
Base extractor class for document text extraction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from resume_extraction.exceptions import ExtractionFailedError


@dataclass
class ExtractionResult:
    """Result of text extraction from a document."""

    text: str
    page_count: int = 1
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in empty text."""
        return len(self.text.strip()) == 0


class BaseExtractor(ABC):
    """
    Abstract base class for document text extractors.

    All format-specific extractors should inherit from this class. Extractors
    raise ExtractionFailedError instead of returning partial text.
    """

    @property
    @abstractmethod
    def supported_mime_types(self) -> tuple[str, ...]:
        """Return tuple of MIME types this extractor decodes."""
        pass

    def can_extract(self, mime_type: str) -> bool:
        """Check if this extractor can handle the given MIME type."""
        return mime_type in self.supported_mime_types

    @abstractmethod
    def extract_from_bytes(self, content: bytes) -> ExtractionResult:
        """
        Extract text content from document bytes.

        Args:
            content: Raw bytes of the document

        Returns:
            ExtractionResult containing the extracted text and metadata

        Raises:
            ExtractionFailedError: If the document cannot be decoded
        """
        pass

    def _extraction_error(self, message: str) -> ExtractionFailedError:
        """Build the extraction error for this extractor's format."""
        return ExtractionFailedError(self.supported_mime_types[0], message)
