"""
Factory for selecting the document extractor for a MIME type.
"""

from typing import Optional

from resume_extraction.exceptions import UnsupportedFormatError
from resume_extraction.utils.config import get_settings
from resume_extraction.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor

logger = get_logger(__name__)


class ExtractorFactory:
    """
    Selects the extractor for a declared MIME type.

    Only PDF and DOCX are supported; any other MIME type raises
    UnsupportedFormatError.
    """

    def __init__(self, extractors: Optional[list[BaseExtractor]] = None):
        """
        Initialize the factory.

        Args:
            extractors: Extractors to dispatch to. Defaults to a PDF extractor
                using the configured backend and a DOCX extractor.
        """
        if extractors is None:
            settings = get_settings()
            extractors = [
                PDFExtractor.for_backend(settings.parser.pdf_backend),
                DOCXExtractor(),
            ]
        self._extractors = extractors

    def get_extractor(self, mime_type: str) -> BaseExtractor:
        """
        Get the extractor for a MIME type.

        Raises:
            UnsupportedFormatError: If no extractor handles the MIME type
        """
        for extractor in self._extractors:
            if extractor.can_extract(mime_type):
                return extractor

        logger.warning(f"No extractor found for MIME type: {mime_type}")
        raise UnsupportedFormatError(mime_type)

    def extract_from_bytes(self, content: bytes, mime_type: str) -> ExtractionResult:
        """
        Extract text from document bytes using the extractor for the MIME type.

        Raises:
            UnsupportedFormatError: If the MIME type is not supported
            ExtractionFailedError: If the document cannot be decoded
        """
        extractor = self.get_extractor(mime_type)
        logger.debug(f"Extracting {len(content)} bytes with {extractor.__class__.__name__}")
        return extractor.extract_from_bytes(content)

    def get_supported_mime_types(self) -> list[str]:
        """Get list of all supported MIME types."""
        mime_types = []
        for extractor in self._extractors:
            mime_types.extend(extractor.supported_mime_types)
        return mime_types

    def is_supported(self, mime_type: str) -> bool:
        """Check if a MIME type is supported."""
        return any(extractor.can_extract(mime_type) for extractor in self._extractors)
