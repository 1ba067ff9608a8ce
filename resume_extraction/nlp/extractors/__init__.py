"""
Document text extractors.

Supports extraction of text from PDF and DOCX files.
"""

from .base import BaseExtractor, ExtractionResult
from .pdf_extractor import (
    PDFExtractor,
    PageText,
    PDFContent,
    read_pages_with_pdfplumber,
    read_pages_with_pypdf,
)
from .docx_extractor import DOCXExtractor
from .extractor_factory import ExtractorFactory

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "PDFExtractor",
    "PageText",
    "PDFContent",
    "read_pages_with_pypdf",
    "read_pages_with_pdfplumber",
    "DOCXExtractor",
    "ExtractorFactory",
]
