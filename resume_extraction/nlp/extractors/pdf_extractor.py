"""
PDF document text extractor.

Reads the embedded text of each page in document order. The library that
decodes the PDF is a page reader handed to PDFExtractor:
1. pypdf - default reader
2. pdfplumber - alternative reader, selected through configuration

Only the configured reader runs; a failure is not retried with the other one.
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from resume_extraction.utils.constants import PDF_MIME_TYPE
from resume_extraction.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


@dataclass
class PageText:
    """Text read from a single PDF page."""

    text: str
    has_images: bool = False


@dataclass
class PDFContent:
    """Pages and document metadata returned by a page reader."""

    pages: list[PageText]
    metadata: dict


# A page reader decodes a PDF file object into its pages' text
PageReader = Callable[[BinaryIO], PDFContent]


class EncryptedPDFError(Exception):
    """The PDF is encrypted and cannot be opened without a password."""


def read_pages_with_pypdf(file_obj: BinaryIO) -> PDFContent:
    """Read page text using pypdf."""
    from pypdf import PasswordType, PdfReader

    reader = PdfReader(file_obj)

    if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
        raise EncryptedPDFError("PDF is password protected")

    metadata = {"extractor": "pypdf"}
    if reader.metadata:
        metadata["pdf_metadata"] = {
            k: str(v) for k, v in reader.metadata.items()
            if v and k.startswith("/")
        }

    pages = []
    for page in reader.pages:
        text = page.extract_text() or ""
        has_images = False
        if not text.strip():
            resources = page.get("/Resources")
            xobjects = resources.get_object().get("/XObject") if resources else None
            if xobjects:
                has_images = any(
                    xobject.get_object().get("/Subtype") == "/Image"
                    for xobject in xobjects.get_object().values()
                )
        pages.append(PageText(text=text, has_images=has_images))

    return PDFContent(pages=pages, metadata=metadata)


def read_pages_with_pdfplumber(file_obj: BinaryIO) -> PDFContent:
    """Read page text using pdfplumber."""
    import pdfplumber

    metadata = {"extractor": "pdfplumber"}
    pages = []

    with pdfplumber.open(file_obj) as pdf:
        if pdf.metadata:
            metadata["pdf_metadata"] = {
                k: v for k, v in pdf.metadata.items()
                if v and isinstance(v, str)
            }

        for page in pdf.pages:
            text = page.extract_text() or ""
            pages.append(PageText(text=text, has_images=bool(page.images)))

    return PDFContent(pages=pages, metadata=metadata)


PAGE_READERS: dict[str, PageReader] = {
    "pypdf": read_pages_with_pypdf,
    "pdfplumber": read_pages_with_pdfplumber,
}


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    def __init__(self, page_reader: Optional[PageReader] = None):
        """
        Initialize the PDF extractor.

        Args:
            page_reader: Callable decoding a PDF file object into page text.
                Defaults to the pypdf reader.
        """
        self.page_reader = page_reader or read_pages_with_pypdf

    @classmethod
    def for_backend(cls, backend: str) -> "PDFExtractor":
        """Create an extractor using a named page reader ("pypdf" or "pdfplumber")."""
        try:
            return cls(PAGE_READERS[backend])
        except KeyError:
            raise ValueError(f"Unknown PDF backend: {backend}") from None

    @property
    def supported_mime_types(self) -> tuple[str, ...]:
        return (PDF_MIME_TYPE,)

    def extract_from_bytes(self, content: bytes) -> ExtractionResult:
        """Extract text from PDF bytes."""
        try:
            pdf = self.page_reader(io.BytesIO(content))
        except EncryptedPDFError as e:
            logger.warning(f"PDF extraction refused: {e}")
            raise self._extraction_error(str(e)) from e
        except Exception as e:
            logger.error(f"PDF extraction from bytes failed: {e}")
            raise self._extraction_error(f"Could not read PDF: {e}") from e

        text_parts = [page.text for page in pdf.pages if page.text]
        metadata = dict(pdf.metadata)
        metadata["page_count"] = len(pdf.pages)

        result = ExtractionResult(
            text="\n\n".join(text_parts),
            page_count=len(pdf.pages),
            metadata=metadata,
        )

        if result.is_empty:
            if any(page.has_images for page in pdf.pages):
                raise self._extraction_error(
                    "PDF contains only images; no embedded text to extract"
                )
            result.warnings.append("PDF contains no text")
            logger.debug("PDF decoded successfully but contains no text")

        return result
