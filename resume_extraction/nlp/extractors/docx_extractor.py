"""
DOCX document text extractor.

Uses python-docx to read the document body in order.
"""

import io

from docx import Document
from docx.table import Table

from resume_extraction.utils.constants import DOCX_MIME_TYPE
from resume_extraction.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx)."""

    @property
    def supported_mime_types(self) -> tuple[str, ...]:
        return (DOCX_MIME_TYPE,)

    def extract_from_bytes(self, content: bytes) -> ExtractionResult:
        """Extract text from DOCX bytes."""
        try:
            doc = Document(io.BytesIO(content))
            return self._process_document(doc)
        except Exception as e:
            logger.error(f"DOCX extraction from bytes failed: {e}")
            raise self._extraction_error(f"Could not read DOCX: {e}") from e

    def _process_document(self, doc) -> ExtractionResult:
        """Process a python-docx Document object."""
        metadata = {"extractor": "python-docx"}

        # Body paragraphs and tables, in the order they appear
        text_parts = []
        for block in doc.iter_inner_content():
            if isinstance(block, Table):
                text_parts.extend(self._table_lines(block))
            else:
                text_parts.append(block.text)

        try:
            props = doc.core_properties
            metadata["document_properties"] = {
                "author": props.author,
                "title": props.title,
                "created": str(props.created) if props.created else None,
                "modified": str(props.modified) if props.modified else None,
            }
        except Exception as e:
            logger.debug(f"Could not extract document properties: {e}")

        # Count sections as "pages" (approximate)
        section_count = len(doc.sections) if doc.sections else 1

        result = ExtractionResult(
            text="\n".join(text_parts),
            page_count=section_count,
            metadata=metadata,
        )

        if result.is_empty:
            result.warnings.append("Document appears to be empty or contains only images")

        return result

    def _table_lines(self, table: Table) -> list[str]:
        """Flatten a table into one line per cell paragraph, row by row."""
        lines = []
        for row in table.rows:
            for cell in row.cells:
                lines.extend(paragraph.text for paragraph in cell.paragraphs)
        return lines
