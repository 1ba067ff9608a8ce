"""
Tests for resume_extraction.nlp.extractors — PDF/DOCX extraction and MIME dispatch.
"""

import pytest

from resume_extraction.exceptions import ExtractionFailedError, UnsupportedFormatError
from resume_extraction.nlp.extractors import (
    DOCXExtractor,
    ExtractionResult,
    ExtractorFactory,
    PageText,
    PDFContent,
    PDFExtractor,
    read_pages_with_pdfplumber,
    read_pages_with_pypdf,
)
from resume_extraction.nlp.preprocessor import split_lines
from resume_extraction.utils.constants import DOCX_MIME_TYPE, PDF_MIME_TYPE


def fake_reader(*pages: PageText):
    def _read(file_obj):
        return PDFContent(pages=list(pages), metadata={"extractor": "fake"})

    return _read


# ── ExtractionResult ────────────────────────────────────────────────────────


class TestExtractionResult:
    def test_text_is_not_empty(self):
        assert not ExtractionResult(text="Python developer\nAcme").is_empty

    def test_whitespace_is_empty(self):
        assert ExtractionResult(text=" \n\n ").is_empty


# ── PDFExtractor ────────────────────────────────────────────────────────────


class TestPDFExtractor:
    def test_pages_joined_in_order(self):
        extractor = PDFExtractor(fake_reader(PageText("Skills\nPython"), PageText("Experience")))
        result = extractor.extract_from_bytes(b"%PDF")

        assert result.text == "Skills\nPython\n\nExperience"
        assert result.page_count == 2
        assert result.metadata["extractor"] == "fake"

    def test_blank_document_is_valid(self):
        extractor = PDFExtractor(fake_reader(PageText("")))
        result = extractor.extract_from_bytes(b"%PDF")

        assert result.text == ""
        assert result.warnings

    def test_image_only_document_fails(self):
        extractor = PDFExtractor(fake_reader(PageText("", has_images=True)))
        with pytest.raises(ExtractionFailedError):
            extractor.extract_from_bytes(b"%PDF")

    def test_reader_error_becomes_extraction_failure(self):
        def broken_reader(file_obj):
            raise ValueError("bad xref")

        with pytest.raises(ExtractionFailedError) as exc_info:
            PDFExtractor(broken_reader).extract_from_bytes(b"%PDF")

        assert isinstance(exc_info.value.__cause__, ValueError)
        assert exc_info.value.mime_type == PDF_MIME_TYPE

    def test_reader_receives_document_bytes(self):
        seen = []

        def recording_reader(file_obj):
            seen.append(file_obj.read())
            return PDFContent(pages=[], metadata={})

        PDFExtractor(recording_reader).extract_from_bytes(b"%PDF-1.4 data")
        assert seen == [b"%PDF-1.4 data"]

    def test_for_backend(self):
        assert PDFExtractor.for_backend("pypdf").page_reader is read_pages_with_pypdf
        assert PDFExtractor.for_backend("pdfplumber").page_reader is read_pages_with_pdfplumber

    def test_for_unknown_backend(self):
        with pytest.raises(ValueError):
            PDFExtractor.for_backend("ocr")

    def test_default_reader_is_pypdf(self):
        assert PDFExtractor().page_reader is read_pages_with_pypdf

    @pytest.mark.parametrize("backend", ["pypdf", "pdfplumber"])
    def test_real_pdf(self, make_text_pdf, backend):
        lines = ["Skills", "Python, SQL", "Experience"]
        result = PDFExtractor.for_backend(backend).extract_from_bytes(make_text_pdf(lines))

        assert split_lines(result.text) == lines
        assert result.page_count == 1

    @pytest.mark.parametrize("backend", ["pypdf", "pdfplumber"])
    def test_real_blank_pdf(self, make_blank_pdf, backend):
        result = PDFExtractor.for_backend(backend).extract_from_bytes(make_blank_pdf(2))
        assert result.is_empty
        assert result.page_count == 2

    @pytest.mark.parametrize("backend", ["pypdf", "pdfplumber"])
    def test_corrupt_pdf(self, backend):
        with pytest.raises(ExtractionFailedError):
            PDFExtractor.for_backend(backend).extract_from_bytes(b"this is not a pdf")

    def test_encrypted_pdf(self, make_encrypted_pdf):
        with pytest.raises(ExtractionFailedError):
            PDFExtractor().extract_from_bytes(make_encrypted_pdf())


# ── DOCXExtractor ───────────────────────────────────────────────────────────


class TestDOCXExtractor:
    def test_paragraphs_in_order(self, make_docx):
        paragraphs = ["Skills", "Python, SQL", "Experience", "2020 - Present"]
        result = DOCXExtractor().extract_from_bytes(make_docx(paragraphs))

        assert split_lines(result.text) == paragraphs
        assert result.metadata["extractor"] == "python-docx"

    def test_one_line_per_paragraph(self, make_docx):
        result = DOCXExtractor().extract_from_bytes(make_docx(["Skills", "Python"]))
        assert "Skills\nPython" in result.text

    def test_table_cells_follow_paragraphs(self, make_docx):
        data = make_docx(["Skills"], table=[["Python", "Go"], ["Docker", "AWS"]])
        result = DOCXExtractor().extract_from_bytes(data)
        assert split_lines(result.text) == ["Skills", "Python", "Go", "Docker", "AWS"]

    def test_empty_document(self, make_docx):
        result = DOCXExtractor().extract_from_bytes(make_docx([]))
        assert result.is_empty
        assert result.warnings

    def test_corrupt_docx(self):
        with pytest.raises(ExtractionFailedError) as exc_info:
            DOCXExtractor().extract_from_bytes(b"PK\x03\x04 broken archive")
        assert exc_info.value.mime_type == DOCX_MIME_TYPE

    def test_error_while_walking_body(self, make_docx, monkeypatch):
        def broken_table_lines(self, table):
            raise KeyError("w:tc")

        monkeypatch.setattr(DOCXExtractor, "_table_lines", broken_table_lines)
        data = make_docx(["Skills"], table=[["Python"]])

        with pytest.raises(ExtractionFailedError) as exc_info:
            DOCXExtractor().extract_from_bytes(data)

        assert isinstance(exc_info.value.__cause__, KeyError)


# ── ExtractorFactory ────────────────────────────────────────────────────────


class TestExtractorFactory:
    def test_dispatch_by_mime_type(self):
        factory = ExtractorFactory()
        assert isinstance(factory.get_extractor(PDF_MIME_TYPE), PDFExtractor)
        assert isinstance(factory.get_extractor(DOCX_MIME_TYPE), DOCXExtractor)

    @pytest.mark.parametrize("mime_type", ["text/plain", "application/msword", "", "application/PDF"])
    def test_unsupported_mime_type(self, mime_type):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            ExtractorFactory().get_extractor(mime_type)
        assert exc_info.value.mime_type == mime_type

    def test_supported_mime_types(self):
        factory = ExtractorFactory()
        assert factory.get_supported_mime_types() == [PDF_MIME_TYPE, DOCX_MIME_TYPE]
        assert factory.is_supported(PDF_MIME_TYPE)
        assert not factory.is_supported("text/plain")

    def test_configured_backend(self, monkeypatch):
        from resume_extraction.utils.config import reload_settings

        monkeypatch.setenv("PARSER_PDF_BACKEND", "pdfplumber")
        reload_settings()
        try:
            extractor = ExtractorFactory().get_extractor(PDF_MIME_TYPE)
            assert extractor.page_reader is read_pages_with_pdfplumber
        finally:
            monkeypatch.undo()
            reload_settings()

    def test_extract_from_bytes(self, make_docx):
        result = ExtractorFactory().extract_from_bytes(make_docx(["Education"]), DOCX_MIME_TYPE)
        assert "Education" in result.text

    def test_custom_extractors(self):
        extractor = PDFExtractor(fake_reader(PageText("hello")))
        factory = ExtractorFactory([extractor])
        assert factory.extract_from_bytes(b"", PDF_MIME_TYPE).text == "hello"
        with pytest.raises(UnsupportedFormatError):
            factory.get_extractor(DOCX_MIME_TYPE)
