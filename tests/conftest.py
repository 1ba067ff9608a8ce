"""
Shared test fixtures for the resume extraction test suite.

Sets environment variables before any package imports so configuration and
logging stay quiet, then provides storage fakes, sample resume text and
builders for real DOCX/PDF bytes.
"""

import os

# === Set environment BEFORE any package imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("PARSER_PDF_BACKEND", "pypdf")

import io
from typing import Optional

import pytest
from docx import Document
from pypdf import PdfWriter

from resume_extraction.exceptions import DownloadFailedError
from resume_extraction.services.storage_service import FetchedDocument, guess_mime_type
from resume_extraction.utils.constants import DOCX_MIME_TYPE, PDF_MIME_TYPE


# ---------------------------------------------------------------------------
# Storage fakes
# ---------------------------------------------------------------------------


class InMemoryStorage:
    """Storage service fake holding documents in a dict, recording fetches."""

    def __init__(self, documents: Optional[dict[str, bytes]] = None):
        self.documents = dict(documents or {})
        self.fetched: list[str] = []

    def put(self, storage_path: str, content: bytes) -> None:
        self.documents[storage_path] = content

    def fetch_bytes(self, storage_path: str) -> FetchedDocument:
        self.fetched.append(storage_path)
        if storage_path not in self.documents:
            raise DownloadFailedError(storage_path, f"Document not found: {storage_path}")
        return FetchedDocument(
            content=self.documents[storage_path],
            mime_type=guess_mime_type(storage_path),
        )


@pytest.fixture
def storage():
    return InMemoryStorage()


# ---------------------------------------------------------------------------
# Document builders
# ---------------------------------------------------------------------------


def build_docx(paragraphs: list[str], table: Optional[list[list[str]]] = None) -> bytes:
    """Build DOCX bytes with the given paragraphs, then an optional table."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)

    if table:
        docx_table = doc.add_table(rows=len(table), cols=len(table[0]))
        for row_index, row in enumerate(table):
            for col_index, text in enumerate(row):
                docx_table.cell(row_index, col_index).text = text

    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_text_pdf(lines: list[str]) -> bytes:
    """Build a one-page PDF drawing each line with Helvetica, top to bottom."""
    ops = ["BT", "/F1 12 Tf", "72 720 Td"]
    for index, line in enumerate(lines):
        if index:
            ops.append("0 -18 Td")
        ops.append(f"({_pdf_escape(line)}) Tj")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def build_blank_pdf(pages: int = 1) -> bytes:
    """Build a PDF of blank pages."""
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_encrypted_pdf(password: str = "secret") -> bytes:
    """Build a blank PDF that needs a user password to open."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.encrypt(user_password=password, owner_password=password)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def make_text_pdf():
    return build_text_pdf


@pytest.fixture
def make_blank_pdf():
    return build_blank_pdf


@pytest.fixture
def make_encrypted_pdf():
    return build_encrypted_pdf


# ---------------------------------------------------------------------------
# Sample resume text
# ---------------------------------------------------------------------------


SAMPLE_RESUME_LINES = [
    "Jane Smith",
    "jane.smith@example.com",
    "Skills",
    "Python, Django, PostgreSQL",
    "Docker | AWS",
    "Experience",
    "Jan 2020 - Present",
    "TechCorp",
    "Senior Software Engineer",
    "Designed microservices.",
    "Led a team of four.",
    "2017 - 2019",
    "StartupInc",
    "Software Engineer",
    "Education",
    "Bachelor of Science 2017",
    "Stanford University",
    "Computer Science",
]


@pytest.fixture
def sample_resume_lines() -> list[str]:
    return list(SAMPLE_RESUME_LINES)


@pytest.fixture
def sample_resume_text() -> str:
    return "\n".join(SAMPLE_RESUME_LINES)


@pytest.fixture
def pdf_mime_type() -> str:
    return PDF_MIME_TYPE


@pytest.fixture
def docx_mime_type() -> str:
    return DOCX_MIME_TYPE
