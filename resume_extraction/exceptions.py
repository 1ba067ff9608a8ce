"""
Exceptions raised by the resume extraction pipeline.

Every failure the pipeline reports is a ResumeParsingError subclass carrying an
ErrorCode, so callers can map failures without matching on messages.
"""

from typing import Optional

from resume_extraction.utils.constants import ErrorCode


class ResumeParsingError(Exception):
    """Base class for pipeline failures."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedFormatError(ResumeParsingError):
    """The declared MIME type is neither PDF nor DOCX."""

    code = ErrorCode.UNSUPPORTED_FORMAT

    def __init__(self, mime_type: str, message: Optional[str] = None):
        super().__init__(message or f"Unsupported file type: {mime_type}")
        self.mime_type = mime_type


class DownloadFailedError(ResumeParsingError):
    """The storage backend could not supply the document bytes."""

    code = ErrorCode.DOWNLOAD_FAILED

    def __init__(self, storage_path: str, message: Optional[str] = None):
        super().__init__(message or f"Could not download document: {storage_path}")
        self.storage_path = storage_path


class ExtractionFailedError(ResumeParsingError):
    """The document decoder could not produce text."""

    code = ErrorCode.EXTRACTION_FAILED

    def __init__(self, mime_type: str, message: Optional[str] = None):
        super().__init__(message or f"Could not extract text from {mime_type} document")
        self.mime_type = mime_type
