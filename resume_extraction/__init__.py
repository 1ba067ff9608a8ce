"""
Resume text extraction and structuring.

Turns PDF/DOCX resume bytes into plain text and heuristically segments that
text into skills, work experience and education records.
"""

from resume_extraction.utils.constants import APP_NAME, VERSION

__app_name__ = APP_NAME
__version__ = VERSION

from resume_extraction.exceptions import (
    DownloadFailedError,
    ExtractionFailedError,
    ResumeParsingError,
    UnsupportedFormatError,
)
from resume_extraction.nlp.resume_parser import (
    ResumeParser,
    get_resume_parser,
    parse_resume,
)

__all__ = [
    "__app_name__",
    "__version__",
    "ResumeParser",
    "get_resume_parser",
    "parse_resume",
    "ResumeParsingError",
    "UnsupportedFormatError",
    "DownloadFailedError",
    "ExtractionFailedError",
]
