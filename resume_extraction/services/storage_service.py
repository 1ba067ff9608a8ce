"""
Document storage services for the resume extraction pipeline.

The pipeline reads resume bytes through a StorageService. The local
implementation serves files from a directory on disk; other backends only
need to provide fetch_bytes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from resume_extraction.exceptions import DownloadFailedError
from resume_extraction.utils.config import get_settings
from resume_extraction.utils.constants import EXTENSION_MIME_TYPES, FALLBACK_MIME_TYPE
from resume_extraction.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchedDocument:
    """Raw bytes of a stored document and its MIME type."""

    content: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class StorageService(Protocol):
    """Anything that can fetch a stored document by its storage path."""

    def fetch_bytes(self, storage_path: str) -> FetchedDocument:
        """
        Fetch a stored document.

        Raises:
            DownloadFailedError: If the document is missing or unreadable
        """
        ...


def guess_mime_type(filename: str) -> str:
    """Map a resume filename to its MIME type by extension."""
    return EXTENSION_MIME_TYPES.get(Path(filename).suffix.lower(), FALLBACK_MIME_TYPE)


class LocalStorageService:
    """
    Storage service reading documents from a local directory.

    Usage:
        storage = LocalStorageService("/srv/resumes")
        document = storage.fetch_bytes("resumes/user-1/cv.pdf")
    """

    def __init__(self, root_dir: str | Path, max_document_bytes: Optional[int] = None):
        """
        Initialize the local storage service.

        Args:
            root_dir: Directory that storage paths are resolved against
            max_document_bytes: Size limit for fetched documents. Defaults to
                the configured limit.
        """
        self.root_dir = Path(root_dir).resolve()
        if max_document_bytes is None:
            max_document_bytes = get_settings().storage.max_document_bytes
        self.max_document_bytes = max_document_bytes

    def fetch_bytes(self, storage_path: str) -> FetchedDocument:
        """Read a document stored under the root directory."""
        path = self._resolve(storage_path)

        try:
            content = path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {storage_path}: {e}")
            raise DownloadFailedError(storage_path, f"Could not read document: {storage_path}") from e

        logger.debug(f"Fetched {storage_path} ({len(content)} bytes)")
        return FetchedDocument(content=content, mime_type=guess_mime_type(path.name))

    def _resolve(self, storage_path: str) -> Path:
        """
        Resolve a storage path to a readable file under the root directory.

        Security: Prevents path traversal by resolving the path and requiring it
        to stay inside the root directory.
        """
        try:
            path = (self.root_dir / storage_path).resolve(strict=False)
        except (OSError, ValueError) as e:
            raise DownloadFailedError(storage_path, f"Invalid storage path: {storage_path}") from e

        if not path.is_relative_to(self.root_dir):
            raise DownloadFailedError(storage_path, f"Access denied: {storage_path}")
        if not path.exists():
            raise DownloadFailedError(storage_path, f"Document not found: {storage_path}")
        if not path.is_file():
            raise DownloadFailedError(storage_path, f"Not a file: {storage_path}")

        size = path.stat().st_size
        if size > self.max_document_bytes:
            raise DownloadFailedError(
                storage_path,
                f"Document too large: {size} bytes (max: {self.max_document_bytes})",
            )

        return path


# Global service instance
_storage_service: Optional[LocalStorageService] = None


def get_storage_service() -> LocalStorageService:
    """Get or create the global local storage service."""
    global _storage_service
    if _storage_service is None:
        settings = get_settings()
        _storage_service = LocalStorageService(
            settings.storage.root_dir,
            settings.storage.max_document_bytes,
        )
    return _storage_service
