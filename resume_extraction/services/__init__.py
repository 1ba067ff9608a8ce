"""
Services used by the resume extraction pipeline.

This module contains the storage backends that supply document bytes.
"""

from resume_extraction.services.storage_service import (
    FetchedDocument,
    LocalStorageService,
    StorageService,
    get_storage_service,
    guess_mime_type,
)

__all__ = [
    "FetchedDocument",
    "LocalStorageService",
    "StorageService",
    "get_storage_service",
    "guess_mime_type",
]
