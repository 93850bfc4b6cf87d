"""
dedupe — content-based duplicate file remover.

Core features:
- Groups files by full-content digest (SHA-1 or xxHash)
- Keeps one file per group, preferring a chosen extension
- Reports duplicates and reclaimable bytes, optionally deletes them or moves them to trash
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dedupe")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dedupe.commands import DeduplicationCommand
from dedupe.core import (
    DeduplicationParams, DeduplicationResult, HashAlgorithmName, FileRecord, FileCatalog, DigestGroup)
from dedupe.errors import DedupeError, ScanError, HashingError, DeletionError
from dedupe.utils.convert_utils import ConvertUtils
from dedupe.services import DuplicateService
from dedupe.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "DeduplicationResult",
    "HashAlgorithmName",
    "FileRecord",
    "FileCatalog",
    "DigestGroup",
    "DedupeError",
    "ScanError",
    "HashingError",
    "DeletionError",
    "ConvertUtils",
    "DuplicateService",
    "FileService",
    "__version__",
]
