"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

errors.py
Exception hierarchy. Every error is fatal to a run: nothing is retried or skipped.
"""
from typing import Optional


class DedupeError(Exception):
    """Base class for all dedupe failures."""


class ScanError(DedupeError, OSError):
    """Directory traversal or file metadata could not be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class HashingError(ScanError):
    """A file could not be opened or read to completion while hashing."""


class DeletionError(DedupeError, OSError):
    """A duplicate file could not be removed during cleanup."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
