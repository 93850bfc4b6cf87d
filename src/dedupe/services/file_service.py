"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal primitives: permanent unlink or move to the system trash.
"""
import os
import logging

from send2trash import send2trash

from dedupe.errors import DeletionError

logger = logging.getLogger(__name__)


class FileService:
    """
    Removes files from disk. Every failure surfaces as DeletionError.
    """

    @staticmethod
    def delete_file(file_path: str) -> None:
        """Permanently removes a file."""
        try:
            os.remove(file_path)
        except OSError as e:
            raise DeletionError(f"file deletion error: {e}", path=file_path) from e
        logger.debug(f"Deleted {file_path}")

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file to the system trash."""
        # Symlinks are trashed themselves, never their targets
        path = os.path.abspath(file_path)

        if not os.path.lexists(path):
            raise DeletionError(f"File not found: {path}", path=file_path)

        try:
            send2trash(path)
        except Exception as e:
            raise DeletionError(f"Failed to move to trash: {e}", path=file_path) from e
        logger.debug(f"Moved to trash {file_path}")
