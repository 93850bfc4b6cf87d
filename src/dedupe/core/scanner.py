"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Builds the file catalog for a deduplication run.
Features:
- Recursively walks the root directory in sorted (deterministic) order
- Keeps only files whose extension exactly matches the configured set (case-sensitive)
- Records size and content digest for every matched file
- Optionally hashes files on a bounded thread pool
- Fails fast: any traversal or hashing error aborts the whole scan
"""

import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Callable, Tuple

from dedupe.core.models import FileRecord, FileCatalog, normalize_extension, extension_of
from dedupe.core.interfaces import FileScanner, Hasher
from dedupe.core.hasher import HasherImpl
from dedupe.errors import ScanError

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and catalogs files matching the extension filter.

    Attributes:
        root_dir: Root directory to scan
        extensions: Allowed extensions including the leading dot (e.g., [".txt", ".doc"])
        hasher: Hasher used to compute content digests
        workers: Number of hashing threads (1 = hash inline, in traversal order)
    """

    def __init__(
        self,
        root_dir: str,
        extensions: List[str],
        hasher: Optional[Hasher] = None,
        workers: int = 1,
    ):
        if workers < 1:
            raise ValueError("Number of workers must be at least 1")
        self.root_dir = root_dir
        self.extensions = {normalize_extension(ext) for ext in extensions if normalize_extension(ext)}
        self.hasher = hasher or HasherImpl()
        self.workers = workers

    def scan(self,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> FileCatalog:
        """
        Walks the tree, then hashes every matched file.
        Returns a complete FileCatalog; never a partial one.
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: extensions={sorted(self.extensions)}, workers={self.workers}")

        root_path = Path(self.root_dir)
        if not root_path.exists():
            raise ScanError(f"Directory does not exist: {self.root_dir}", path=self.root_dir)
        if not root_path.is_dir():
            raise ScanError(f"Not a directory: {self.root_dir}", path=self.root_dir)

        start_time = time.time()

        candidates = self._collect_candidates(progress_callback)
        logger.debug(f"Matched {len(candidates)} files, hashing...")

        if self.workers > 1 and len(candidates) > 1:
            digests = self._hash_parallel(candidates, progress_callback)
        else:
            digests = self._hash_sequential(candidates, progress_callback)

        catalog = FileCatalog()
        for (path, size), digest in zip(candidates, digests):
            catalog.add(FileRecord(path=path, size=size, digest=digest, extension=extension_of(path)))

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Cataloged {len(catalog)} files.")
        return catalog

    def _collect_candidates(
            self,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[Tuple[str, int]]:
        """Walk the tree and return (path, size) for every matching file, in traversal order."""
        candidates = []
        processed_files = 0

        for root, dirs, files in os.walk(self.root_dir, onerror=self._raise_walk_error):
            dirs.sort()
            for filename in sorted(files):
                path = os.path.join(root, filename)
                processed_files += 1

                if not self._extension_passes(path):
                    logger.debug(f"Skipping {path} (extension not allowed)")
                    continue

                try:
                    size = os.stat(path).st_size
                except OSError as e:
                    raise ScanError(f"Could not get size of {path}: {e}", path=path) from e

                logger.debug(f"Accepted file: {filename} ({size} bytes)")
                candidates.append((path, size))

        if progress_callback:
            progress_callback('scanning', processed_files, None)

        return candidates

    def _hash_sequential(
            self,
            candidates: List[Tuple[str, int]],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[str]:
        digests = []
        total = len(candidates)
        for i, (path, _) in enumerate(candidates, 1):
            digests.append(self.hasher.compute_digest(path))
            if progress_callback:
                progress_callback('hashing', i, total)
        return digests

    def _hash_parallel(
            self,
            candidates: List[Tuple[str, int]],
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[str]:
        """
        Hash on a bounded thread pool. Results are stored by traversal index so the
        catalog order does not depend on completion order.
        """
        digests: List[Optional[str]] = [None] * len(candidates)
        total = len(candidates)
        completed = 0

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {
                executor.submit(self.hasher.compute_digest, path): index
                for index, (path, _) in enumerate(candidates)
            }
            try:
                for future in as_completed(futures):
                    digests[futures[future]] = future.result()
                    completed += 1
                    if progress_callback:
                        progress_callback('hashing', completed, total)
            except BaseException:
                for pending in futures:
                    pending.cancel()
                raise

        return digests

    def _extension_passes(self, path: str) -> bool:
        """
        Check if file matches one of the allowed extensions exactly.
        Args:
            path: File path
        Returns:
            True if the file extension is in the configured set
        """
        return extension_of(path) in self.extensions

    @staticmethod
    def _raise_walk_error(error: OSError) -> None:
        """os.walk error hook: unreadable directories abort the scan."""
        path = getattr(error, "filename", None)
        logger.error(f"Traversal failed at {path}: {error}")
        raise ScanError(f"Traversal failed: {error}", path=path) from error
