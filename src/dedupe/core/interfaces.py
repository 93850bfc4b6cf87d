"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` so that
every stage can be swapped out in tests or by library callers.

Key Components:
---------------
- HashAlgorithm: Streaming hash factory (e.g., SHA-1, xxHash128).
- Hasher: Computes the content digest of a file.
- FileScanner: Walks a directory tree and builds the file catalog.
- FileGrouper: Partitions the catalog by digest.
- RetentionSelector: Picks the file to keep in a digest group.
- Deduplicator: Main engine coordinating grouping and selection.
"""

from typing import Protocol, Dict, Optional, Set, Tuple, Callable
from dedupe.core.models import (
    FileCatalog,
    DigestGroup,
    DeduplicationResult,
)


# ===== Interfaces =====

class HashState(Protocol):
    """Incremental hash object as returned by hashlib/xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-1 or xxHash
    without affecting the rest of the deduplication logic.
    """

    name: str

    @staticmethod
    def new() -> HashState:
        """Returns a fresh incremental hash object."""
        ...


class Hasher(Protocol):
    """Interface for computing the content digest of a file."""
    def compute_digest(self, path: str) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.
    """
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> FileCatalog:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            FileCatalog containing every file matching the extension filter.
        """
        ...


class FileGrouper(Protocol):
    """Interface for grouping cataloged files by content digest."""
    def group_by_digest(self, catalog: FileCatalog) -> Dict[str, Set[str]]:
        """Map every observed digest to the set of paths carrying it."""
        ...

    def digest_groups(self, catalog: FileCatalog) -> Dict[str, DigestGroup]:
        """Same partition as group_by_digest, as DigestGroup objects."""
        ...


class RetentionSelector(Protocol):
    """Interface for choosing which member of a digest group survives."""
    def select(self, members: Set[str], preferred: Optional[str] = None) -> Tuple[str, Set[str]]:
        """
        Returns:
            (retained path, duplicate set) where the duplicate set is members minus the retained path.
        """
        ...


class Deduplicator(Protocol):
    """
    Interface for the main deduplication engine.

    Coordinates grouping and retention selection over a completed catalog.
    """
    def find_duplicates(
        self,
        catalog: FileCatalog,
        preferred: Optional[str] = None,
    ) -> DeduplicationResult:
        """
        Classify cataloged files into retained and duplicate sets.

        Args:
            catalog: Completed file catalog.
            preferred: Extension whose presence in a group decides the retained file.

        Returns:
            DeduplicationResult with per-digest duplicate sets, counts and byte total.
        """
        ...
