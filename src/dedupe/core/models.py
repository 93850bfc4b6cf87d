"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for content-based deduplication: file records, digest groups,
run parameters and the final classification result.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Set, Iterator
import os
from enum import Enum
from dedupe.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content digest algorithm used to identify identical files.
    """
    SHA1 = "sha1"
    XXH128 = "xxh128"
    XXH64 = "xxh64"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.SHA1: "SHA-1",
            HashAlgorithmName.XXH128: "xxHash128",
            HashAlgorithmName.XXH64: "xxHash64",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


def normalize_extension(ext: Optional[str]) -> str:
    """
    Strip whitespace and ensure a leading dot. Case is preserved: matching is case-sensitive.
    Returns an empty string for empty input.
    """
    if not ext:
        return ""
    ext = ext.strip()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


def extension_of(path: str) -> str:
    """Extension of the final path element, including the leading dot ('' if none)."""
    _, ext = os.path.splitext(os.path.basename(path))
    return ext


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single matched file discovered during traversal.
    Immutable once created.
    """
    path: str
    size: int  # in bytes
    digest: str
    extension: str = ""

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.path}")
        if not self.extension:
            object.__setattr__(self, "extension", extension_of(self.path))

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


class FileCatalog:
    """
    Accumulates FileRecords in traversal order.
    A path may be cataloged only once.
    """

    def __init__(self):
        self._records: Dict[str, FileRecord] = {}

    def add(self, record: FileRecord) -> None:
        if record.path in self._records:
            raise ValueError(f"Path already cataloged: {record.path}")
        self._records[record.path] = record

    def get(self, path: str) -> FileRecord:
        return self._records[path]

    def size_of(self, path: str) -> int:
        return self._records[path].size

    @property
    def records(self) -> List[FileRecord]:
        return list(self._records.values())

    @property
    def total_bytes(self) -> int:
        return sum(r.size for r in self._records.values())

    def __contains__(self, path: str) -> bool:
        return path in self._records

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self):
        return f"<FileCatalog files={len(self._records)}>"


@dataclass
class DigestGroup:
    """
    All cataloged paths sharing one content digest.
    Membership only grows while the catalog is being grouped.
    """
    digest: str
    members: Set[str] = field(default_factory=set)

    @property
    def count(self) -> int:
        """How many files share this digest."""
        return len(self.members)

    def add(self, path: str) -> None:
        self.members.add(path)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.count >= 2

    def __repr__(self):
        return f"<DigestGroup digest={self.digest}, count={self.count}>"


@dataclass
class DeduplicationResult:
    """
    Classification produced by the engine for one run.

    duplicates: digest -> paths considered removable (only non-empty sets)
    retained:   digest -> path kept for every group, including single-member ones
    counts:     digest -> total occurrences of that digest
    duplicate_bytes: summed size of every path in any duplicate set
    """
    duplicates: Dict[str, Set[str]] = field(default_factory=dict)
    retained: Dict[str, str] = field(default_factory=dict)
    counts: Dict[str, int] = field(default_factory=dict)
    duplicate_bytes: int = 0

    @property
    def group_count(self) -> int:
        """Number of digests that have something to remove."""
        return len(self.duplicates)

    @property
    def is_empty(self) -> bool:
        return not self.duplicates

    def duplicate_paths(self) -> List[str]:
        """All removable paths, ordered by digest then path."""
        return [
            path
            for digest in sorted(self.duplicates)
            for path in sorted(self.duplicates[digest])
        ]

    def __repr__(self):
        return f"<DeduplicationResult groups={self.group_count}, bytes={self.duplicate_bytes}>"


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic, used by the CLI and by library callers.
"""

@dataclass
class DeduplicationParams:
    """Parameters for a deduplication run with validation."""
    root_dir: str
    extensions: List[str] = field(default_factory=list)
    preferred: Optional[str] = None
    clean: bool = False
    use_trash: bool = False
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA1
    workers: int = 1

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        normalized = []
        for ext in self.extensions:
            ext = normalize_extension(ext)
            if ext and ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("At least one extension is required")
        self.extensions = normalized

        self.preferred = normalize_extension(self.preferred) or None

        if self.workers < 1:
            raise ValueError("Number of workers must be at least 1")

        if self.use_trash and not self.clean:
            raise ValueError("Trash mode requires clean mode")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            extensions_str: str,
            preferred: Optional[str] = None,
            clean: bool = False,
            use_trash: bool = False,
            algorithm: HashAlgorithmName = HashAlgorithmName.SHA1,
            workers: int = 1,
    ) -> 'DeduplicationParams':
        """
        Factory method to create params from the comma-separated extension list
        used on the command line (e.g. "txt, doc,.pdf").
        """
        return DeduplicationParams(
            root_dir=root_dir,
            extensions=ConvertUtils.parse_extensions(extensions_str),
            preferred=preferred,
            clean=clean,
            use_trash=use_trash,
            algorithm=algorithm,
            workers=workers,
        )
