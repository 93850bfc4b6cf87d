"""
Core deduplication engine: scanner, hasher, grouper, retention selector and engine.

This package contains the whole decision logic of dedupe:
- FileScannerImpl: recursive traversal with exact extension filtering
- HasherImpl + Sha1AlgorithmImpl / XXHashAlgorithmImpl: streaming content digests
- FileGrouperImpl: digest-based grouping of the completed catalog
- RetentionSelectorImpl: picks the surviving file of each group
- DeduplicatorImpl: orchestrates grouping and selection, accounts duplicate bytes
- Models: FileRecord, FileCatalog, DigestGroup, DeduplicationResult and params

No filesystem mutation happens here; deletion lives in dedupe.services.
"""

from .scanner import FileScannerImpl
from .grouper import FileGrouperImpl
from .selector import RetentionSelectorImpl
from .hasher import HasherImpl, Sha1AlgorithmImpl, XXHashAlgorithmImpl, XXHash64AlgorithmImpl, algorithm_for
from .deduplicator import DeduplicatorImpl
from .models import (
    FileRecord, FileCatalog, DigestGroup, DeduplicationResult, DeduplicationParams,
    HashAlgorithmName)

__all__ = [
    "FileScannerImpl",
    "FileGrouperImpl",
    "RetentionSelectorImpl",
    "HasherImpl",
    "Sha1AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "XXHash64AlgorithmImpl",
    "algorithm_for",
    "DeduplicatorImpl",
    "FileRecord",
    "FileCatalog",
    "DigestGroup",
    "DeduplicationResult",
    "DeduplicationParams",
    "HashAlgorithmName",
]
