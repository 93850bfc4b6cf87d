"""
Unified command orchestrator for deduplication.
This is the single entry point for business logic used by the CLI and library callers.
"""
from typing import Optional, Callable

from dedupe.core.models import DeduplicationParams, DeduplicationResult, FileCatalog
from dedupe.core.scanner import FileScannerImpl
from dedupe.core.hasher import HasherImpl, algorithm_for
from dedupe.core.deduplicator import DeduplicatorImpl


class DeduplicationCommand:
    """
    Orchestrates the deduplication workflow:
    1. Build the file catalog for the root directory
    2. Group by digest and select the file to keep in each group
    3. Return the classification; removal is up to the caller

    Usage:
        params = DeduplicationParams.from_human_readable("/photos", "jpg,png", preferred="png")
        command = DeduplicationCommand()
        result = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self):
        self._deduplicator = DeduplicatorImpl()
        self._catalog: FileCatalog = FileCatalog()  # Local state storage

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
    ) -> DeduplicationResult:
        """
        Execute deduplication with given parameters.

        Args:
            params: Validated deduplication parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            DeduplicationResult

        Raises:
            ScanError: If traversal or hashing fails
        """
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            extensions=params.extensions,
            hasher=HasherImpl(algorithm_for(params.algorithm)),
            workers=params.workers,
        )

        self._catalog = scanner.scan(progress_callback=progress_callback)

        return self._deduplicator.find_duplicates(self._catalog, preferred=params.preferred)

    def get_catalog(self) -> FileCatalog:
        """Catalog built by the last execution."""
        return self._catalog
