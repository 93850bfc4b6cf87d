"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/deduplicator.py
Deduplication engine: catalog -> digest groups -> retention selection.
Performs no filesystem mutation; deletion is driven by the caller from the result.
"""

import time
import logging
from typing import Optional

from dedupe.core.interfaces import Deduplicator, FileGrouper, RetentionSelector
from dedupe.core.grouper import FileGrouperImpl
from dedupe.core.selector import RetentionSelectorImpl
from dedupe.core.models import FileCatalog, DeduplicationResult

logger = logging.getLogger(__name__)


class DeduplicatorImpl(Deduplicator):
    """
    Classifies a completed catalog into retained and duplicate files.

    All run-scoped state lives in the returned DeduplicationResult, so one
    instance can be reused across runs.
    """

    def __init__(
            self,
            grouper: Optional[FileGrouper] = None,
            selector: Optional[RetentionSelector] = None,
    ):
        self.grouper = grouper or FileGrouperImpl()
        self.selector = selector or RetentionSelectorImpl()

    def find_duplicates(
            self,
            catalog: FileCatalog,
            preferred: Optional[str] = None,
    ) -> DeduplicationResult:
        start_time = time.time()
        result = DeduplicationResult()

        # Grouping needs the whole catalog before any keeper is chosen
        groups = self.grouper.digest_groups(catalog)

        for digest, group in groups.items():
            result.counts[digest] = group.count
            retained, duplicates = self.selector.select(group.members, preferred)
            result.retained[digest] = retained

            if not group.is_duplicate():
                continue

            logger.debug(f"{digest}: keeping {retained}, {len(duplicates)} duplicate(s)")
            result.duplicates[digest] = duplicates
            result.duplicate_bytes += sum(catalog.size_of(path) for path in duplicates)

        logger.debug(
            f"Found {result.group_count} duplicate groups, "
            f"{result.duplicate_bytes} duplicate bytes in {time.time() - start_time:.3f}s"
        )
        return result
