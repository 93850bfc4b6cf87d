"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Partitions a completed file catalog by content digest.
"""

import logging
from typing import Dict, Set, Any, Callable
from collections import defaultdict

from dedupe.core.interfaces import FileGrouper
from dedupe.core.models import FileCatalog, FileRecord, DigestGroup

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Groups cataloged files by digest.
    Single-member groups are kept in the mapping; they simply have nothing to remove.
    """

    def group_by_digest(self, catalog: FileCatalog) -> Dict[str, Set[str]]:
        """Groups file paths by their content digest."""
        groups = self._group_by(catalog, lambda r: r.digest)
        logger.debug(
            f"Grouped {len(catalog)} files into {len(groups)} digests "
            f"({sum(1 for g in groups.values() if len(g) > 1)} with duplicates)"
        )
        return groups

    def digest_groups(self, catalog: FileCatalog) -> Dict[str, DigestGroup]:
        """Same partition as group_by_digest, wrapped in DigestGroup objects."""
        return {
            digest: DigestGroup(digest=digest, members=members)
            for digest, members in self.group_by_digest(catalog).items()
        }

    @staticmethod
    def _group_by(catalog: FileCatalog, key_func: Callable[[FileRecord], Any]) -> Dict[Any, Set[str]]:
        """
        Helper method to group records by any computed key.
        Args:
            catalog: Completed catalog
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, Set[path]]
        """
        groups = defaultdict(set)
        for record in catalog:
            groups[key_func(record)].add(record.path)
        return dict(groups)
