"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/selector.py
Retention policy: picks the one file in a digest group that survives.

Policy, in order:
1. If a preferred extension is given and at least one member carries it,
   keep one of those members.
2. Otherwise keep any member of the group.

Ties inside the candidate pool are broken by the lexicographically smallest
path, so the same group always yields the same survivor.
"""

import logging
from typing import Optional, Set, Tuple

from dedupe.core.interfaces import RetentionSelector
from dedupe.core.models import normalize_extension, extension_of

logger = logging.getLogger(__name__)


class RetentionSelectorImpl(RetentionSelector):

    def select(self, members: Set[str], preferred: Optional[str] = None) -> Tuple[str, Set[str]]:
        """
        Choose the path to retain.

        Args:
            members: Every path in the group (not modified)
            preferred: Preferred extension, with or without the leading dot
        Returns:
            (retained path, duplicate set)
        Raises:
            ValueError: If the group is empty
        """
        if not members:
            raise ValueError("Cannot select from an empty group")

        retained = min(self.candidates(members, preferred))
        duplicates = set(members)
        duplicates.discard(retained)
        return retained, duplicates

    @staticmethod
    def candidates(members: Set[str], preferred: Optional[str] = None) -> Set[str]:
        """Members eligible for retention: those with the preferred extension, or all of them."""
        preferred = normalize_extension(preferred)
        if preferred:
            matching = {path for path in members if extension_of(path) == preferred}
            if matching:
                return matching
            logger.debug(f"No member has preferred extension {preferred}, falling back to any member")
        return set(members)
