from typing import Callable, List, Optional

from dedupe.core.models import DeduplicationResult
from dedupe.services.file_service import FileService


class DuplicateService:
    @staticmethod
    def files_to_delete(result: DeduplicationResult) -> List[str]:
        """
        Every path found in a duplicate set, ordered by digest then path.
        Retained files are never part of it.
        """
        return result.duplicate_paths()

    @staticmethod
    def remove_duplicates(
            result: DeduplicationResult,
            use_trash: bool = False,
            on_removed: Optional[Callable[[str, str], None]] = None,
    ) -> List[str]:
        """
        Removes every duplicate file of the result, group by group.

        Stops at the first failure: the DeletionError propagates and files removed
        before it stay removed.

        Args:
            result: Engine output
            use_trash: Move files to the system trash instead of unlinking them
            on_removed: Called with (digest, path) after each successful removal
        Returns:
            Paths removed, in removal order
        """
        remove = FileService.move_to_trash if use_trash else FileService.delete_file
        removed = []
        for digest in sorted(result.duplicates):
            for path in sorted(result.duplicates[digest]):
                remove(path)
                removed.append(path)
                if on_removed:
                    on_removed(digest, path)
        return removed
