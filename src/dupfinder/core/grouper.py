"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements size bucketing and digest aggregation behind the FileGrouper interface.
"""

from typing import List, Dict, Iterable, Any, Callable
from collections import defaultdict
from dupfinder.core.interfaces import FileGrouper
from dupfinder.core.models import FileRecord, DigestResult, HashGroup


class FileGrouperImpl(FileGrouper):
    """
    Groups enumerated files by size and merges digest results by digest.
    Not thread-safe: call it from the single aggregation thread only.
    """

    def group_by_size(self, records: Iterable[FileRecord]) -> Dict[int, List[str]]:
        """Buckets file paths by size, keeping every bucket (singletons included)."""
        return self._group_by(records, lambda r: r.size)

    @staticmethod
    def candidate_groups(size_groups: Dict[int, List[str]]) -> Dict[int, List[str]]:
        """
        Keeps buckets with 2+ files.
        A file with a unique size cannot have a duplicate, so it is never hashed.
        """
        return {size: paths for size, paths in size_groups.items() if len(paths) >= 2}

    def group_by_digest(self, results: Iterable[DigestResult]) -> Dict[bytes, HashGroup]:
        """
        Merges digest results into digest-keyed groups.
        A new group takes its size from the first result; later results only add paths.
        """
        groups: Dict[bytes, HashGroup] = {}
        for result in results:
            group = groups.get(result.digest)
            if group is None:
                group = groups[result.digest] = HashGroup(size=result.size)
            group.add_path(result.path)
        return groups

    @staticmethod
    def _group_by(records: Iterable[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[str]]:
        """
        Helper method to group file paths by any computed key.
        Args:
            records: Files to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[path]] in encounter order
        """
        groups = defaultdict(list)
        for record in records:
            groups[key_func(record)].append(record.path)
        return dict(groups)
