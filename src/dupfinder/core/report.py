"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/report.py
Turns digest groups into duplicate sets and totals the reclaimable space.
"""

from typing import Dict

from dupfinder.core.models import HashGroup, DuplicateSet, DuplicateReport


class ReportBuilder:
    """
    Keeps digest groups with 2+ files.
    Reclaimable bytes of a set = size × (count − 1): one copy is always kept.
    No order is imposed across sets; paths inside a set keep merge order.
    """

    @staticmethod
    def build(hash_groups: Dict[bytes, HashGroup]) -> DuplicateReport:
        duplicate_sets = []
        total = 0
        for digest, group in hash_groups.items():
            if not group.is_duplicate():
                continue
            duplicate_set = DuplicateSet(digest=digest, size=group.size, paths=list(group.paths))
            total += duplicate_set.reclaimable_bytes
            duplicate_sets.append(duplicate_set)
        return DuplicateReport(duplicate_sets=duplicate_sets, total_reclaimable=total)
