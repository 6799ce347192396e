"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the duplicate detection pipeline:
    size grouping → parallel full-content hash → report
"""
import time
from typing import Iterable, Tuple, Optional, Callable
from dupfinder.core.models import FileRecord, DuplicateReport, DeduplicationStats
from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.interfaces import Deduplicator, Hasher, FileGrouper
from dupfinder.core.stages import SizeStageImpl, FullHashStage
from dupfinder.core.report import ReportBuilder


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Runs the size → hash → report pipeline and collects per-stage statistics.
    Hasher and grouper are injectable for testing.
    """
    def __init__(
        self,
        grouper: Optional[FileGrouper] = None,
        hasher: Optional[Hasher] = None,
        workers: Optional[int] = None
    ):
        self.grouper = grouper or FileGrouperImpl()
        self.hasher = hasher or HasherImpl()
        self.workers = workers

    def find_duplicates(
        self,
        records: Iterable[FileRecord],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[DuplicateReport, DeduplicationStats]:
        """
        Main pipeline.
        Args:
            records: Enumerated files, consumed once
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress per stage.
        Returns:
            Tuple[DuplicateReport, DeduplicationStats]
        """
        stats = DeduplicationStats()
        total_start_time = time.time()

        # Initial stage: group by size
        size_stage = SizeStageImpl(self.grouper)
        start_time = time.time()
        candidates = size_stage.process(records, progress_callback=progress_callback)
        stats.update_stage(
            stage_name="size",
            groups_found=len(candidates),
            files_processed=size_stage.files_seen,
            duration=time.time() - start_time
        )

        # Full content hash of every candidate
        hash_stage = FullHashStage(self.hasher, self.grouper, workers=self.workers)
        start_time = time.time()
        hash_groups = hash_stage.process(candidates, progress_callback=progress_callback)
        stats.update_stage(
            stage_name="hash",
            groups_found=len(hash_groups),
            files_processed=sum(len(paths) for paths in candidates.values()),
            duration=time.time() - start_time
        )

        start_time = time.time()
        report = ReportBuilder.build(hash_groups)
        stats.update_stage(
            stage_name="report",
            groups_found=len(report.duplicate_sets),
            files_processed=report.duplicate_file_count,
            duration=time.time() - start_time
        )

        stats.total_time = time.time() - total_start_time

        return report, stats
