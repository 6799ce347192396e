"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/stages.py
Pipeline stages of the duplicate finder.

STAGES
------
SizeStageImpl  : Buckets enumerated files by size, keeps buckets with 2+ files
FullHashStage  : Hashes every candidate file on a thread pool, then merges
                 the results by digest on the calling thread

CONCURRENCY
-----------
Hashing is the only parallel step. Each task reads one file and returns a
DigestResult (or None on failure) without touching shared state. All results
are collected into a list first; the digest map is built only after every task
has finished, so it never has concurrent writers.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Dict, Iterable, Optional, Callable

from dupfinder.core.models import FileRecord, DigestResult, HashGroup, Stage
from dupfinder.core.grouper import FileGrouperImpl
from dupfinder.core.hasher import HasherImpl
from dupfinder.core.interfaces import Hasher, FileGrouper

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 500  # Report hashing progress every N files


def default_workers() -> int:
    """Worker count bounded by available parallelism."""
    return os.cpu_count() or 1


class SizeStageImpl:
    def __init__(self, grouper: Optional[FileGrouper] = None):
        self.grouper = grouper or FileGrouperImpl()
        self.files_seen = 0

    def process(
            self,
            records: Iterable[FileRecord],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Dict[int, List[str]]:
        """
        Group by file size.
        Returns size -> paths for buckets with 2+ files of the same size.
        """
        counted = self._count(records)
        size_groups = self.grouper.group_by_size(counted)
        candidates = self.grouper.candidate_groups(size_groups)

        logger.debug(f"Size stage: {self.files_seen} files, {len(size_groups)} sizes, "
                     f"{len(candidates)} candidate groups")

        if progress_callback:
            progress_callback(Stage.SIZE.value, self.files_seen, self.files_seen)

        return candidates

    def _count(self, records: Iterable[FileRecord]) -> Iterable[FileRecord]:
        self.files_seen = 0
        for record in records:
            self.files_seen += 1
            yield record


class FullHashStage:
    def __init__(
            self,
            hasher: Optional[Hasher] = None,
            grouper: Optional[FileGrouper] = None,
            workers: Optional[int] = None
    ):
        if workers is not None and workers < 1:
            raise ValueError("Number of workers must be at least 1")
        self.hasher = hasher or HasherImpl()
        self.grouper = grouper or FileGrouperImpl()
        self.workers = workers or default_workers()
        self.failed_files = 0

    def process(
            self,
            candidates: Dict[int, List[str]],
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Dict[bytes, HashGroup]:
        """
        Hash every candidate file and group the results by digest.
        Files that fail to hash are left out of the result.
        """
        jobs = [(size, path) for size, paths in candidates.items() for path in paths]
        self.failed_files = 0
        if not jobs:
            return {}

        if self.workers == 1:
            results = self._hash_sequential(jobs, progress_callback)
        else:
            results = self._hash_parallel(jobs, progress_callback)

        self.failed_files = len(jobs) - len(results)
        if self.failed_files:
            logger.warning(f"Skipped {self.failed_files} files that could not be read")

        # Single-threaded merge once every hashing task has completed
        return self.grouper.group_by_digest(results)

    def _hash_sequential(self, jobs, progress_callback) -> List[DigestResult]:
        results = []
        for done, (size, path) in enumerate(jobs, 1):
            result = self.hasher.hash_file(size, path)
            if result is not None:
                results.append(result)
            self._report(progress_callback, done, len(jobs))
        return results

    def _hash_parallel(self, jobs, progress_callback) -> List[DigestResult]:
        results = []
        with ThreadPoolExecutor(max_workers=min(self.workers, len(jobs))) as executor:
            futures = [executor.submit(self.hasher.hash_file, size, path) for size, path in jobs]
            for done, future in enumerate(as_completed(futures), 1):
                result = future.result()
                if result is not None:
                    results.append(result)
                self._report(progress_callback, done, len(jobs))
        return results

    @staticmethod
    def _report(progress_callback, done: int, total: int) -> None:
        if progress_callback and (done % PROGRESS_INTERVAL == 0 or done == total):
            progress_callback(Stage.HASH.value, done, total)
