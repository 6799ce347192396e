"""
Command orchestrator for duplicate detection.
This is the SINGLE entry point for the scan workflow, used by the CLI and by library callers.
"""
import os
import logging
from typing import Iterator, Optional, Callable, Set, Tuple

from dupfinder.core.models import FileRecord, DuplicateReport, DeduplicationStats, ScanParams
from dupfinder.core.scanner import FileScannerImpl
from dupfinder.core.hasher import HasherImpl, get_algorithm
from dupfinder.core.deduplicator import DeduplicatorImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the whole workflow:
    1. Enumerate every root (each one best-effort, independent of the others)
    2. Drop paths already reached through an overlapping root
    3. Run the size → hash → report pipeline

    Usage:
        params = ScanParams(roots=["~/Downloads", "/mnt/backup"], max_depth=3)
        report, stats = DeduplicationCommand().execute(
            params,
            progress_callback=cli_progress_printer
        )
    """

    def __init__(self):
        self.files_found = 0

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[DuplicateReport, DeduplicationStats]:
        """
        Execute a duplicate scan with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (report, statistics)
        """
        hasher = HasherImpl(get_algorithm(params.algorithm))
        deduplicator = DeduplicatorImpl(hasher=hasher, workers=params.workers)

        report, stats = deduplicator.find_duplicates(
            self._enumerate(params),
            progress_callback=progress_callback
        )

        logger.debug(f"Enumerated {self.files_found} files, "
                     f"{len(report.duplicate_sets)} duplicate sets found")
        return report, stats

    def _enumerate(self, params: ScanParams) -> Iterator[FileRecord]:
        self.files_found = 0
        seen: Set[str] = set()
        for root in params.roots:
            scanner = FileScannerImpl(
                root=root,
                max_depth=params.max_depth,
                exclude_hidden=params.exclude_hidden,
                min_size=params.min_size_bytes,
                max_size=params.max_size_bytes,
            )
            for record in scanner.scan():
                key = os.path.normcase(os.path.realpath(record.path))
                if key in seen:
                    logger.debug(f"Already enumerated through another root: {record.path}")
                    continue
                seen.add(key)
                self.files_found += 1
                yield record
