"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while allowing substitutes such as a failing hasher.

Key Components:
---------------
- HashAccumulator: Running digest state fed chunk by chunk.
- HashAlgorithm: Factory for accumulators (BLAKE2b, SHA-256, xxHash, ...).
- Hasher: Computes a whole-file digest for a candidate file.
- FileScanner: Lazily enumerates regular files below a root.
- FileGrouper: Groups files by size and merges digest results.
- Deduplicator: Runs the size → hash → report pipeline.
"""

from typing import Protocol, List, Dict, Iterable, Iterator, Optional, Callable, Tuple
from dupfinder.core.models import (
    FileRecord,
    DigestResult,
    HashGroup,
    DuplicateReport,
    DeduplicationStats,
)


# ===== Interfaces =====

class HashAccumulator(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for streaming hash algorithms.

    Allows plugging in different hashing functions like BLAKE2b, SHA-256 or xxHash
    without affecting the rest of the pipeline.
    """
    name: str
    digest_size: int

    def new(self) -> HashAccumulator:
        """Returns a fresh accumulator."""
        ...


class Hasher(Protocol):
    """Interface for hashing a file's full content."""
    def compute_full_hash(self, path: str) -> bytes: ...
    def hash_file(self, size: int, path: str) -> Optional[DigestResult]: ...


class FileScanner(Protocol):
    """
    Interface for enumerating file systems.

    Methods:
        scan: Lazily yields records for regular files.
    """
    def scan(self) -> Iterator[FileRecord]:
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping files by size and by content digest.
    """
    def group_by_size(self, records: Iterable[FileRecord]) -> Dict[int, List[str]]:
        """Group file paths by their size in bytes."""
        ...

    def candidate_groups(self, size_groups: Dict[int, List[str]]) -> Dict[int, List[str]]:
        """Keep only size buckets with 2+ members."""
        ...

    def group_by_digest(self, results: Iterable[DigestResult]) -> Dict[bytes, HashGroup]:
        """Merge digest results into digest-keyed groups."""
        ...


class Deduplicator(Protocol):
    """
    Interface for the main duplicate detection engine.

    Coordinates the size → full hash → report stages.
    Collects detailed statistics about the process.
    """
    def find_duplicates(
        self,
        records: Iterable[FileRecord],
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> Tuple[DuplicateReport, DeduplicationStats]:
        """
        Run the full pipeline over enumerated files.

        Args:
            records: Enumerated files (consumed once).
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            A tuple containing:
                - Report with duplicate sets and total reclaimable bytes
                - Statistics collected during processing
        """
        ...
