"""
Core duplicate detection engine: scanner, hasher, grouper, and pipeline orchestrator.

This package contains the performance-critical foundation of dupfinder:
- FileScannerImpl: lazy recursive traversal with depth bound and hidden-entry filter
- HasherImpl + algorithms: streaming full-content hashing (BLAKE2b by default)
- FileGrouperImpl: size bucketing and digest aggregation
- FullHashStage: parallel hashing with a single-threaded merge
- ReportBuilder: duplicate sets and reclaimable-space totals
- DeduplicatorImpl: size → hash → report pipeline
- Models: FileRecord, DigestResult, HashGroup, DuplicateSet, DuplicateReport, ScanParams

All components are pure Python and suitable for CLI and library usage.
"""

from .scanner import FileScannerImpl
from .grouper import FileGrouperImpl
from .hasher import (
    HasherImpl, Blake2bAlgorithmImpl, Sha256AlgorithmImpl, Sha1AlgorithmImpl,
    XXHashAlgorithmImpl, get_algorithm)
from .stages import SizeStageImpl, FullHashStage
from .report import ReportBuilder
from .deduplicator import DeduplicatorImpl
from .models import (
    FileRecord, DigestResult, HashGroup, DuplicateSet, DuplicateReport,
    DeduplicationStats, HashAlgorithmName, ScanParams)

__all__ = [
    "FileScannerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "Blake2bAlgorithmImpl",
    "Sha256AlgorithmImpl",
    "Sha1AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "SizeStageImpl",
    "FullHashStage",
    "ReportBuilder",
    "DeduplicatorImpl",
    "FileRecord",
    "DigestResult",
    "HashGroup",
    "DuplicateSet",
    "DuplicateReport",
    "DeduplicationStats",
    "HashAlgorithmName",
    "ScanParams",
]
