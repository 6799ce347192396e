"""
dupfinder: find duplicate files by content and report reclaimable space.

Core features:
- Size pre-filter: files with a unique size are never read
- Streaming full-content hashing (BLAKE2b by default) on a thread pool
- Multiple input trees, optional depth limit and hidden-entry exclusion
- Report only: files are never modified, moved or deleted
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dupfinder")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API, only what users should import directly
from dupfinder.commands import DeduplicationCommand
from dupfinder.core import (
    ScanParams, HashAlgorithmName, FileRecord, DuplicateSet, DuplicateReport,
    DeduplicatorImpl, FileScannerImpl)
from dupfinder.utils.convert_utils import ConvertUtils

__all__ = [
    "DeduplicationCommand",
    "ScanParams",
    "HashAlgorithmName",
    "FileRecord",
    "DuplicateSet",
    "DuplicateReport",
    "DeduplicatorImpl",
    "FileScannerImpl",
    "ConvertUtils",
    "__version__",
]
