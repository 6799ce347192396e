"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file enumeration, content hashing and duplicate reporting.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Union, Callable
import logging
from enum import Enum

logger = logging.getLogger(__name__)


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Digest used to decide content equality.
    Files with equal digests are treated as identical, no byte-level check follows.
    """
    BLAKE2B = "blake2b"
    SHA256 = "sha256"
    SHA1 = "sha1"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text and statistics."""
        mapping = {
            HashAlgorithmName.BLAKE2B: "BLAKE2b-512",
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.SHA1: "SHA-1",
            HashAlgorithmName.XXH128: "xxHash3-128",
        }
        return mapping.get(self, self.value)

    @property
    def is_cryptographic(self) -> bool:
        return self is not HashAlgorithmName.XXH128

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    SIZE = "Size grouping"
    HASH = "Full Hash"
    REPORT = "Report"

    @classmethod
    def get_all(cls):
        return [cls.SIZE, cls.HASH, cls.REPORT]


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A regular file found during enumeration.
    Size is taken from filesystem metadata at enumeration time.
    """
    path: str
    size: int  # in bytes

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class DigestResult:
    """Digest of one candidate file's full content."""
    size: int
    path: str
    digest: bytes

    def __post_init__(self):
        if not isinstance(self.digest, bytes):
            raise ValueError("Field 'digest' must be bytes")


@dataclass
class HashGroup:
    """
    Paths sharing one digest.
    `size` is seeded from the first member and never recomputed.
    """
    size: int
    paths: List[str] = field(default_factory=list)

    def add_path(self, path: str) -> None:
        self.paths.append(path)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return len(self.paths) >= 2

    def __repr__(self):
        return f"<HashGroup size={self.size}, count={len(self.paths)}>"


@dataclass
class DuplicateSet:
    """
    Files with identical content.
    All but one copy count as reclaimable space.
    """
    digest: bytes
    size: int
    paths: List[str]

    @property
    def count(self) -> int:
        """How many files are in this set."""
        return len(self.paths)

    @property
    def reclaimable_bytes(self) -> int:
        return self.size * max(self.count - 1, 0)

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    def __repr__(self):
        return f"<DuplicateSet size={self.size}, count={self.count}>"


@dataclass
class DuplicateReport:
    """Result of one run: duplicate sets in no particular order plus the grand total."""
    duplicate_sets: List[DuplicateSet] = field(default_factory=list)
    total_reclaimable: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.duplicate_sets

    @property
    def duplicate_file_count(self) -> int:
        return sum(s.count for s in self.duplicate_sets)

    def sorted_by_reclaimable(self) -> List[DuplicateSet]:
        """Largest reclaimable space first; ties broken by lexicographically smallest path."""
        return sorted(
            self.duplicate_sets,
            key=lambda s: (-s.reclaimable_bytes, min(s.paths) if s.paths else "")
        )


class DeduplicationStats:
    """
    Statistics collected during the deduplication process.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}
        self._listeners: List[Callable[[str, Dict], None]] = []

    def add_listener(self, listener: Callable[[str, Dict], None]):
        """Adds a listener to receive updates when stats are updated."""
        self._listeners.append(listener)

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

        # Notify listeners about the update
        for listener in self._listeners:
            try:
                listener(stage_name, self.stage_stats[stage_name])
            except Exception:
                logger.exception("Error in stats event handler")

    def print_summary(self) -> str:
        labels = {
            "size": "📁 Size Groups",
            "hash": "🔍 Full Content Hash Groups",
            "report": "📄 Duplicate Sets",
        }

        lines = [
            "📊 Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
All configuration is per invocation.
"""
from dupfinder.utils.convert_utils import ConvertUtils


@dataclass
class ScanParams:
    """Parameters for one duplicate scan with validation."""
    roots: List[str]
    max_depth: Optional[int] = None  # None = unbounded
    exclude_hidden: bool = False
    min_size_bytes: Optional[int] = None
    max_size_bytes: Optional[int] = None
    workers: Optional[int] = None  # None = os.cpu_count()
    algorithm: HashAlgorithmName = HashAlgorithmName.BLAKE2B

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.roots:
            raise ValueError("At least one input path is required")

        if any(not root for root in self.roots):
            raise ValueError("Input path cannot be empty")

        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("Maximum depth cannot be negative")

        if self.workers is not None and self.workers < 1:
            raise ValueError("Number of workers must be at least 1")

        if self.min_size_bytes is not None and self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if (self.min_size_bytes is not None and self.max_size_bytes is not None
                and self.max_size_bytes < self.min_size_bytes):
            raise ValueError("Maximum size cannot be less than minimum size")

        if not isinstance(self.algorithm, HashAlgorithmName):
            self.algorithm = HashAlgorithmName(self.algorithm)

    @staticmethod
    def from_human_readable(
            roots: List[str],
            max_depth: Optional[int] = None,
            exclude_hidden: bool = False,
            min_size_str: Optional[str] = None,
            max_size_str: Optional[str] = None,
            workers: Optional[int] = None,
            algorithm: HashAlgorithmName = HashAlgorithmName.BLAKE2B,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str) if min_size_str else None
        max_size = ConvertUtils.human_to_bytes(max_size_str) if max_size_str else None

        return ScanParams(
            roots=list(roots),
            max_depth=max_depth,
            exclude_hidden=exclude_hidden,
            min_size_bytes=min_size,
            max_size_bytes=max_size,
            workers=workers,
            algorithm=algorithm,
        )
