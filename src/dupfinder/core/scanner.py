"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file enumeration.
Features:
- Walks directory trees with os.walk, never following symbolic links
- Optional depth bound (root is depth 0) and hidden-entry exclusion
- Yields records lazily, only for regular files
- Best-effort: entries that fail during traversal are skipped, never raised
"""

import os
import stat
import time
import logging
from typing import Iterator, Optional
from pathlib import Path

logger = logging.getLogger(__name__)

# Local imports
from dupfinder.core.models import FileRecord
from dupfinder.core.interfaces import FileScanner

HIDDEN_PREFIX = "."


class FileScannerImpl(FileScanner):
    """
    Enumerates regular files below a root path.

    Attributes:
        root: File or directory to enumerate
        max_depth: Deepest level to descend to, None for unbounded
        exclude_hidden: Skip files and prune directories whose name starts with '.'
        min_size: Minimum file size in bytes (optional)
        max_size: Maximum file size in bytes (optional)
    """

    def __init__(
        self,
        root: str,
        max_depth: Optional[int] = None,
        exclude_hidden: bool = False,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
    ):
        self.root = root
        self.max_depth = max_depth
        self.exclude_hidden = exclude_hidden
        self.min_size = min_size
        self.max_size = max_size

    def scan(self) -> Iterator[FileRecord]:
        """
        Lazily yields a FileRecord for every regular file within the depth bound.
        A missing or unreadable root yields nothing.
        """
        logger.debug(f"Scanning: {self.root} (max_depth={self.max_depth}, "
                     f"exclude_hidden={self.exclude_hidden})")
        start_time = time.time()

        try:
            root_stat = os.stat(self.root)
        except OSError as e:
            logger.warning(f"Cannot access {self.root}: {e}")
            return

        found = 0
        if stat.S_ISREG(root_stat.st_mode):
            if self._size_passes(root_stat.st_size):
                found += 1
                yield FileRecord(path=str(self.root), size=root_stat.st_size)
        elif stat.S_ISDIR(root_stat.st_mode):
            for record in self._walk():
                found += 1
                yield record
        else:
            logger.debug(f"Skipping non-regular root: {self.root}")

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan of {self.root} completed in {elapsed_time:.2f}s, {found} files")

    def _walk(self) -> Iterator[FileRecord]:
        # Depth 0 is the root directory itself, which holds no file record
        if self.max_depth == 0:
            return

        root_path = Path(self.root)
        root_depth = len(root_path.parts)

        for dirpath, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error,
                                            followlinks=False):
            # Depth of entries listed in this directory
            depth = len(Path(dirpath).parts) - root_depth + 1

            # Prune subdirectories BEFORE os.walk enters them
            if self.max_depth is not None and depth >= self.max_depth:
                dirs[:] = []
            elif self.exclude_hidden:
                dirs[:] = [d for d in dirs if not self._is_hidden(d)]

            for filename in files:
                if self.exclude_hidden and self._is_hidden(filename):
                    continue
                record = self._process_file(os.path.join(dirpath, filename))
                if record is not None:
                    yield record

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory: {error}")

    @staticmethod
    def _is_hidden(name: str) -> bool:
        return name.startswith(HIDDEN_PREFIX)

    def _process_file(self, path: str) -> Optional[FileRecord]:
        """
        Return a FileRecord if `path` is a regular file passing the size filter.
        Symbolic links are checked with lstat and never followed.
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if stat.S_ISLNK(st.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None

        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        if not self._size_passes(st.st_size):
            logger.debug(f"Skipping {path} (size {st.st_size} bytes outside range)")
            return None

        return FileRecord(path=path, size=st.st_size)

    def _size_passes(self, size: int) -> bool:
        """
        Check if file size is within configured limits.
        Args:
            size: File size in bytes
        Returns:
            True if file meets size criteria
        """
        if self.min_size is not None and size < self.min_size:
            return False
        if self.max_size is not None and size > self.max_size:
            return False
        return True
