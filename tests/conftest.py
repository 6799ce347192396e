"""
Shared fixtures for duplicate finder tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dupfinder' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate detection scenarios:
    - 2 identical 1KB files + 1 more copy in a subdirectory
    - 2 identical 2KB files
    - 2 unique files with unique sizes
    - 1 file with the same size as the 1KB group but different content
    - 1 hidden file and 1 hidden directory holding a 2KB copy
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate set #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique sizes
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Same size as set #1, different content
    files["same_size"] = temp_dir / "same_size.txt"
    files["same_size"].write_bytes(b"Z" * 1024)

    # Subdirectory with a third copy of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    # Hidden entries
    files["hidden_file"] = temp_dir / ".hidden.txt"
    files["hidden_file"].write_bytes(b"H" * 700)
    hidden_dir = temp_dir / ".cache"
    hidden_dir.mkdir()
    files["hidden_dup"] = hidden_dir / "copy.txt"
    files["hidden_dup"].write_bytes(content_b)

    return files


@pytest.fixture
def abc_dir(temp_dir) -> Path:
    """a and b hold 'X', c holds 'Y' (all 1 byte)."""
    (temp_dir / "a").write_bytes(b"X")
    (temp_dir / "b").write_bytes(b"X")
    (temp_dir / "c").write_bytes(b"Y")
    return temp_dir
