"""
Shared fixtures for duplicate finder tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys
import logging

# Add src/ to sys.path so 'dupfinder' is importable without installation
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate search scenarios:
    - 2 identical 1KB files plus a third copy in a subdirectory
    - 2 identical 2KB files
    - 2 same-size files with different content (1500 bytes)
    - 1 file with a unique size
    - 2 empty files
    """
    files = {}

    # Cluster #1 (1KB of 'A'), third copy lives in subdir/
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Cluster #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size, different content
    files["same_size_1"] = temp_dir / "same_size_1.txt"
    files["same_size_1"].write_bytes(b"C" * 1500)
    files["same_size_2"] = temp_dir / "same_size_2.txt"
    files["same_size_2"].write_bytes(b"D" * 1500)

    # Unique size
    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"E" * 2500)

    # Empty files (equal to each other)
    files["empty_a"] = temp_dir / "empty_a.txt"
    files["empty_a"].write_bytes(b"")
    files["empty_b"] = temp_dir / "empty_b.txt"
    files["empty_b"].write_bytes(b"")

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


@pytest.fixture
def make_file(temp_dir):
    """Factory writing bytes to a path relative to temp_dir, creating parents."""
    def _make(relative: str, content: bytes) -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path
    return _make


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; put it back after every test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
