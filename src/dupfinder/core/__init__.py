"""
Core duplicate-finding engine: size indexer, byte comparator and clusterer.

- SizeIndexer: recursive directory walk into a size → paths index
- ByteComparator: staged, growing-buffer byte comparison of two files
- DuplicateClusterer: pairwise matching inside every collision size
- Models: FileEntry, SizeIndex, Cluster, ScanStats and error types

Pure Python, standard library only.
"""

from .scanner import SizeIndexer
from .comparator import ByteComparator, BUFFER_STAGES, buffer_size_for_pass
from .clusterer import DuplicateClusterer
from .models import (
    FileEntry, SizeIndex, Cluster, ScanStats,
    DupFinderError, PathNotFoundError, NotADirectoryRootError)

__all__ = [
    "SizeIndexer",
    "ByteComparator",
    "BUFFER_STAGES",
    "buffer_size_for_pass",
    "DuplicateClusterer",
    "FileEntry",
    "SizeIndex",
    "Cluster",
    "ScanStats",
    "DupFinderError",
    "PathNotFoundError",
    "NotADirectoryRootError",
]
