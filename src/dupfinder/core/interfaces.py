"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.

Key Components:
---------------
- FileIndexer: walks a directory tree and buckets files by size.
- FileComparator: decides byte-for-byte equality of two files.
- Clusterer: turns collision-size buckets into clusters of identical files.
"""

from typing import Protocol, List, Optional, Callable
from dupfinder.core.models import SizeIndex, Cluster


class FileIndexer(Protocol):
    """
    Interface for scanning a directory tree into a SizeIndex.
    """
    def build(
        self,
        root_dir: str,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> SizeIndex:
        """
        Walk `root_dir` and index every regular file by size.

        Raises:
            PathNotFoundError: if root_dir does not exist.
        """
        ...


class FileComparator(Protocol):
    """Interface for byte-level file comparison."""
    def equal(self, path_a: str, path_b: str) -> bool:
        """True if both files hold the same bytes. Never raises for I/O failures."""
        ...


class Clusterer(Protocol):
    """
    Interface for grouping same-size files into clusters of identical content.
    """
    def run(
        self,
        index: SizeIndex,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[Cluster]:
        """
        Compare files inside every collision size of `index`.

        Returns:
            Clusters of two or more identical files, in formation order.
        """
        ...
