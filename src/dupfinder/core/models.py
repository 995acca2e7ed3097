"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for size indexing, duplicate clusters and scan statistics.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Set, Iterator, Tuple, Any


# =============================
# Exceptions
# =============================

class DupFinderError(Exception):
    """Base class for all errors raised by the duplicate finder."""


class PathNotFoundError(DupFinderError):
    """Root directory does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Root directory does not exist: {path}")
        self.path = path


class NotADirectoryRootError(DupFinderError):
    """Root path exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Not a directory: {path}")
        self.path = path


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A regular file discovered during the walk.
    Immutable once recorded.
    """
    path: str
    size: int  # in bytes

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"File size cannot be negative: {self.size}")

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self.size}>"


class SizeIndex:
    """
    Maps file size to the ordered list of paths sharing that size.

    Insertion order inside a bucket is preserved: it decides which file becomes
    the representative of a cluster. A size enters `collision_sizes` the moment
    its bucket receives a second path and never leaves it.
    """

    def __init__(self):
        self.buckets: Dict[int, List[str]] = {}
        self.collision_sizes: Set[int] = set()

    def add(self, entry: FileEntry) -> None:
        bucket = self.buckets.setdefault(entry.size, [])
        bucket.append(entry.path)
        if len(bucket) > 1:
            self.collision_sizes.add(entry.size)

    def bucket(self, size: int) -> List[str]:
        """Paths of the given size, in insertion order (empty list if none)."""
        return list(self.buckets.get(size, []))

    def iter_collisions(self) -> Iterator[Tuple[int, List[str]]]:
        """Yields (size, paths) for every collision size, smallest size first."""
        for size in sorted(self.collision_sizes):
            yield size, self.buckets[size]

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self.buckets.values())

    @property
    def total_bytes(self) -> int:
        return sum(size * len(paths) for size, paths in self.buckets.items())

    def to_dict(self) -> Dict[int, List[str]]:
        return {size: list(paths) for size, paths in sorted(self.buckets.items())}

    def __len__(self):
        return self.file_count

    def __repr__(self):
        return f"<SizeIndex files={self.file_count}, sizes={len(self.buckets)}, collisions={len(self.collision_sizes)}>"


@dataclass
class Cluster:
    """
    Paths confirmed byte-identical to the cluster's representative.
    The representative is always the first path; the rest follow bucket order.
    """
    size: int
    paths: List[str] = field(default_factory=list)

    @property
    def representative(self) -> str:
        return self.paths[0]

    @property
    def wasted_bytes(self) -> int:
        """Bytes taken by the copies beyond the first one."""
        return self.size * (len(self.paths) - 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"size": self.size, "paths": list(self.paths)}

    def __len__(self):
        return len(self.paths)

    def __repr__(self):
        return f"<Cluster size={self.size}, count={len(self.paths)}>"


@dataclass
class ScanStats:
    """
    Totals gathered for a single run. Reporting only: the clusters never depend on it.
    """
    files_scanned: int = 0
    total_bytes: int = 0
    collision_sizes: int = 0
    comparisons: int = 0
    clusters_found: int = 0
    duplicate_files: int = 0
    total_time: float = 0.0

    @classmethod
    def from_index(cls, index: SizeIndex) -> 'ScanStats':
        return cls(
            files_scanned=index.file_count,
            total_bytes=index.total_bytes,
            collision_sizes=len(index.collision_sizes),
        )

    def record_clusters(self, clusters: List[Cluster], comparisons: int) -> None:
        self.clusters_found = len(clusters)
        self.duplicate_files = sum(len(c) for c in clusters)
        self.comparisons = comparisons

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_scanned": self.files_scanned,
            "total_bytes": self.total_bytes,
            "collision_sizes": self.collision_sizes,
            "comparisons": self.comparisons,
            "clusters_found": self.clusters_found,
            "duplicate_files": self.duplicate_files,
            "total_time": self.total_time,
        }
