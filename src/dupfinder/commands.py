"""
Command orchestrator for a duplicate search.
The single entry point into the engine: index → cluster → statistics.
"""
import time
from typing import List, Optional, Callable, Tuple
from dupfinder.core.models import Cluster, ScanStats, SizeIndex
from dupfinder.core.interfaces import FileIndexer, Clusterer
from dupfinder.core.scanner import SizeIndexer
from dupfinder.core.clusterer import DuplicateClusterer


class DuplicateSearchCommand:
    """
    Orchestrates the whole duplicate search:
    1. Build the size index of the root directory
    2. Cluster files inside every collision size
    3. Collect statistics for the report

    Usage:
        command = DuplicateSearchCommand()
        clusters, stats = command.execute(
            "/data/photos",
            progress_callback=cli_progress_printer
        )
    """

    def __init__(self, indexer: FileIndexer = None, clusterer: Clusterer = None):
        self._indexer = indexer or SizeIndexer()
        self._clusterer = clusterer or DuplicateClusterer()
        self._index: Optional[SizeIndex] = None

    def execute(
            self,
            root_dir: str,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[Cluster], ScanStats]:
        """
        Run a duplicate search under `root_dir`.

        Args:
            root_dir: Directory to search recursively
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (clusters, statistics)

        Raises:
            PathNotFoundError: If root_dir does not exist
            NotADirectoryRootError: If root_dir is not a directory
        """
        start_time = time.time()

        self._index = self._indexer.build(root_dir, progress_callback=progress_callback)
        clusters = self._clusterer.run(self._index, progress_callback=progress_callback)

        stats = ScanStats.from_index(self._index)
        stats.record_clusters(clusters, comparisons=getattr(self._clusterer, "comparisons", 0))
        stats.total_time = time.time() - start_time

        return clusters, stats

    def get_index(self) -> Optional[SizeIndex]:
        """Index built by the last execute() call, or None before the first run."""
        return self._index
