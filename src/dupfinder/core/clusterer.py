"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/clusterer.py
Turns collision-size buckets into clusters of byte-identical files.

ALGORITHM
---------
For every collision size (smallest first) the bucket is walked in insertion order:
  • the earliest path not yet matched becomes the representative
  • every later unmatched path is compared against the representative only
  • matches join the cluster and are recorded, so they are never compared again
    and never start a cluster of their own
  • a cluster is emitted only when the representative matched at least one path

Members are compared to the representative, not to each other. Byte equality is
transitive, so every member of a cluster is identical to every other member.
The record of matched paths lives for one collision size only.
"""

from typing import List, Set, Optional, Callable
import logging

from dupfinder.core.models import SizeIndex, Cluster
from dupfinder.core.interfaces import Clusterer, FileComparator
from dupfinder.core.comparator import ByteComparator

logger = logging.getLogger(__name__)


class DuplicateClusterer(Clusterer):
    """
    Pairwise matcher over same-size buckets.
    Uses an injected FileComparator for flexibility and testability.
    """

    def __init__(self, comparator: FileComparator = None):
        self.comparator = comparator or ByteComparator()
        self.comparisons = 0

    def run(self,
            index: SizeIndex,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> List[Cluster]:
        """
        Compare files inside every collision size of the index.
        Returns clusters in the order they were formed.
        """
        clusters: List[Cluster] = []
        self.comparisons = 0
        total_groups = len(index.collision_sizes)

        for done, (size, paths) in enumerate(index.iter_collisions(), 1):
            group_clusters = self._cluster_bucket(size, paths)
            clusters.extend(group_clusters)
            logger.debug(f"Size {size}: {len(paths)} files, {len(group_clusters)} clusters")

            if progress_callback:
                progress_callback('clustering', done, total_groups)

        logger.info(f"Found {len(clusters)} clusters after {self.comparisons} comparisons")
        return clusters

    def _cluster_bucket(self, size: int, paths: List[str]) -> List[Cluster]:
        """Clusters one bucket of same-size paths."""
        clusters: List[Cluster] = []
        matched: Set[str] = set()

        for i, representative in enumerate(paths):
            if representative in matched:
                continue

            members = [representative]
            for candidate in paths[i + 1:]:
                if candidate in matched:
                    continue
                self.comparisons += 1
                if self.comparator.equal(representative, candidate):
                    members.append(candidate)
                    matched.add(candidate)

            if len(members) > 1:
                matched.add(representative)
                clusters.append(Cluster(size=size, paths=members))

        return clusters
