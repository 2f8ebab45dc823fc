"""
Greedy single-pass clustering.

Each item joins the nearest existing centroid within the distance threshold,
or starts a new cluster. Centroids are refreshed lazily: a cluster's centroid
is recomputed only once the number of joins since the last refresh reaches
``refresh_ratio`` of its size.
"""

from __future__ import annotations

import math
from typing import Callable, Collection, List, Set, TypeVar

from .base import ClusteringAlgorithm
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_REFRESH_RATIO = 1.0 / 3.0


class GreedyClustering(ClusteringAlgorithm[T]):
    """
    Generic greedy clustering with a fixed join threshold.

    The number of clusters is data dependent. Output is deterministic for a
    fixed input order, distance function and threshold.

    After ``cluster`` returns, ``centroids`` and ``cluster_sizes`` describe
    the clusters of that run (same order as the returned partition).
    """

    def __init__(
        self,
        threshold: float,
        updater: Callable[[Collection[T]], T],
        distance: Callable[[T, T], float],
        refresh_ratio: float = DEFAULT_REFRESH_RATIO,
    ):
        """
        Args:
            threshold: Maximum distance for joining an existing cluster
            updater: Computes a centroid from the members of a cluster
            distance: Distance between two items
            refresh_ratio: Updates-per-member ratio that triggers a centroid
                recomputation

        Raises:
            ValueError: If threshold is negative/NaN or refresh_ratio is not
                in (0, 1]
        """
        if math.isnan(threshold) or threshold < 0.0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        if not 0.0 < refresh_ratio <= 1.0:
            raise ValueError(f"refresh_ratio must be in (0, 1], got {refresh_ratio}")
        self.threshold = threshold
        self.updater = updater
        self.distance = distance
        self.refresh_ratio = refresh_ratio
        self.centroids: List[T] = []
        self.cluster_sizes: List[int] = []

    def cluster(self, input: Collection[T]) -> List[Set[T]]:
        centroids: List[T] = []
        members: List[List[T]] = []
        updates: List[int] = []
        refreshes = 0

        for item in input:
            best = -1
            best_distance = math.inf
            for i, centroid in enumerate(centroids):
                d = self.distance(item, centroid)
                if d <= self.threshold and d < best_distance:
                    best = i
                    best_distance = d

            if best < 0:
                centroids.append(item)
                members.append([item])
                updates.append(0)
                continue

            cluster = members[best]
            cluster.append(item)
            updates[best] += 1
            if updates[best] / len(cluster) >= self.refresh_ratio:
                centroids[best] = self.updater(cluster)
                updates[best] = 0
                refreshes += 1

        self.centroids = centroids
        self.cluster_sizes = [len(m) for m in members]

        logger.debug(
            "Greedy clustering: %d items -> %d clusters (threshold=%s, %d refreshes)",
            sum(self.cluster_sizes),
            len(members),
            self.threshold,
            refreshes,
        )
        return [set(m) for m in members]
