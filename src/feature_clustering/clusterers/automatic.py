"""
Automatic clusterer.

Determines the number of clusters from the data:

1. Caches all pairwise distances
2. Takes the median distance as threshold
3. Runs greedy clustering at that threshold to get candidate centroids
4. Drops candidates from very small clusters (this fixes k)
5. Refines with k-means, using medoids and cached distances
"""

from __future__ import annotations

from typing import Collection, List, Optional, Set

from ..algorithms.distance import MeasureLike
from ..algorithms.greedy import GreedyClustering
from ..algorithms.kmeans import GeneralisedKMeans
from ..algorithms.point import Point
from ..config import ClusteringConfig
from ..utils.logging_config import get_logger
from .base import FeatureBasedClusterer

logger = get_logger(__name__)


class AutomaticClusterer(FeatureBasedClusterer):
    """Greedy seeding at the median distance, refined by k-means."""

    def __init__(
        self,
        measure: MeasureLike = None,
        cfg: Optional[ClusteringConfig] = None,
    ):
        super().__init__(measure, cfg)
        self.k: Optional[int] = None

    def cluster_points(self, points: Collection[Point]) -> List[Set[Point]]:
        points = list(points)
        if not points:
            self.k = 0
            return []

        self.setup(points)
        seeds = self.initialiser(points)

        if not seeds:
            # every greedy cluster was too small to seed k-means
            logger.warning(
                "No greedy cluster survived the size filter for %d points; "
                "returning the greedy partition",
                len(points),
            )
            greedy = GreedyClustering(
                self.get_threshold(),
                self.centroid,
                self.distance,
                refresh_ratio=self.cfg.refresh_ratio,
            )
            clusters = greedy.cluster(points)
            self.k = len(clusters)
            return clusters

        self.k = len(seeds)
        logger.debug("Automatic clustering found k=%d for %d points", self.k, len(points))

        engine = GeneralisedKMeans(
            lambda _: seeds,
            self.centroid,
            self.distance,
            min_iterations=self.cfg.min_iterations,
            max_iterations=self.cfg.max_iterations,
            tolerance=self.cfg.tolerance,
        )
        return engine.cluster(points)
