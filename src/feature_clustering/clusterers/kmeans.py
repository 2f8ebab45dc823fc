"""K-means clusterer with random seeding and mean centroids."""

from __future__ import annotations

from typing import Collection, List, Optional, Set, Union
import numpy as np

from ..algorithms.distance import MeasureLike
from ..algorithms.kmeans import GeneralisedKMeans
from ..algorithms.point import Point, mean
from ..algorithms.random_clustering import RandomClustering
from ..config import ClusteringConfig
from .base import FeatureBasedClusterer


class KMeansClusterer(FeatureBasedClusterer):
    """
    Lloyd's algorithm with k fixed up front.

    Seeds are one random member from each of k non-empty random buckets;
    centroids are coordinate-wise means, compared with the distance measure
    directly (means are synthetic points, so the cache does not apply).
    """

    def __init__(
        self,
        k: int,
        measure: MeasureLike = None,
        cfg: Optional[ClusteringConfig] = None,
        rng: Optional[Union[np.random.Generator, int]] = None,
    ):
        """
        Args:
            k: Number of clusters (>= 1)
            measure: Distance measure
            cfg: Tuning parameters
            rng: Random generator or seed. Defaults to the configured seed.

        Raises:
            ValueError: If k < 1
        """
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        super().__init__(measure, cfg)
        self.k = k
        self.seeding = RandomClustering(
            k,
            rng=self.cfg.seed if rng is None else rng,
            max_attempts=self.cfg.random_attempts,
        )
        self.engine = GeneralisedKMeans(
            self.seeding.centroids,
            mean,
            self.measure,
            min_iterations=self.cfg.min_iterations,
            max_iterations=self.cfg.max_iterations,
            tolerance=self.cfg.tolerance,
        )

    def cluster_points(self, points: Collection[Point]) -> List[Set[Point]]:
        points = list(points)
        if not points:
            return []
        clusters = self.engine.cluster(points)
        # fewer points than k: the missing clusters stay empty
        clusters.extend(set() for _ in range(self.k - len(clusters)))
        return clusters
