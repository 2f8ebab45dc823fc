"""
Pairwise distance cache for one point set.

``setup`` computes every pairwise distance once into a lower-triangular
buffer indexed by point id; the cache then serves O(1) distance lookups,
the median distance (used as a clustering threshold), medoid centroids and
the greedy seed initialiser used by automatic clustering.

The cache is not thread-safe and must be set up again whenever the point set
or the distance function changes.
"""

from __future__ import annotations

from typing import Callable, Collection, List
import numpy as np

from .greedy import DEFAULT_REFRESH_RATIO, GreedyClustering
from .point import Point
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MIN_SHARE_OF_TOTAL = 0.01
DEFAULT_MIN_SHARE_OF_LARGEST = 0.02


class PointDistanceCache:
    """
    Cached pairwise distances between Points with ids in ``[0, n)``.

    Usage:
        cache = PointDistanceCache()
        cache.setup(points, squared_euclidean)
        cache.distance(points[0], points[1])
        threshold = cache.get_threshold()
    """

    def __init__(
        self,
        refresh_ratio: float = DEFAULT_REFRESH_RATIO,
        min_share_of_total: float = DEFAULT_MIN_SHARE_OF_TOTAL,
        min_share_of_largest: float = DEFAULT_MIN_SHARE_OF_LARGEST,
    ):
        self.refresh_ratio = refresh_ratio
        self.min_share_of_total = min_share_of_total
        self.min_share_of_largest = min_share_of_largest
        self._buffer = np.zeros((0, 0), dtype=np.float64)
        self._samples = np.zeros(0, dtype=np.float64)

    @property
    def size(self) -> int:
        """Number of points the buffer is allocated for."""
        return self._buffer.shape[0]

    @property
    def samples(self) -> np.ndarray:
        """Copy of the pairwise distances recorded by the last setup."""
        return self._samples.copy()

    def setup(
        self,
        points: Collection[Point],
        distance: Callable[[Point, Point], float],
    ) -> None:
        """
        Compute and cache all pairwise distances.

        The buffer is reallocated only when the point count changes.

        Args:
            points: Points with ids in ``[0, len(points))``
            distance: Distance function to cache

        Raises:
            ValueError: If a point id falls outside ``[0, len(points))``
        """
        pts = list(points)
        n = len(pts)
        for p in pts:
            if not 0 <= p.id < n:
                raise ValueError(
                    f"Point id {p.id} outside [0, {n}); ids must be contiguous"
                )

        if self._buffer.shape[0] != n:
            self._buffer = np.zeros((n, n), dtype=np.float64)
        else:
            self._buffer.fill(0.0)

        samples: List[float] = []
        for a in range(n):
            p = pts[a]
            for b in range(a):
                q = pts[b]
                if p.id == q.id:
                    continue
                d = float(distance(p, q))
                self._buffer[max(p.id, q.id), min(p.id, q.id)] = d
                samples.append(d)
        self._samples = np.asarray(samples, dtype=np.float64)

        logger.debug(
            "Cached %d pairwise distances for %d points (median=%s)",
            len(samples),
            n,
            self.get_threshold(),
        )

    def distance(self, point1: Point, point2: Point) -> float:
        """Cached distance; 0 when both points share an id."""
        if point1.id == point2.id:
            return 0.0
        if point1.id > point2.id:
            return float(self._buffer[point1.id, point2.id])
        return float(self._buffer[point2.id, point1.id])

    def to_matrix(self) -> np.ndarray:
        """Full symmetric (n, n) distance matrix indexed by point id."""
        return self._buffer + self._buffer.T

    def get_threshold(self) -> float:
        """Median of the distances recorded by the last setup (0.0 if none)."""
        if self._samples.size == 0:
            return 0.0
        return float(np.median(self._samples))

    def centroid(self, cluster: Collection[Point]) -> Point:
        """
        Medoid of a cluster.

        The member with the smallest summed distance to all other members;
        the first such member in iteration order wins ties.

        Raises:
            ValueError: If the cluster is empty
        """
        members = list(cluster)
        if not members:
            raise ValueError("Cannot compute the medoid of an empty cluster")
        if len(members) == 1:
            return members[0]
        ids = np.fromiter((p.id for p in members), dtype=np.intp, count=len(members))
        block = self._buffer[np.ix_(ids, ids)]
        sums = (block + block.T).sum(axis=1)
        return members[int(np.argmin(sums))]

    def initialiser(self, input: Collection[Point]) -> List[Point]:
        """
        Seed centroids from a greedy pass at the median threshold.

        Greedy clusters are kept only if larger than one member, larger than
        ``min_share_of_total`` of the input and larger than
        ``min_share_of_largest`` of the biggest greedy cluster.

        Returns:
            Centroids of the surviving clusters (their count fixes k)
        """
        points = list(input)
        greedy = GreedyClustering(
            self.get_threshold(),
            self.centroid,
            self.distance,
            refresh_ratio=self.refresh_ratio,
        )
        greedy.cluster(points)

        total = len(points)
        sizes = greedy.cluster_sizes
        largest = max(sizes) if sizes else 0

        seeds: List[Point] = []
        for centroid, size in zip(greedy.centroids, sizes):
            if (
                size > 1
                and size / total > self.min_share_of_total
                and size / largest > self.min_share_of_largest
            ):
                seeds.append(centroid)

        logger.debug(
            "Greedy seeding kept %d of %d clusters", len(seeds), len(sizes)
        )
        return seeds
