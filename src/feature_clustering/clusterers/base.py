"""
Base class for feature-based clusterers.

A FeatureBasedClusterer clusters arbitrary items by mapping each one to a
Point through a caller-supplied extractor, clustering the Points, and mapping
the result back to the items.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import (
    Callable,
    Collection,
    Dict,
    Hashable,
    List,
    Optional,
    Sequence,
    Set,
    TypeVar,
)
import numpy as np

from ..algorithms.base import ClusteringAlgorithm
from ..algorithms.distance import DistanceMeasure, MeasureLike, resolve_measure
from ..algorithms.distance_cache import PointDistanceCache
from ..algorithms.point import Point
from ..config import ClusteringConfig, config
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=Hashable)


class FeatureBasedClusterer(ClusteringAlgorithm[Point]):
    """
    Abstract base class for clustering items represented by feature vectors.

    Subclasses implement ``cluster_points`` over Points with ids ``0..n-1``.
    Each instance owns a PointDistanceCache, so instances are not
    thread-safe; use one instance per concurrent call.
    """

    def __init__(
        self,
        measure: MeasureLike = None,
        cfg: Optional[ClusteringConfig] = None,
    ):
        """
        Args:
            measure: Distance measure, measure name or plain distance
                function. Defaults to the configured measure.
            cfg: Tuning parameters. Defaults to ``config.clustering``.
        """
        self.cfg = cfg or config.clustering
        self.measure: DistanceMeasure = resolve_measure(
            measure, self.cfg.distance_measure
        )
        self.cache = PointDistanceCache(
            refresh_ratio=self.cfg.refresh_ratio,
            min_share_of_total=self.cfg.min_share_of_total,
            min_share_of_largest=self.cfg.min_share_of_largest,
        )

    @abstractmethod
    def cluster_points(self, points: Collection[Point]) -> List[Set[Point]]:
        """
        Cluster Points whose ids are ``0..n-1``.

        Args:
            points: Points to cluster

        Returns:
            Partition of the points
        """
        pass

    def cluster(
        self,
        input: Collection,
        extractor: Optional[Callable[[T], Sequence[float]]] = None,
    ):
        """
        Cluster Points directly, or arbitrary items through an extractor.

        Without an extractor the input must be Points and the result is a
        ``List[Set[Point]]``. With an extractor each item gets a fresh
        sequential id and the result is a list of ``{item: feature_vector}``
        dicts, sorted by decreasing cluster size.

        Args:
            input: Points, or hashable items when an extractor is given
            extractor: Returns the feature vector of one item

        Returns:
            Partition of the input
        """
        if extractor is None:
            return self.cluster_points(input)
        return self.cluster_items(input, extractor)

    def cluster_items(
        self,
        items: Collection[T],
        extractor: Callable[[T], Sequence[float]],
    ) -> List[Dict[T, np.ndarray]]:
        """
        Cluster items by their extracted feature vectors.

        Args:
            items: Hashable items to cluster
            extractor: Returns a feature vector for an item

        Returns:
            List of clusters, each a dict from item to its float32 feature
            vector, sorted by decreasing size
        """
        originals: List[T] = []
        points: List[Point] = []
        for item in items:
            points.append(Point(len(originals), extractor(item)))
            originals.append(item)

        internal = self.cluster_points(points)

        result: List[Dict[T, np.ndarray]] = []
        for cluster in internal:
            result.append({originals[p.id]: p.coordinates for p in cluster})

        result.sort(key=len, reverse=True)
        return result

    # ------------------------------------------------------------------
    # Distance cache access for subclasses
    # ------------------------------------------------------------------

    def setup(self, points: Collection[Point]) -> None:
        """Cache all pairwise distances of *points* under the measure."""
        self.cache.setup(points, self.measure)

    def distance(self, point1: Point, point2: Point) -> float:
        return self.cache.distance(point1, point2)

    def centroid(self, cluster: Collection[Point]) -> Point:
        return self.cache.centroid(cluster)

    def initialiser(self, input: Collection[Point]) -> List[Point]:
        return self.cache.initialiser(input)

    def get_threshold(self) -> float:
        return self.cache.get_threshold()

    def is_squared(self) -> bool:
        """True if the measure already returns squared distances."""
        return self.measure.squared
