"""Greedy single-pass clusterer over cached distances."""

from __future__ import annotations

import math
from typing import Collection, List, Optional, Set

from ..algorithms.distance import MeasureLike
from ..algorithms.greedy import GreedyClustering
from ..algorithms.point import Point
from ..config import ClusteringConfig
from .base import FeatureBasedClusterer


class GreedyClusterer(FeatureBasedClusterer):
    """
    Each point joins the nearest existing medoid within ``threshold``,
    otherwise it starts a new cluster. The threshold is in the units of the
    distance measure.
    """

    def __init__(
        self,
        threshold: float,
        measure: MeasureLike = None,
        cfg: Optional[ClusteringConfig] = None,
    ):
        if math.isnan(threshold) or threshold < 0.0:
            raise ValueError(f"threshold must be >= 0, got {threshold}")
        super().__init__(measure, cfg)
        self.threshold = threshold

    def cluster_points(self, points: Collection[Point]) -> List[Set[Point]]:
        points = list(points)
        if not points:
            return []
        self.setup(points)
        greedy = GreedyClustering(
            self.threshold,
            self.centroid,
            self.distance,
            refresh_ratio=self.cfg.refresh_ratio,
        )
        return greedy.cluster(points)
