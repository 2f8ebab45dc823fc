"""
Clustering engines and their building blocks.

Generic engines (greedy, random, generalised k-means) work on any item type
through function-valued parameters; the Point-specific pieces (points,
distance measures, the distance cache, eigen-decomposition) supply those
functions for feature-vector clustering.
"""

from .point import Point, PointFactory, convert, mean, squared_euclidean
from .distance import (
    DistanceMeasure,
    SQUARED_EUCLIDEAN,
    EUCLIDEAN,
    MANHATTAN,
    CHEBYSHEV,
    COSINE,
    DISTANCE_MEASURES,
    get_distance_measure,
    resolve_measure,
)
from .base import ClusteringAlgorithm
from .greedy import GreedyClustering
from .random_clustering import RandomClustering
from .kmeans import GeneralisedKMeans, iteration_limit
from .distance_cache import PointDistanceCache
from .eigen import symmetric_eigendecompose, numerical_rank
from .metrics import partition_labels, adjusted_rand_index, silhouette_score

__all__ = [
    # Points
    "Point",
    "PointFactory",
    "convert",
    "mean",
    "squared_euclidean",
    # Distance measures
    "DistanceMeasure",
    "SQUARED_EUCLIDEAN",
    "EUCLIDEAN",
    "MANHATTAN",
    "CHEBYSHEV",
    "COSINE",
    "DISTANCE_MEASURES",
    "get_distance_measure",
    "resolve_measure",
    # Engines
    "ClusteringAlgorithm",
    "GreedyClustering",
    "RandomClustering",
    "GeneralisedKMeans",
    "iteration_limit",
    "PointDistanceCache",
    # Spectral support
    "symmetric_eigendecompose",
    "numerical_rank",
    # Metrics
    "partition_labels",
    "adjusted_rand_index",
    "silhouette_score",
]
