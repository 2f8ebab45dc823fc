"""
Feature Clustering - Core Package

Unsupervised clustering of feature vectors, or of arbitrary items mapped to
feature vectors.

This package provides:
- Point abstraction and distance measures
- Generic greedy, random and k-means clustering engines
- Pairwise distance caching with median threshold and medoids
- Automatic, greedy, k-means and spectral clusterers behind one facade
"""

__version__ = "0.1.0"

from .algorithms import Point, PointFactory, DistanceMeasure, SQUARED_EUCLIDEAN
from .clusterers import (
    FeatureBasedClusterer,
    new_automatic,
    new_greedy,
    new_kmeans,
    new_spectral,
    create_clusterer,
)

# Explicitly import subpackages so feature_clustering.algorithms etc. are
# available after a plain ``import feature_clustering``
from . import algorithms
from . import clusterers
from . import utils

__all__ = [
    "Point",
    "PointFactory",
    "DistanceMeasure",
    "SQUARED_EUCLIDEAN",
    "FeatureBasedClusterer",
    "new_automatic",
    "new_greedy",
    "new_kmeans",
    "new_spectral",
    "create_clusterer",
    "algorithms",
    "clusterers",
    "utils",
]
