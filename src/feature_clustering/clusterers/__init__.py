"""
Feature-based clustering strategies.

All strategies implement the FeatureBasedClusterer interface: they cluster
Points directly, or arbitrary items through a feature extractor.
"""

from .base import FeatureBasedClusterer
from .automatic import AutomaticClusterer
from .greedy import GreedyClusterer
from .kmeans import KMeansClusterer
from .spectral import (
    SpectralClusterer,
    similarity_matrix,
    normalised_laplacian,
    normalise_rows,
)
from .factory import (
    new_automatic,
    new_greedy,
    new_kmeans,
    new_spectral,
    create_clusterer,
    get_available_strategies,
)

__all__ = [
    "FeatureBasedClusterer",
    "AutomaticClusterer",
    "GreedyClusterer",
    "KMeansClusterer",
    "SpectralClusterer",
    "similarity_matrix",
    "normalised_laplacian",
    "normalise_rows",
    "new_automatic",
    "new_greedy",
    "new_kmeans",
    "new_spectral",
    "create_clusterer",
    "get_available_strategies",
]
