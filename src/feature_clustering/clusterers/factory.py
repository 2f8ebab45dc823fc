"""
Clusterer Factory - Creates clustering strategies by name.

The ``new_*`` functions cover the four strategies directly;
``create_clusterer`` selects one by name so callers can switch strategies
from configuration.

Usage:
    clusterer = new_automatic()
    clusters = clusterer.cluster(items, extractor)

    clusterer = create_clusterer("kmeans", k=3, measure="euclidean")
"""

from typing import Optional

from ..algorithms.distance import MeasureLike
from ..config import ClusteringConfig
from .automatic import AutomaticClusterer
from .base import FeatureBasedClusterer
from .greedy import GreedyClusterer
from .kmeans import KMeansClusterer
from .spectral import SpectralClusterer

STRATEGIES = ["automatic", "greedy", "kmeans", "spectral"]


def new_automatic(
    measure: MeasureLike = None, cfg: Optional[ClusteringConfig] = None
) -> AutomaticClusterer:
    """Automatic clusterer; k and the threshold come from distance statistics."""
    return AutomaticClusterer(measure, cfg)


def new_greedy(
    threshold: float,
    measure: MeasureLike = None,
    cfg: Optional[ClusteringConfig] = None,
) -> GreedyClusterer:
    """
    Greedy, single-pass clusterer.

    Args:
        threshold: Maximum distance for joining an existing cluster, in the
            units of the measure
        measure: Distance measure (defaults to the configured one)
        cfg: Tuning parameters
    """
    return GreedyClusterer(threshold, measure, cfg)


def new_kmeans(
    k: int,
    measure: MeasureLike = None,
    cfg: Optional[ClusteringConfig] = None,
    rng=None,
) -> KMeansClusterer:
    """K-means clusterer with k >= 1 clusters."""
    return KMeansClusterer(k, measure, cfg, rng=rng)


def new_spectral(
    k: int,
    measure: MeasureLike = None,
    cfg: Optional[ClusteringConfig] = None,
    rng=None,
) -> SpectralClusterer:
    """Spectral clusterer (Gaussian kernel, normalised Laplacian), k >= 1."""
    return SpectralClusterer(k, measure, cfg, rng=rng)


def create_clusterer(
    strategy: str,
    *,
    k: Optional[int] = None,
    threshold: Optional[float] = None,
    measure: MeasureLike = None,
    cfg: Optional[ClusteringConfig] = None,
    rng=None,
) -> FeatureBasedClusterer:
    """
    Create a clusterer by strategy name.

    Args:
        strategy: One of ``get_available_strategies()``
        k: Number of clusters (kmeans, spectral)
        threshold: Join threshold (greedy)
        measure: Distance measure
        cfg: Tuning parameters
        rng: Random generator or seed (kmeans, spectral)

    Returns:
        FeatureBasedClusterer instance

    Raises:
        ValueError: If the strategy is unknown or a required parameter is
            missing
    """
    strategy = strategy.lower()

    if strategy == "automatic":
        return new_automatic(measure, cfg)
    if strategy == "greedy":
        if threshold is None:
            raise ValueError("The greedy strategy requires a threshold")
        return new_greedy(threshold, measure, cfg)
    if strategy in ("kmeans", "spectral"):
        if k is None:
            raise ValueError(f"The {strategy} strategy requires k")
        if strategy == "kmeans":
            return new_kmeans(k, measure, cfg, rng=rng)
        return new_spectral(k, measure, cfg, rng=rng)

    raise ValueError(
        f"Unknown strategy: {strategy}. "
        f"Available strategies: {', '.join(get_available_strategies())}"
    )


def get_available_strategies() -> list[str]:
    """Return the supported strategy names."""
    return list(STRATEGIES)
