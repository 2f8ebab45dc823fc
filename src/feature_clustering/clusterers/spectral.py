"""
Spectral clusterer.

Builds a Gaussian-kernel similarity graph from cached distances, embeds the
points with the low-eigenvalue eigenvectors of the symmetric normalised
Laplacian, and clusters the embedding with k-means.
"""

from __future__ import annotations

from typing import Collection, List, Optional, Set, Union
import numpy as np

from ..algorithms.distance import MeasureLike
from ..algorithms.eigen import Eigensolver, symmetric_eigendecompose
from ..algorithms.kmeans import GeneralisedKMeans
from ..algorithms.point import Point, mean, squared_euclidean
from ..algorithms.random_clustering import RandomClustering
from ..config import ClusteringConfig
from ..utils.logging_config import get_logger
from .base import FeatureBasedClusterer

logger = get_logger(__name__)

Array2D = np.ndarray


def similarity_matrix(distances: Array2D, median: float, squared: bool) -> Array2D:
    """
    Gaussian kernel ``exp(-d² / denom)`` with a zero diagonal.

    ``denom`` is the median distance for squared measures and its square
    otherwise. When ``denom`` is zero (all points coincide, or most do)
    coinciding pairs get similarity 1 and all others 0.

    Args:
        distances: Symmetric (n, n) distance matrix
        median: Median pairwise distance
        squared: Whether the distances are already squared

    Returns:
        Symmetric (n, n) similarity matrix
    """
    d2 = distances if squared else distances * distances
    denom = median if squared else median * median
    if denom > 0.0:
        W = np.exp(-d2 / denom)
    else:
        W = (d2 == 0.0).astype(np.float64)
    np.fill_diagonal(W, 0.0)
    return W


def normalised_laplacian(W: Array2D) -> Array2D:
    """
    Symmetric normalised Laplacian ``I - D^-1/2 W D^-1/2``.

    Rows and columns with zero degree get a zero inverse-sqrt degree.
    """
    degrees = W.sum(axis=1)
    inv_sqrt = np.zeros_like(degrees)
    positive = degrees > 0.0
    inv_sqrt[positive] = 1.0 / np.sqrt(degrees[positive])
    return np.eye(W.shape[0]) - inv_sqrt[:, None] * W * inv_sqrt[None, :]


def normalise_rows(X: Array2D) -> Array2D:
    """Scale each row to unit Euclidean norm; all-zero rows stay zero."""
    norms = np.linalg.norm(X, axis=1, keepdims=True)
    return np.divide(X, norms, out=np.zeros_like(X), where=norms > 0.0)


class SpectralClusterer(FeatureBasedClusterer):
    """
    Spectral clustering with a fixed number of clusters.

    Input point ids must be contiguous in ``[0, n)``. After a run, ``rank``
    and ``effective_k`` hold the Laplacian rank and the embedding width.
    """

    def __init__(
        self,
        k: int,
        measure: MeasureLike = None,
        cfg: Optional[ClusteringConfig] = None,
        eigensolver: Optional[Eigensolver] = None,
        rng: Optional[Union[np.random.Generator, int]] = None,
    ):
        """
        Args:
            k: Number of clusters (>= 1)
            measure: Distance measure for the kernel
            cfg: Tuning parameters
            eigensolver: Symmetric eigen-decomposition returning
                ``(vectors, rank)``. Column 0 of ``vectors`` must belong to
                the LARGEST eigenvalue and column n-1 to the smallest; the
                embedding is taken from the last columns. A solver that
                sorts ascending, as ``numpy.linalg.eigh`` does, must reverse
                its columns first.
            rng: Random generator or seed for the k-means seeding

        Raises:
            ValueError: If k < 1
        """
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        super().__init__(measure, cfg)
        self.k = k
        self.eigensolver = eigensolver or symmetric_eigendecompose
        self.seeding = RandomClustering(
            k,
            rng=self.cfg.seed if rng is None else rng,
            max_attempts=self.cfg.random_attempts,
        )
        self.engine = GeneralisedKMeans(
            self.seeding.centroids,
            mean,
            squared_euclidean,
            min_iterations=self.cfg.min_iterations,
            max_iterations=self.cfg.max_iterations,
            tolerance=self.cfg.tolerance,
        )
        self.rank: Optional[int] = None
        self.effective_k: Optional[int] = None

    def cluster_points(self, points: Collection[Point]) -> List[Set[Point]]:
        """
        Raises:
            ValueError: If the point ids are not contiguous in ``[0, n)``
            RuntimeError: If an embedded point cannot be mapped back
        """
        points = list(points)
        n = len(points)

        lookup: List[Optional[Point]] = [None] * n
        for p in points:
            if not 0 <= p.id < n or lookup[p.id] is not None:
                raise ValueError(
                    f"Spectral clustering needs point ids contiguous in [0, {n}); "
                    f"got id {p.id}"
                )
            lookup[p.id] = p

        if n == 0:
            return []
        if n <= self.k:
            return [{p} for p in points]

        self.setup(points)
        W = similarity_matrix(
            self.cache.to_matrix(), self.get_threshold(), self.is_squared()
        )
        L = normalised_laplacian(W)

        vectors, rank = self.eigensolver(L)
        # extra eigenvectors absorb the zero-eigenvalue multiplicity of a
        # disconnected graph
        effective_k = max(n - rank, self.k)
        embedding = normalise_rows(np.asarray(vectors)[:, -effective_k:])
        self.rank = rank
        self.effective_k = effective_k

        logger.debug(
            "Spectral embedding: n=%d, rank=%d, effective_k=%d, k=%d",
            n,
            rank,
            effective_k,
            self.k,
        )

        embedded = [Point(i, embedding[i]) for i in range(n)]
        result: List[Set[Point]] = []
        for cluster in self.engine.cluster(embedded):
            mapped: Set[Point] = set()
            for e in cluster:
                original = lookup[e.id] if 0 <= e.id < n else None
                if original is None:
                    raise RuntimeError(
                        f"Embedded point id {e.id} has no original point"
                    )
                mapped.add(original)
            result.append(mapped)
        return result
