"""
Random partitioning into a fixed number of buckets.

Serves as a baseline and as the default k-means seeding: ``centroids``
returns one member from each of k non-empty random buckets.
"""

from __future__ import annotations

from typing import Collection, List, Optional, Set, TypeVar, Union
import numpy as np

from .base import ClusteringAlgorithm
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_ATTEMPTS = 100


class RandomClustering(ClusteringAlgorithm[T]):
    """
    Uniformly random assignment of items to exactly k buckets.

    Usage:
        seeding = RandomClustering(3, rng=np.random.default_rng(0))
        seeds = seeding.centroids(points)
    """

    def __init__(
        self,
        k: int,
        rng: Optional[Union[np.random.Generator, int]] = None,
        max_attempts: int = DEFAULT_ATTEMPTS,
    ):
        """
        Args:
            k: Number of buckets
            rng: Random generator, or a seed for a new one
            max_attempts: Repartitions tried in ``centroids`` before falling
                back to sampling k distinct items

        Raises:
            ValueError: If k < 1 or max_attempts < 1
        """
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.k = k
        self.max_attempts = max_attempts
        if isinstance(rng, np.random.Generator):
            self.rng = rng
        else:
            self.rng = np.random.default_rng(rng)

    def _partition(self, items: List[T]) -> List[List[T]]:
        buckets: List[List[T]] = [[] for _ in range(self.k)]
        for item, index in zip(items, self.rng.integers(0, self.k, size=len(items))):
            buckets[int(index)].append(item)
        return buckets

    def cluster(self, input: Collection[T]) -> List[Set[T]]:
        return [set(bucket) for bucket in self._partition(list(input))]

    def centroids(self, input: Collection[T]) -> List[T]:
        """
        Pick one seed from each of k non-empty random buckets.

        With no more than k items every item is its own seed.

        Returns:
            List of seed items (length k, or the item count when smaller)
        """
        items = list(input)
        if len(items) <= self.k:
            return items

        for _ in range(self.max_attempts):
            buckets = self._partition(items)
            if all(buckets):
                return [bucket[0] for bucket in buckets]

        logger.warning(
            "No partition with %d non-empty buckets after %d attempts; "
            "sampling distinct seeds instead",
            self.k,
            self.max_attempts,
        )
        chosen = self.rng.choice(len(items), size=self.k, replace=False)
        return [items[int(i)] for i in chosen]
