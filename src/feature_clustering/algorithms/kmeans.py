"""
Generalised k-means (Lloyd's algorithm).

The engine is parametrised by three functions rather than by a data type:
an initialiser that yields the seed centroids (and thereby k), an updater
that computes a centroid from cluster members, and a distance function.
"""

from __future__ import annotations

import math
from typing import Callable, Collection, List, Set, TypeVar

from .base import ClusteringAlgorithm
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_MIN_ITERATIONS = 5
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_TOLERANCE = 1e-4


def iteration_limit(
    n: int,
    min_iterations: int = DEFAULT_MIN_ITERATIONS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> int:
    """Lloyd iteration bound: ``max(min, min(round(sqrt(n)), max))``."""
    rounded = int(math.floor(math.sqrt(n) + 0.5))
    return max(min_iterations, min(rounded, max_iterations))


class GeneralisedKMeans(ClusteringAlgorithm[T]):
    """
    Lloyd's algorithm over arbitrary items.

    Each round assigns every item to its nearest centroid (lowest index wins
    ties), then recomputes the centroid of every non-empty cluster. The run
    stops when no centroid moved more than ``tolerance`` or when the
    iteration limit is reached. ``iterations`` holds the rounds used by the
    last run.
    """

    def __init__(
        self,
        initialiser: Callable[[Collection[T]], List[T]],
        updater: Callable[[Collection[T]], T],
        distance: Callable[[T, T], float],
        min_iterations: int = DEFAULT_MIN_ITERATIONS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ):
        self.initialiser = initialiser
        self.updater = updater
        self.distance = distance
        self.min_iterations = min_iterations
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.iterations = 0

    def _converged(self, previous: T, current: T) -> bool:
        return abs(self.distance(previous, current)) <= self.tolerance

    def cluster(self, input: Collection[T]) -> List[Set[T]]:
        """
        Run Lloyd's algorithm.

        Args:
            input: Items to cluster

        Returns:
            One set per initial centroid; clusters that never attracted a
            member are empty

        Raises:
            ValueError: If the initialiser yields no centroids for a
                non-empty input
        """
        items = list(input)
        centroids = list(self.initialiser(items))
        k = len(centroids)
        self.iterations = 0

        if not items:
            return [set() for _ in range(k)]
        if k == 0:
            raise ValueError("Initialiser produced no centroids for a non-empty input")

        limit = iteration_limit(len(items), self.min_iterations, self.max_iterations)
        buckets: List[List[T]] = [[] for _ in range(k)]

        converged = False
        while not converged and self.iterations < limit:
            self.iterations += 1
            for bucket in buckets:
                bucket.clear()

            for item in items:
                best = 0
                best_distance = self.distance(item, centroids[0])
                for j in range(1, k):
                    d = self.distance(item, centroids[j])
                    if d < best_distance:
                        best = j
                        best_distance = d
                buckets[best].append(item)

            converged = True
            for j, bucket in enumerate(buckets):
                if not bucket:
                    continue
                updated = self.updater(bucket)
                if not self._converged(centroids[j], updated):
                    converged = False
                centroids[j] = updated

        logger.debug(
            "k-means: n=%d, k=%d, %d/%d iterations, converged=%s",
            len(items),
            k,
            self.iterations,
            limit,
            converged,
        )
        return [set(bucket) for bucket in buckets]
