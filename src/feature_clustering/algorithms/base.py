"""
Base class for clustering algorithms.

Every engine and every facade strategy exposes the same ``cluster`` entry
point, returning a partition as an ordered list of disjoint sets.
"""

from abc import ABC, abstractmethod
from typing import Collection, Generic, List, Set, TypeVar

T = TypeVar("T")


class ClusteringAlgorithm(ABC, Generic[T]):
    """
    Abstract base class for clustering algorithms over items of type T.

    Implementations are stateful and not thread-safe; use one instance per
    concurrent call.
    """

    @abstractmethod
    def cluster(self, input: Collection[T]) -> List[Set[T]]:
        """
        Partition the input.

        Args:
            input: Items to cluster

        Returns:
            List of disjoint sets whose union is the input
        """
        pass
