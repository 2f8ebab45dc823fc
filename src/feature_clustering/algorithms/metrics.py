"""
Partition quality metrics.

Compares partitions produced by different strategies (adjusted Rand index)
and scores a single partition against a distance function (silhouette).
"""

from __future__ import annotations

from typing import Callable, Collection, Dict, Hashable, List, Optional, Sequence, TypeVar
import numpy as np

T = TypeVar("T", bound=Hashable)


def partition_labels(
    partition: Sequence[Collection[T]], items: Optional[Sequence[T]] = None
) -> np.ndarray:
    """
    Convert a partition to a label array.

    Args:
        partition: List of disjoint clusters
        items: Order of the returned labels. Defaults to the order the items
            appear in the partition.

    Returns:
        Integer array with the cluster index of every item

    Raises:
        ValueError: If an item appears twice or is missing from the partition
    """
    index: Dict[T, int] = {}
    ordered: List[T] = []
    for label, cluster in enumerate(partition):
        for item in cluster:
            if item in index:
                raise ValueError(f"Item {item!r} appears in more than one cluster")
            index[item] = label
            ordered.append(item)

    if items is None:
        items = ordered
    try:
        return np.array([index[item] for item in items], dtype=np.int64)
    except KeyError as e:
        raise ValueError(f"Item {e.args[0]!r} is not in the partition") from e


def adjusted_rand_index(
    partition_a: Sequence[Collection[T]], partition_b: Sequence[Collection[T]]
) -> float:
    """
    Adjusted Rand Index between two partitions of the same items.

    ARI measures agreement between two clusterings, adjusted for chance.
    Returns 1.0 for identical clusterings (up to relabelling), ~0.0 for
    random agreement.

    Args:
        partition_a: First partition
        partition_b: Second partition over the same items

    Returns:
        ARI score in [-1, 1]
    """
    a = partition_labels(partition_a)
    items = [item for cluster in partition_a for item in cluster]
    b = partition_labels(partition_b, items)
    n = len(a)
    if n == 0:
        return 1.0

    _, a = np.unique(a, return_inverse=True)
    _, b = np.unique(b, return_inverse=True)
    contingency = np.zeros((a.max() + 1, b.max() + 1), dtype=np.int64)
    np.add.at(contingency, (a, b), 1)

    sum_comb = (contingency * (contingency - 1) / 2.0).sum()
    rows = contingency.sum(axis=1)
    cols = contingency.sum(axis=0)
    sum_comb_c = (rows * (rows - 1) / 2.0).sum()
    sum_comb_k = (cols * (cols - 1) / 2.0).sum()
    comb_n = n * (n - 1) / 2.0

    if comb_n == 0:
        return 1.0

    expected_index = (sum_comb_c * sum_comb_k) / comb_n
    max_index = 0.5 * (sum_comb_c + sum_comb_k)
    denom = max_index - expected_index
    if denom == 0:
        return 1.0
    return float((sum_comb - expected_index) / denom)


def silhouette_score(
    partition: Sequence[Collection[T]], distance: Callable[[T, T], float]
) -> float:
    """
    Mean silhouette of a partition.

    Silhouette score measures how well-separated clusters are.
    Higher is better (range [-1, 1]). Members of singleton clusters score 0.

    Args:
        partition: List of disjoint clusters (empty clusters are ignored)
        distance: Distance between two items

    Returns:
        Mean silhouette score (0.0 with fewer than two non-empty clusters)
    """
    clusters = [list(c) for c in partition if len(c) > 0]
    if len(clusters) < 2:
        return 0.0

    scores: List[float] = []
    for ci, cluster in enumerate(clusters):
        for item in cluster:
            if len(cluster) <= 1:
                scores.append(0.0)
                continue
            a = sum(distance(item, other) for other in cluster) / (len(cluster) - 1)
            b = min(
                np.mean([distance(item, other) for other in clusters[cj]])
                for cj in range(len(clusters))
                if cj != ci
            )
            m = max(a, b)
            scores.append(float((b - a) / m) if m > 0 else 0.0)
    return float(np.mean(scores))
