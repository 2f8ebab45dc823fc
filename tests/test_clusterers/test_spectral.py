"""
Tests for spectral clustering.
"""

import numpy as np
import pytest

from feature_clustering.algorithms.point import Point
from feature_clustering.clusterers.spectral import (
    SpectralClusterer,
    normalise_rows,
    normalised_laplacian,
    similarity_matrix,
)


class RecordingSolver:
    """Eigensolver stub returning the identity and a fixed rank."""

    def __init__(self, rank_deficit=0):
        self.rank_deficit = rank_deficit
        self.matrices = []

    def __call__(self, matrix):
        self.matrices.append(np.array(matrix))
        n = matrix.shape[0]
        return np.eye(n), n - self.rank_deficit


# ------------------------------------------------------------------
# Kernel and Laplacian helpers
# ------------------------------------------------------------------

def test_similarity_matrix_squared_and_plain():
    D = np.array([[0.0, 4.0], [4.0, 0.0]])
    W_sq = similarity_matrix(D, 2.0, squared=True)
    np.testing.assert_allclose(W_sq, [[0.0, np.exp(-2.0)], [np.exp(-2.0), 0.0]])

    W_plain = similarity_matrix(D, 2.0, squared=False)
    np.testing.assert_allclose(W_plain[0, 1], np.exp(-16.0 / 4.0))


def test_similarity_matrix_with_zero_median():
    D = np.array([[0.0, 0.0, 3.0], [0.0, 0.0, 3.0], [3.0, 3.0, 0.0]])
    W = similarity_matrix(D, 0.0, squared=True)
    np.testing.assert_array_equal(W, [[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_normalised_laplacian_handles_zero_degree():
    W = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
    L = normalised_laplacian(W)
    np.testing.assert_allclose(L, [[1, -1, 0], [-1, 1, 0], [0, 0, 1]])


def test_normalise_rows_keeps_zero_rows():
    X = np.array([[3.0, 4.0], [0.0, 0.0]])
    np.testing.assert_allclose(normalise_rows(X), [[0.6, 0.8], [0.0, 0.0]])


# ------------------------------------------------------------------
# SpectralClusterer
# ------------------------------------------------------------------

@pytest.mark.parametrize("seed", range(8))
def test_recovers_the_two_pairs(four_points, expected_pairs, seed):
    clusterer = SpectralClusterer(2, rng=seed)
    clusters = clusterer.cluster(four_points)
    assert {frozenset(c) for c in clusters} == expected_pairs
    assert clusterer.effective_k == 2


def test_recovers_the_two_pairs_with_plain_euclidean(four_points, expected_pairs):
    clusters = SpectralClusterer(2, measure="euclidean", rng=0).cluster(four_points)
    assert {frozenset(c) for c in clusters} == expected_pairs


def test_empty_input():
    assert SpectralClusterer(3).cluster([]) == []


@pytest.mark.parametrize("k", [3, 5])
def test_no_more_points_than_clusters(four_points, k):
    points = four_points[:3]
    clusters = SpectralClusterer(k).cluster(points)
    assert clusters == [{p} for p in points]


def test_rejects_non_contiguous_ids():
    points = [Point(0, [0.0]), Point(2, [1.0]), Point(3, [2.0])]
    with pytest.raises(ValueError, match="contiguous"):
        SpectralClusterer(1).cluster(points)


def test_rejects_duplicate_ids():
    points = [Point(0, [0.0]), Point(0, [1.0])]
    with pytest.raises(ValueError, match="contiguous"):
        SpectralClusterer(1).cluster(points)


def test_rejects_k_below_one():
    with pytest.raises(ValueError, match="k must be >= 1"):
        SpectralClusterer(0)


def test_passes_normalised_laplacian_to_solver(blobs):
    points = blobs[:6]
    solver = RecordingSolver()
    clusterer = SpectralClusterer(2, eigensolver=solver, rng=0)

    clusters = clusterer.cluster(points)

    assert len(solver.matrices) == 1
    L = solver.matrices[0]
    assert L.shape == (6, 6)
    np.testing.assert_allclose(L, L.T)
    np.testing.assert_allclose(np.diag(L), 1.0)
    assert clusterer.rank == 6
    assert clusterer.effective_k == 2
    assert sorted(p.id for c in clusters for p in c) == list(range(6))


def test_rank_deficit_widens_embedding(blobs):
    points = blobs[:8]
    clusterer = SpectralClusterer(2, eigensolver=RecordingSolver(rank_deficit=3), rng=0)
    clusters = clusterer.cluster(points)
    assert clusterer.effective_k == 3
    assert len(clusters) == 2
    assert sorted(p.id for c in clusters for p in c) == list(range(8))


def test_embedding_uses_the_last_solver_columns(four_points, expected_pairs):
    # last two columns group {0, 1} / {2, 3}; first two group {0, 2} / {1, 3}
    vectors = np.array(
        [
            [1.0, 0.0, 1.0, 0.0],
            [0.0, 1.0, 1.0, 0.0],
            [1.0, 0.0, 0.0, 1.0],
            [0.0, 1.0, 0.0, 1.0],
        ]
    )
    clusterer = SpectralClusterer(2, eigensolver=lambda L: (vectors, 4), rng=0)

    clusters = clusterer.cluster(four_points)

    assert clusterer.effective_k == 2
    assert {frozenset(c) for c in clusters} == expected_pairs


def test_partition_on_blobs(blobs):
    clusterer = SpectralClusterer(3, rng=0)
    clusters = clusterer.cluster(blobs)
    assert len(clusters) == 3
    assert sorted(p.id for c in clusters for p in c) == list(range(len(blobs)))


def test_unmapped_embedding_id_is_an_error(four_points, monkeypatch):
    clusterer = SpectralClusterer(2, rng=0)
    monkeypatch.setattr(
        clusterer.engine, "cluster", lambda points: [{Point(99, [0.0, 0.0])}]
    )
    with pytest.raises(RuntimeError, match="no original point"):
        clusterer.cluster(four_points)
