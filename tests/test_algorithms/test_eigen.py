"""
Tests for the symmetric eigen-decomposition collaborator.
"""

import numpy as np
import pytest

from feature_clustering.algorithms.eigen import numerical_rank, symmetric_eigendecompose


def test_columns_ordered_by_descending_eigenvalue():
    A = np.diag([3.0, 1.0, 2.0])
    vectors, rank = symmetric_eigendecompose(A)

    assert rank == 3
    np.testing.assert_allclose(np.abs(vectors[:, 0]), [1.0, 0.0, 0.0])
    np.testing.assert_allclose(np.abs(vectors[:, 1]), [0.0, 0.0, 1.0])
    np.testing.assert_allclose(np.abs(vectors[:, 2]), [0.0, 1.0, 0.0])


def test_eigenvectors_are_orthonormal():
    rng = np.random.default_rng(42)
    B = rng.standard_normal((6, 6))
    A = B + B.T
    vectors, _ = symmetric_eigendecompose(A)
    np.testing.assert_allclose(vectors.T @ vectors, np.eye(6), atol=1e-10)

    values = np.array([vectors[:, i] @ A @ vectors[:, i] for i in range(6)])
    assert np.all(np.diff(values) <= 1e-10)


def test_rank_of_singular_matrix():
    A = np.array([[1.0, 1.0], [1.0, 1.0]])
    vectors, rank = symmetric_eigendecompose(A)
    assert rank == 1
    # the null vector comes last
    np.testing.assert_allclose(np.abs(vectors[:, -1]), [np.sqrt(0.5)] * 2)


def test_numerical_rank():
    assert numerical_rank(np.array([]), 0) == 0
    assert numerical_rank(np.array([2.0, 1e-18, -1.0]), 3) == 2
    assert numerical_rank(np.zeros(3), 3) == 0


def test_rejects_non_square():
    with pytest.raises(ValueError, match="square"):
        symmetric_eigendecompose(np.zeros((2, 3)))
