"""
Dense symmetric eigen-decomposition.

Spectral clustering only needs the eigenvectors ordered by eigenvalue and the
numerical rank, so that is all this collaborator returns. Any function with
the same signature can be injected instead (for example a deterministic stub
in tests).
"""

from __future__ import annotations

from typing import Callable, Tuple
import numpy as np

Array2D = np.ndarray
# (matrix) -> (eigenvectors as columns, largest eigenvalue first; rank)
Eigensolver = Callable[[Array2D], Tuple[Array2D, int]]


def numerical_rank(eigenvalues: np.ndarray, size: int) -> int:
    """Count eigenvalues whose magnitude exceeds ``max|λ| · n · eps``."""
    if eigenvalues.size == 0:
        return 0
    magnitudes = np.abs(eigenvalues)
    tol = magnitudes.max() * size * np.finfo(np.float64).eps
    return int(np.count_nonzero(magnitudes > tol))


def symmetric_eigendecompose(matrix: Array2D) -> Tuple[Array2D, int]:
    """
    Eigen-decompose a real symmetric matrix.

    Args:
        matrix: Square symmetric array of shape (n, n)

    Returns:
        Tuple of:
        - vectors: (n, n) array whose columns are eigenvectors ordered by
          descending eigenvalue, so the last columns belong to the smallest
          eigenvalues
        - rank: Numerical rank of the matrix

    Raises:
        ValueError: If the matrix is not square
    """
    A = np.asarray(matrix, dtype=np.float64)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {A.shape}")
    values, vectors = np.linalg.eigh(A)
    order = np.argsort(values, kind="stable")[::-1]
    return vectors[:, order], numerical_rank(values, A.shape[0])
