"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test modules.
"""

import numpy as np
import pytest

from feature_clustering.algorithms.point import Point
from feature_clustering.config import ClusteringConfig


@pytest.fixture
def four_points():
    """
    Two tight pairs far apart: (0,0),(0,1) and (10,10),(10,11).

    Ids are 0..3 in list order.
    """
    coords = [(0.0, 0.0), (0.0, 1.0), (10.0, 10.0), (10.0, 11.0)]
    return [Point(i, c) for i, c in enumerate(coords)]


@pytest.fixture
def expected_pairs(four_points):
    """The two-cluster partition every strategy should find on four_points."""
    p0, p1, p2, p3 = four_points
    return {frozenset({p0, p1}), frozenset({p2, p3})}


@pytest.fixture
def blobs():
    """
    Three well separated Gaussian blobs of 20 points each.

    Returns a list of 60 Points with ids 0..59.
    """
    rng = np.random.default_rng(7)
    centers = np.array([[0.0, 0.0], [20.0, 0.0], [0.0, 20.0]])
    X = np.vstack([c + rng.standard_normal((20, 2)) * 0.5 for c in centers])
    return [Point(i, row) for i, row in enumerate(X)]


@pytest.fixture
def cfg():
    """Default configuration with a fixed seed."""
    return ClusteringConfig(seed=0)
