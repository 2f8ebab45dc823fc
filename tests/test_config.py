"""
Tests for configuration loading.

Tests ClusteringConfig validation and reading from environment variables.
"""

import pytest

from feature_clustering.config import ClusteringConfig, Config

ENV_VARS = [
    "CLUSTERING_DISTANCE_MEASURE",
    "CLUSTERING_REFRESH_RATIO",
    "CLUSTERING_MIN_SHARE_OF_TOTAL",
    "CLUSTERING_MIN_SHARE_OF_LARGEST",
    "CLUSTERING_MIN_ITERATIONS",
    "CLUSTERING_MAX_ITERATIONS",
    "CLUSTERING_TOLERANCE",
    "CLUSTERING_RANDOM_ATTEMPTS",
    "CLUSTERING_SEED",
    "CLUSTERING_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every clustering variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Test default values when nothing is set."""
    cfg = Config().clustering

    assert cfg.distance_measure == "squared_euclidean"
    assert cfg.refresh_ratio == pytest.approx(1.0 / 3.0)
    assert cfg.min_share_of_total == 0.01
    assert cfg.min_share_of_largest == 0.02
    assert cfg.min_iterations == 5
    assert cfg.max_iterations == 50
    assert cfg.tolerance == 1e-4
    assert cfg.random_attempts == 100
    assert cfg.seed is None
    assert cfg.log_level == "WARNING"


def test_reads_environment(clean_env):
    """Test that environment variables override defaults."""
    clean_env.setenv("CLUSTERING_DISTANCE_MEASURE", "Euclidean")
    clean_env.setenv("CLUSTERING_REFRESH_RATIO", "0.5")
    clean_env.setenv("CLUSTERING_MAX_ITERATIONS", "80")
    clean_env.setenv("CLUSTERING_SEED", "42")
    clean_env.setenv("CLUSTERING_LOG_LEVEL", "debug")

    cfg = Config().clustering

    assert cfg.distance_measure == "euclidean"
    assert cfg.refresh_ratio == 0.5
    assert cfg.max_iterations == 80
    assert cfg.seed == 42
    assert cfg.log_level == "DEBUG"


def test_blank_variable_uses_default(clean_env):
    clean_env.setenv("CLUSTERING_SEED", "  ")
    assert Config().clustering.seed is None


def test_unparseable_variable_is_named(clean_env):
    """Test that conversion errors name the offending variable."""
    clean_env.setenv("CLUSTERING_MIN_ITERATIONS", "five")
    with pytest.raises(ValueError, match="CLUSTERING_MIN_ITERATIONS"):
        Config()


def test_out_of_range_variable(clean_env):
    clean_env.setenv("CLUSTERING_REFRESH_RATIO", "1.5")
    with pytest.raises(ValueError, match="refresh_ratio"):
        Config()


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"distance_measure": "hamming"}, "Unknown distance measure"),
        ({"refresh_ratio": 0.0}, "refresh_ratio"),
        ({"min_share_of_total": 1.0}, "min_share_of_total"),
        ({"min_share_of_largest": -0.1}, "min_share_of_largest"),
        ({"min_iterations": 0}, "min_iterations"),
        ({"min_iterations": 10, "max_iterations": 5}, "max_iterations"),
        ({"tolerance": -1.0}, "tolerance"),
        ({"tolerance": float("nan")}, "tolerance"),
        ({"random_attempts": 0}, "random_attempts"),
        ({"log_level": "LOUD"}, "log_level"),
    ],
)
def test_validation(kwargs, message):
    """Test that invalid values are rejected."""
    with pytest.raises(ValueError, match=message):
        ClusteringConfig(**kwargs)
