"""
Configuration management for Feature Clustering.

Loads tuning parameters from environment variables (typically from a .env
file). Uses python-dotenv to load .env automatically.

Usage:
    from feature_clustering.config import config

    cfg = config.clustering
    cfg.refresh_ratio        # greedy centroid refresh ratio
    cfg.distance_measure     # default distance measure name
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .algorithms.distance import DISTANCE_MEASURES

# Look for .env in project root (parent of src/)
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ClusteringConfig:
    """
    Tuning parameters shared by the clustering strategies.

    Attributes:
        distance_measure: Name of the default distance measure
        refresh_ratio: Greedy clustering recomputes a centroid once
            updates / members reaches this ratio
        min_share_of_total: Automatic seeding drops clusters whose size over
            the input size is not above this share
        min_share_of_largest: Automatic seeding drops clusters whose size over
            the largest cluster size is not above this share
        min_iterations: Lower bound on the Lloyd iteration limit
        max_iterations: Upper bound on the Lloyd iteration limit
        tolerance: Centroid movement treated as zero when testing convergence
        random_attempts: Random repartitions tried before seeding falls back
            to sampling distinct items
        seed: Seed for the random generators (None for fresh entropy)
        log_level: Level used by ``setup_logging`` when none is given
    """
    distance_measure: str = "squared_euclidean"
    refresh_ratio: float = 1.0 / 3.0
    min_share_of_total: float = 0.01
    min_share_of_largest: float = 0.02
    min_iterations: int = 5
    max_iterations: int = 50
    tolerance: float = 1e-4
    random_attempts: int = 100
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate value ranges."""
        self.distance_measure = self.distance_measure.lower()
        if self.distance_measure not in DISTANCE_MEASURES:
            raise ValueError(
                f"Unknown distance measure: {self.distance_measure}. "
                f"Available measures: {', '.join(sorted(DISTANCE_MEASURES))}"
            )
        if not 0.0 < self.refresh_ratio <= 1.0:
            raise ValueError(
                f"refresh_ratio must be in (0, 1], got {self.refresh_ratio}"
            )
        for name in ("min_share_of_total", "min_share_of_largest"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"{name} must be in [0, 1), got {value}")
        if self.min_iterations < 1:
            raise ValueError(
                f"min_iterations must be >= 1, got {self.min_iterations}"
            )
        if self.max_iterations < self.min_iterations:
            raise ValueError(
                f"max_iterations ({self.max_iterations}) must be >= "
                f"min_iterations ({self.min_iterations})"
            )
        if math.isnan(self.tolerance) or self.tolerance < 0.0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")
        if self.random_attempts < 1:
            raise ValueError(
                f"random_attempts must be >= 1, got {self.random_attempts}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level}"
            )


def _read(name: str, cast, default):
    """Read and convert one environment variable, naming it on failure."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


class Config:
    """
    Application configuration loaded from environment variables.

    Environment variables can be set:
    1. In a .env file in the project root
    2. In the system environment
    3. In a container/deployment environment
    """

    def __init__(self):
        """Load configuration from environment."""
        defaults = ClusteringConfig()
        self.clustering = ClusteringConfig(
            distance_measure=_read(
                "CLUSTERING_DISTANCE_MEASURE", str, defaults.distance_measure
            ),
            refresh_ratio=_read(
                "CLUSTERING_REFRESH_RATIO", float, defaults.refresh_ratio
            ),
            min_share_of_total=_read(
                "CLUSTERING_MIN_SHARE_OF_TOTAL", float, defaults.min_share_of_total
            ),
            min_share_of_largest=_read(
                "CLUSTERING_MIN_SHARE_OF_LARGEST", float, defaults.min_share_of_largest
            ),
            min_iterations=_read(
                "CLUSTERING_MIN_ITERATIONS", int, defaults.min_iterations
            ),
            max_iterations=_read(
                "CLUSTERING_MAX_ITERATIONS", int, defaults.max_iterations
            ),
            tolerance=_read("CLUSTERING_TOLERANCE", float, defaults.tolerance),
            random_attempts=_read(
                "CLUSTERING_RANDOM_ATTEMPTS", int, defaults.random_attempts
            ),
            seed=_read("CLUSTERING_SEED", int, defaults.seed),
            log_level=_read("CLUSTERING_LOG_LEVEL", str, defaults.log_level),
        )


# Global config instance
config = Config()
