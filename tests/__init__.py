"""
Test suite for Feature Clustering.

This package contains all tests organized by component:
- test_algorithms/: Tests for points, distance measures and clustering engines
- test_clusterers/: Tests for the feature-based clustering strategies
- test_utils/: Tests for logging helpers
"""
