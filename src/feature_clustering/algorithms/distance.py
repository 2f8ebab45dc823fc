"""
Distance measures between Points.

A measure is a callable ``(Point, Point) -> float`` plus a flag telling
whether it already returns squared distances; spectral and automatic
clustering branch on that flag when scaling the similarity kernel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union
import numpy as np

from .point import Point, squared_euclidean


@dataclass(frozen=True)
class DistanceMeasure:
    """Named distance function between two Points."""

    name: str
    function: Callable[[Point, Point], float]
    squared: bool = False

    def __call__(self, point1: Point, point2: Point) -> float:
        return self.function(point1, point2)


def _common(point1: Point, point2: Point):
    n = min(point1.coordinates.shape[0], point2.coordinates.shape[0])
    return (
        point1.coordinates[:n].astype(np.float64),
        point2.coordinates[:n].astype(np.float64),
    )


def _euclidean(point1: Point, point2: Point) -> float:
    return float(np.sqrt(squared_euclidean(point1, point2)))


def _manhattan(point1: Point, point2: Point) -> float:
    a, b = _common(point1, point2)
    return float(np.sum(np.abs(a - b)))


def _chebyshev(point1: Point, point2: Point) -> float:
    a, b = _common(point1, point2)
    if a.size == 0:
        return 0.0
    return float(np.max(np.abs(a - b)))


def _cosine(point1: Point, point2: Point) -> float:
    a, b = _common(point1, point2)
    norm = np.linalg.norm(a) * np.linalg.norm(b)
    if norm < 1e-12:
        return 0.0 if np.array_equal(a, b) else 1.0
    return float(np.clip(1.0 - np.dot(a, b) / norm, 0.0, 2.0))


SQUARED_EUCLIDEAN = DistanceMeasure("squared_euclidean", squared_euclidean, squared=True)
EUCLIDEAN = DistanceMeasure("euclidean", _euclidean)
MANHATTAN = DistanceMeasure("manhattan", _manhattan)
CHEBYSHEV = DistanceMeasure("chebyshev", _chebyshev)
COSINE = DistanceMeasure("cosine", _cosine)

DISTANCE_MEASURES: Dict[str, DistanceMeasure] = {
    m.name: m for m in (SQUARED_EUCLIDEAN, EUCLIDEAN, MANHATTAN, CHEBYSHEV, COSINE)
}

MeasureLike = Union[DistanceMeasure, Callable[[Point, Point], float], str, None]


def get_distance_measure(name: str) -> DistanceMeasure:
    """
    Look up a built-in measure by name.

    Raises:
        ValueError: If the name is unknown
    """
    key = name.lower()
    if key not in DISTANCE_MEASURES:
        raise ValueError(
            f"Unknown distance measure: {name}. "
            f"Available measures: {', '.join(sorted(DISTANCE_MEASURES))}"
        )
    return DISTANCE_MEASURES[key]


def resolve_measure(measure: MeasureLike, default: str = "squared_euclidean") -> DistanceMeasure:
    """
    Normalise the accepted measure forms to a DistanceMeasure.

    ``None`` selects *default*, a string is looked up by name, and a plain
    callable is wrapped as a non-squared measure.
    """
    if measure is None:
        return get_distance_measure(default)
    if isinstance(measure, DistanceMeasure):
        return measure
    if isinstance(measure, str):
        return get_distance_measure(measure)
    if callable(measure):
        return DistanceMeasure(getattr(measure, "__name__", "custom"), measure)
    raise TypeError(f"Unsupported distance measure: {measure!r}")
