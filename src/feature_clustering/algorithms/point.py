"""
Point abstraction for feature-based clustering.

A Point is an immutable float32 feature vector with an integer identity.
Points created from an input collection carry ids ``0..n-1``; synthetic points
(such as cluster means) carry id ``-1``.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, TypeVar
import numpy as np

T = TypeVar("T")

SYNTHETIC_ID = -1


def _as_coordinates(values: Sequence[float]) -> np.ndarray:
    coords = np.array(values, dtype=np.float32).reshape(-1)
    # -0.0 becomes 0.0 so equal coordinates hash to the same bytes
    coords = coords + np.float32(0.0)
    coords.setflags(write=False)
    return coords


class Point:
    """
    Immutable feature vector with a stable integer id.

    Equality and hashing combine id and coordinates; ordering is by id.

    Attributes:
        id: Identity within one input collection (-1 for synthetic points)
        coordinates: Read-only float32 array
    """

    __slots__ = ("id", "coordinates", "_hash")

    def __init__(self, id: int, coordinates: Sequence[float]):
        object.__setattr__(self, "id", int(id))
        object.__setattr__(self, "coordinates", _as_coordinates(coordinates))
        object.__setattr__(
            self, "_hash", hash((self.id, self.coordinates.tobytes()))
        )

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __delattr__(self, name):
        raise AttributeError("Point is immutable")

    def __len__(self) -> int:
        return self.coordinates.shape[0]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.id == other.id and np.array_equal(
            self.coordinates, other.coordinates
        )

    def __hash__(self) -> int:
        return self._hash

    def __lt__(self, other: Point) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.id < other.id

    def __repr__(self) -> str:
        return f"Point(id={self.id}, coordinates={self.coordinates.tolist()})"

    @property
    def is_synthetic(self) -> bool:
        return self.id == SYNTHETIC_ID


class PointFactory:
    """
    Creates Points of a fixed dimension with auto-incrementing ids.

    Usage:
        factory = PointFactory(2)
        p0 = factory.make([0.0, 1.0])   # id 0
        p1 = factory.make([2.0, 3.0])   # id 1
    """

    def __init__(self, dimensions: int):
        if dimensions < 1:
            raise ValueError(f"dimensions must be >= 1, got {dimensions}")
        self.dimensions = dimensions
        self._next_id = 0

    def make(self, coordinates: Sequence[float]) -> Point:
        """
        Create the next Point.

        Raises:
            ValueError: If the coordinate count differs from ``dimensions``
        """
        coords = _as_coordinates(coordinates)
        if coords.shape[0] != self.dimensions:
            raise ValueError(
                f"Expected {self.dimensions} coordinates, got {coords.shape[0]}"
            )
        point = Point(self._next_id, coords)
        self._next_id += 1
        return point

    def reset(self) -> None:
        """Restart id assignment at 0."""
        self._next_id = 0


def convert(items: Iterable[T], extractor: Callable[[T], Sequence[float]]) -> List[Point]:
    """
    Convert items to Points, using the list position as id.

    Args:
        items: Items to convert
        extractor: Returns the feature vector for one item

    Returns:
        List of Points, one per item, in input order
    """
    return [Point(i, extractor(item)) for i, item in enumerate(items)]


def mean(points: Iterable[Point]) -> Point:
    """
    Coordinate-wise arithmetic mean of a collection of Points.

    Returns:
        Synthetic Point with id -1

    Raises:
        ValueError: If the collection is empty
    """
    rows = [p.coordinates for p in points]
    if not rows:
        raise ValueError("Cannot compute the mean of an empty collection")
    stacked = np.stack(rows, axis=0).astype(np.float64)
    return Point(SYNTHETIC_ID, stacked.mean(axis=0))


def squared_euclidean(point1: Point, point2: Point) -> float:
    """
    Sum of squared coordinate differences.

    Only the first ``min(len(point1), len(point2))`` coordinates are compared;
    mismatched lengths are not an error.
    """
    n = min(point1.coordinates.shape[0], point2.coordinates.shape[0])
    diff = point1.coordinates[:n].astype(np.float64) - point2.coordinates[:n]
    return float(np.dot(diff, diff))
