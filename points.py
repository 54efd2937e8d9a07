# points.py
from typing import List, Protocol
import numpy as np


POINT_DTYPE = float


class SupportsXY(Protocol):
    """Anything the quadtree can store: it only reads x and y."""
    x: float
    y: float


class Point:
    """A named 2D point"""

    def __init__(self, x: float, y: float, name: str = ""):
        """Creates point at the given coordinates"""
        self.position = np.array([x, y], dtype=POINT_DTYPE)
        self.name = name

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.name == other.name and np.array_equal(self.position, other.position)

    def __hash__(self):
        return hash((self.x, self.y, self.name))

    def __repr__(self):
        if self.name:
            return f"Point({self.x}, {self.y}, name={self.name!r})"
        return f"Point({self.x}, {self.y})"


def points_from_array(array) -> List[Point]:
    """Turns an (N, 2) array of coordinates into points."""
    coords = np.asarray(array, dtype=POINT_DTYPE)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of coordinates, got shape {coords.shape}")
    return [Point(x, y) for x, y in coords]
