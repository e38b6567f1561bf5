"""Handling 2D geometry values"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray


###############################################################################
# Vec2
###############################################################################
@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D vector, used both for points and for displacements.

    Attributes:
        x (float): The x-coordinate.
        y (float): The y-coordinate.
    """

    x: float
    y: float

    @classmethod
    def from_xy(cls, point: Union[Sequence[float], NDArray[np.float64], Vec2]) -> Vec2:
        """
        Create a Vec2 from anything providing x and y as its first two items.

        Args:
            point: A Vec2, a (x, y) tuple/list or a numpy row with at least 2 entries

        Returns:
            Vec2: The vector (x, y)
        """
        if isinstance(point, Vec2):
            return point
        return cls(float(point[0]), float(point[1]))

    @classmethod
    def zero(cls) -> Vec2:
        """Vec2: The zero vector (0, 0)."""
        return cls(0.0, 0.0)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """float: The euclidean length (magnitude) of the vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vec2) -> float:
        """float: The euclidean distance between this point and _other_."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalized(self) -> Vec2:
        """
        The unit vector pointing in the same direction.

        Returns:
            Vec2: the normalized vector, or the zero vector if this vector has zero length
        """
        length = self.length()
        if length == 0:
            return Vec2.zero()
        return Vec2(self.x / length, self.y / length)

    def as_tuple(self) -> Tuple[float, float]:
        """Tuple[float, float]: The vector as (x, y)."""
        return (self.x, self.y)

    def __str__(self):
        return f"Vec2({self.x:g}, {self.y:g})"


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def is_close(v1: Vec2, v2: Vec2, abs_tol: float = 1e-9) -> bool:
        """
        Check whether two vectors are equal within an absolute tolerance per coordinate.

        Args:
            v1 (Vec2): first vector
            v2 (Vec2): second vector
            abs_tol (float, optional): absolute tolerance. Defaults to 1e-9.

        Returns:
            bool: True if both coordinates differ by at most _abs_tol_
        """
        return math.isclose(v1.x, v2.x, abs_tol=abs_tol) and math.isclose(v1.y, v2.y, abs_tol=abs_tol)

    @staticmethod
    def to_array(points: Sequence[Vec2]) -> NDArray[np.float64]:
        """
        Convert a sequence of points into an array of shape (n, 2).

        Args:
            points (Sequence[Vec2]): the points

        Returns:
            NDArray[np.float64]: array of shape (n, 2); (0, 2) for an empty sequence
        """
        if len(points) == 0:
            return np.empty((0, 2), dtype=np.float64)
        return np.array([(p.x, p.y) for p in points], dtype=np.float64)

    @staticmethod
    def from_array(array: NDArray[np.float64]) -> List[Vec2]:
        """
        Convert an array of shape (n, 2) (or wider) into a list of points.

        Args:
            array (NDArray[np.float64]): the coordinates, x and y in the first two columns

        Returns:
            List[Vec2]: the points
        """
        return [Vec2(float(row[0]), float(row[1])) for row in array]
