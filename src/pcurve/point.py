"""
Point and vector primitives in 3d space.

Points enter the curve algorithms as arbitrary sequences of 3 numbers
and leave them as immutable Point3 tuples. Internally the algorithms work on
numpy arrays of shape (N, 3) that are always fresh copies of the input.
"""
import math
from typing import *
import numpy as np

from .exceptions import ParamError, DegenerateGeometryError, InsufficientControlPointsError


class Point3(NamedTuple):
    """
    Immutable point (or vector) in 3d space.
    Being a tuple, Point3(1, 2, 3) == (1.0, 2.0, 3.0).
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, xyz) -> 'Point3':
        return cls(float(xyz[0]), float(xyz[1]), float(xyz[2]))

    def as_array(self) -> np.array:
        return np.array(self, dtype=float)

    def clone(self) -> 'Point3':
        return Point3(self.x, self.y, self.z)

    def subtract(self, other) -> 'Point3':
        return Point3(self.x - other[0], self.y - other[1], self.z - other[2])

    def dist(self, other) -> float:
        return math.sqrt((self.x - other[0]) ** 2 + (self.y - other[1]) ** 2 + (self.z - other[2]) ** 2)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def lerp(self, other, t: float) -> 'Point3':
        """
        Linear interpolation (1 - t) * self + t * other.
        """
        s = 1 - t
        return Point3(s * self.x + t * other[0],
                      s * self.y + t * other[1],
                      s * self.z + t * other[2])

    def cross(self, other) -> 'Point3':
        ox, oy, oz = other
        return Point3(self.y * oz - self.z * oy,
                      self.z * ox - self.x * oz,
                      self.x * oy - self.y * ox)

    def normalize(self) -> 'Point3':
        norm = self.length()
        if norm == 0.0:
            raise DegenerateGeometryError("Can not normalize zero vector.")
        return Point3(self.x / norm, self.y / norm, self.z / norm)


PointList = List[Point3]
Points = Union[Sequence[Sequence[float]], np.array]


def lerp(a: np.array, b: np.array, t) -> np.array:
    """
    Component-wise (1 - t) * a + t * b. Works for single points as well as
    for stacked arrays of points with broadcasted `t`.
    """
    return (1 - t) * a + t * b


def check_points(points: Points, min_points: int = 0) -> np.array:
    """
    Check and convert a sequence of 3d points to a new float array.
    :param points: Sequence of points (X, Y, Z), e.g. list of tuples, list of Point3 or (N, 3) array.
    :param min_points: Minimal number of points required by the caller.
    :return: np.array of shape (N, 3), never shared with the input.
    """
    try:
        n_points = len(points)
    except TypeError:
        raise ParamError(f"Expected sequence of points, get: {type(points)}.")
    if n_points < min_points:
        raise InsufficientControlPointsError(min_points, n_points)
    if n_points == 0:
        return np.empty((0, 3))
    try:
        arr = np.array(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise ParamError(f"Wrong point data: {e}")
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ParamError(f"Wrong shape {arr.shape} of points, should be (N, 3).")
    if not np.all(np.isfinite(arr)):
        raise ParamError("Non-finite coordinates of points.")
    return arr


def check_parameters(ts) -> np.array:
    """
    Convert the sequence of curve parameters to a new 1d float array.
    """
    try:
        arr = np.array(ts, dtype=float)
    except (TypeError, ValueError) as e:
        raise ParamError(f"Wrong parameter data: {e}")
    if arr.ndim != 1:
        raise ParamError(f"Wrong shape {arr.shape} of parameters, should be (M,).")
    return arr


def to_point_list(arr: np.array) -> PointList:
    return [Point3.from_array(xyz) for xyz in arr]


def polygon_length(points: np.array) -> float:
    """
    Sum of distances of consecutive points.
    """
    return float(np.sum(np.linalg.norm(points[1:] - points[:-1], axis=1)))
