"""
Evaluation of Bezier curves of arbitrary degree.

- evaluation at given parameters by the De Casteljau algorithm
- adaptive subdivision driven by the Gravesen arc length error estimate, see:
  J. Gravesen, Adaptive subdivision and the length and energy of Bezier curves,
  Computational Geometry 8 (1997).
"""
import logging
from typing import *
import numpy as np

from .point import Points, PointList, check_points, check_parameters, to_point_list, lerp, polygon_length
from .exceptions import ParamError, InsufficientControlPointsError, SubdivisionDepthError, warn_or_raise


def de_casteljau(points: np.array, ts: np.array, n_final: int = 1) -> np.array:
    """
    Reduce the control polygon by repeated linear interpolation of consecutive points
    until `n_final` points remain. All parameters are processed at once, the row `i`
    of the working buffer holds the polygon for the parameter ts[i].
    :param points: (N, 3) array of control points.
    :param ts: (M,) array of parameters.
    :param n_final: number of points left after the reduction
    :return: (M, n_final, 3) array
    """
    n_points = len(points)
    work = np.empty((len(ts), n_points, 3))
    work[:] = points
    t = ts[:, None, None]
    for k in range(n_points - 1, n_final - 1, -1):
        work[:, :k, :] = lerp(work[:, :k, :], work[:, 1:k + 1, :], t)
    return work[:, :n_final, :]


def evaluate_bezier_curve(ps: Points, ts: Sequence[float]) -> PointList:
    """
    Evaluate a Bezier curve at given parameter values.
    :param ps: control points, at least 2 points are required
    :param ts: parameter values, conventionally in [0, 1] and sorted
    :return: list of Point3 on the curve, one for every value in `ts`
    """
    points = check_points(ps, min_points=2)
    ts = check_parameters(ts)
    return to_point_list(de_casteljau(points, ts)[:, 0, :])


def split_bezier(points: np.array, t: float = 0.5) -> Tuple[np.array, np.array]:
    """
    Split the Bezier curve at the parameter `t` using the De Casteljau triangle.
    Control points of the left part form the leading diagonal of the triangle,
    control points of the right part the trailing diagonal (reversed).
    :param points: (N, 3) array of control points
    :return: (left, right), both (N, 3) arrays
    """
    n_points = len(points)
    work = np.array(points, dtype=float)
    left = np.empty_like(work)
    right = np.empty_like(work)
    left[0] = work[0]
    right[-1] = work[-1]
    for k in range(n_points - 1, 0, -1):
        work[:k] = lerp(work[:k], work[1:k + 1], t)
        left[n_points - k] = work[0]
        right[k - 1] = work[k - 1]
    return left, right


def gravesen_error(points: np.array) -> float:
    """
    Gravesen estimate of the difference between the arc length of the curve and its
    control polygon: (n - 1) / (n + 1) * (Lp - Lc), with the polygon length Lp,
    chord length Lc and the degree n.
    """
    n = len(points) - 1
    lp = polygon_length(points)
    lc = float(np.linalg.norm(points[-1] - points[0]))
    return (n - 1) / (n + 1) * (lp - lc)


def adaptive_subdivision(ps: Points, tolerance: float = 1e-5, max_depth: int = 16,
                         depth_exceptions: bool = False) -> PointList:
    """
    Approximate a Bezier curve by a polyline, subdividing the curve until
    the Gravesen error of every part is below the tolerance.

    Parts are processed from an explicit stack, the left half is always processed
    before the right half, so the points are produced in increasing curve parameter.
    :param ps: control points, at least 2 points are required
    :param tolerance: the subdivision stops if the error estimate is <= tolerance
    :param max_depth: Maximal number of bisections of a single part. A part on this level
        is taken as flat, so at most 2 ** max_depth + 1 points are produced.
    :param depth_exceptions: If True raise SubdivisionDepthError when the maximal depth is
        reached, otherwise issue SubdivisionDepthErrorWarning.
    :return: list of Point3, first and last are the end control points
    """
    if not tolerance > 0:
        raise ParamError(f"Tolerance must be positive, get: {tolerance}.")
    if max_depth < 0:
        raise ParamError(f"Maximal depth must be non-negative, get: {max_depth}.")
    points = check_points(ps, min_points=2)
    if len(points) == 2:
        return to_point_list(points)

    stack = [(points, 0)]
    out = [points[0]]
    n_depth_limited = 0
    while stack:
        top, depth = stack.pop()
        if len(top) < 2:
            raise InsufficientControlPointsError(2, len(top))
        if len(top) == 2:
            out.append(top[1])
            continue
        if gravesen_error(top) > tolerance:
            if depth < max_depth:
                left, right = split_bezier(top, 0.5)
                stack.append((right, depth + 1))
                stack.append((left, depth + 1))
                continue
            if n_depth_limited == 0:
                warn_or_raise(SubdivisionDepthError,
                              f"Subdivision depth {max_depth} reached, tolerance {tolerance} not met.",
                              depth_exceptions)
            n_depth_limited += 1
        out.append(top[-1])

    if n_depth_limited > 0:
        logging.warning(f"Adaptive subdivision: {n_depth_limited} parts limited by depth {max_depth}.")
    logging.debug(f"Adaptive subdivision: {len(out)} points, {len(points)} control points.")
    return to_point_list(out)
