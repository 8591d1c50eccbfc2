"""
Uniform B-spline curves evaluated by repeated linear interpolation
of the control polygon.
"""
from typing import *

from .point import Points, PointList, check_points, check_parameters, to_point_list, lerp
from .bezier import de_casteljau


def uniform_bspline(ps: Points, ts: Sequence[float]) -> PointList:
    """
    Evaluate the uniform B-spline of degree len(ps) - 1 at given parameters.
    The control polygon is reduced to a single point for every parameter.
    :param ps: control points, at least 2 points are required
    :param ts: parameter values in [0, 1]
    :return: list of Point3, one for every value in `ts`
    """
    points = check_points(ps, min_points=2)
    ts = check_parameters(ts)
    return to_point_list(de_casteljau(points, ts)[:, 0, :])


def quadratic_uniform_bspline(ps: Points, ts: Sequence[float]) -> PointList:
    """
    Evaluate the quadratic uniform B-spline at given parameters.

    The control polygon is reduced only until a pair of points survives,
    the curve point is the interpolation of this pair. For three control points
    the result is lerp(lerp(p0, p1, t), lerp(p1, p2, t), t).
    The last interpolation completes the reduction, so the values are the same as
    of uniform_bspline, only at least 3 control points are required.
    :param ps: control points, at least 3 points are required
    :param ts: parameter values in [0, 1]
    :return: list of Point3, one for every value in `ts`
    """
    points = check_points(ps, min_points=3)
    ts = check_parameters(ts)
    pairs = de_casteljau(points, ts, n_final=2)
    t = ts[:, None]
    return to_point_list(lerp(pairs[:, 0, :], pairs[:, 1, :], t))
