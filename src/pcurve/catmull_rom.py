"""
Cubic Catmull-Rom splines with uniform, chordal and centripetal knot parametrization.

Every segment between p1 and p2 of the window (p0, p1, p2, p3) is a cubic Hermite
curve with tangents given by the non-uniform Catmull-Rom formula. The knot intervals
are dist(p_i, p_i+1) ** alpha, alpha = 0, 1, 0.5 for the uniform, chordal and
centripetal parametrization respectively. Segments are sampled at fixed parameters
independently of their length.
"""
from dataclasses import dataclass, fields
from typing import *
import numpy as np

from .point import Points, PointList, check_points, to_point_list
from .exceptions import ParamError, DegenerateGeometryError
from .core.config import dotdict


KNOT_ALPHA = {
    'uniform': 0.0,
    'chordal': 1.0,
    'centripetal': 0.5,
}
# Knot interval exponent for every parametrization.

SEGMENT_RESOLUTION = 20
# Number of parameter intervals per segment, i.e. 21 samples.


@dataclass(frozen=True)
class KnotParametrization:
    """
    Selection of knot parametrizations to compute, any combination is allowed.
    """
    uniform: bool = True
    chordal: bool = False
    centripetal: bool = False

    @classmethod
    def create(cls, selector: Union['KnotParametrization', Mapping[str, bool], None]) -> 'KnotParametrization':
        """
        Make the selector from a mapping with (some of) the keys 'uniform', 'chordal', 'centripetal'.
        Missing keys and None values are False, other values must be bool.
        None gives the default (uniform only).
        """
        if selector is None:
            return cls()
        if isinstance(selector, cls):
            return selector
        if not isinstance(selector, Mapping):
            raise ParamError(f"Expected KnotParametrization or mapping, get: {type(selector)}.")
        unknown = set(selector.keys()) - set(KNOT_ALPHA.keys())
        if unknown:
            raise ParamError(f"Unknown knot parametrizations: {sorted(unknown)}.")
        flags = {}
        for name in KNOT_ALPHA:
            value = selector.get(name, None)
            if value is None:
                value = False
            if not isinstance(value, bool):
                raise ParamError(f"Knot parametrization flag '{name}' must be bool, get: {value!r}.")
            flags[name] = value
        return cls(**flags)

    def active(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


def catmull_rom_segments(ps: Points, alpha: float, tension: float = 0.0,
                         resolution: int = SEGMENT_RESOLUTION) -> PointList:
    """
    Compute the Catmull-Rom spline for the given control points.
    Example:
        catmull_rom_segments(ps, 0)    # uniform
        catmull_rom_segments(ps, 1)    # chordal
        catmull_rom_segments(ps, 0.5)  # centripetal

    :param ps: control points, at least 4 points are required
    :param alpha: knot interval exponent in [0, 1]
    :param tension: tangent scaling factor (1 - tension), in [0, 1]
    :param resolution: number of parameter intervals per segment
    :return: list of Point3, (len(ps) - 3) * (resolution + 1) samples;
        the curve passes through ps[1], ..., ps[-2]
    """
    if not 0.0 <= alpha <= 1.0:
        raise ParamError(f"Alpha must be in [0, 1], get: {alpha}.")
    if not 0.0 <= tension <= 1.0:
        raise ParamError(f"Tension must be in [0, 1], get: {tension}.")
    if resolution < 1:
        raise ParamError(f"Resolution must be positive, get: {resolution}.")
    points = check_points(ps, min_points=4)

    n_segments = len(points) - 3
    n_samples = resolution + 1
    t = (np.arange(n_samples) / resolution)[:, None]
    result = np.empty((n_segments * n_samples, 3))
    for k in range(n_segments):
        p0, p1, p2, p3 = points[k: k + 4]
        t01 = float(np.linalg.norm(p1 - p0)) ** alpha
        t12 = float(np.linalg.norm(p2 - p1)) ** alpha
        t23 = float(np.linalg.norm(p3 - p2)) ** alpha
        if t01 == 0.0 or t23 == 0.0:
            raise DegenerateGeometryError(
                f"Coincident control points in segment {k}, knot intervals: {t01}, {t12}, {t23}, alpha: {alpha}.")

        m1 = (1 - tension) * (p2 - p1 + t12 * ((p1 - p0) / t01 - (p2 - p0) / (t01 + t12)))
        m2 = (1 - tension) * (p2 - p1 + t12 * ((p3 - p2) / t23 - (p3 - p1) / (t23 + t12)))

        a = 2 * (p1 - p2) + m1 + m2
        b = -3 * (p1 - p2) - 2 * m1 - m2
        c = m1
        d = p1
        segment = ((a * t + b) * t + c) * t + d
        # exact end point, a + b + c + d == p2 only up to rounding
        segment[-1] = p2
        result[k * n_samples: (k + 1) * n_samples] = segment
    return to_point_list(result)


def cubic_catmull_rom_spline(ps: Points, knot_parametrization=None) -> dotdict:
    """
    Compute the Catmull-Rom spline for every selected knot parametrization.
    :param ps: control points, at least 4 points are required
    :param knot_parametrization: KnotParametrization or mapping {name: bool}; default uniform only
    :return: dotdict with keys 'uniform', 'chordal', 'centripetal', each a list of Point3;
        empty list for a parametrization not selected
    """
    selector = KnotParametrization.create(knot_parametrization)
    points = check_points(ps, min_points=4)
    result = dotdict({name: [] for name in KNOT_ALPHA})
    for name in selector.active():
        result[name] = catmull_rom_segments(points, KNOT_ALPHA[name], tension=0.0)
    return result
