"""
Common code for tests.
"""
import os
from pathlib import Path

import numpy as np


def sandbox_fname(base_name, ext):
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(work_dir, f"{base_name}.{ext}")


def bernstein_bezier(ps, t):
    """
    Reference evaluation of a Bezier curve by the Bernstein polynomials.
    """
    from math import comb
    ps = np.array(ps, dtype=float)
    n = len(ps) - 1
    weights = np.array([comb(n, i) * t ** i * (1 - t) ** (n - i) for i in range(n + 1)])
    return weights @ ps


def min_distance(point, polyline):
    """
    Distance of the point to the nearest point of the array `polyline`.
    """
    return np.min(np.linalg.norm(np.array(polyline) - np.array(point), axis=1))
