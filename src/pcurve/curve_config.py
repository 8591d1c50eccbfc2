"""
Curve configuration documents.

A document describes a single curve of the curve editor:

    tag: Bézier                 # or bezier, bspline, catmull-rom
    controlPoints: [[0, 0, 0], [1, 1, 0], [2, 0, 0]]
    showControlPoints: true
    showSamplePoints: false
    nSteps: 100                 # Bézier, bspline
    adaptiveSubdivision: false  # Bézier
    degree: 3                   # bspline
    knotParametrization: {uniform: true, chordal: false, centripetal: false}  # catmull-rom

Display flags are only preserved, the evaluation uses the remaining fields.
"""
from dataclasses import asdict
from typing import *

from .core import dotdict, load_config, dump_config, report
from .exceptions import ParamError
from .point import check_points
from .bezier import evaluate_bezier_curve, adaptive_subdivision
from .bspline import uniform_bspline, quadratic_uniform_bspline
from .catmull_rom import KnotParametrization, cubic_catmull_rom_spline

BEZIER = 'Bézier'
BSPLINE = 'bspline'
CATMULL_ROM = 'catmull-rom'

TAG_ALIASES = {
    'Bézier': BEZIER,
    'bezier': BEZIER,
    'bspline': BSPLINE,
    'catmull-rom': CATMULL_ROM,
}


def uniform_parameters(n_steps: int) -> List[float]:
    """
    Equidistant parameters i / (n_steps - 1), i = 0 .. n_steps - 1, covering [0, 1].
    """
    if isinstance(n_steps, bool) or not isinstance(n_steps, int) or n_steps < 2:
        raise ParamError(f"Number of steps must be an integer >= 2, get: {n_steps}.")
    return [i / (n_steps - 1) for i in range(n_steps)]


def _check_flag(cfg, key, default):
    value = cfg.get(key, None)
    if value is None:
        value = default
    if not isinstance(value, bool):
        raise ParamError(f"Config key '{key}' must be a boolean, get: {value!r}.")
    cfg[key] = value


def _check_n_steps(cfg, optional=False):
    n_steps = cfg.get('nSteps', None)
    if n_steps is None and optional:
        cfg['nSteps'] = None
        return
    uniform_parameters(n_steps)


def check_curve_config(cfg: Mapping) -> dotdict:
    """
    Validate the curve document and fill in default values.
    :param cfg: mapping (e.g. loaded YAML/JSON document)
    :return: new dotdict with normalized 'tag' and defaults
    """
    if not isinstance(cfg, Mapping):
        raise ParamError(f"Curve config must be a mapping, get: {type(cfg)}.")
    cfg = dotdict.create(dict(cfg))
    tag = cfg.get('tag', None)
    if tag not in TAG_ALIASES:
        raise ParamError(f"Unsupported curve type: {tag!r}, expected one of: {list(TAG_ALIASES)}.")
    cfg.tag = TAG_ALIASES[tag]
    if 'controlPoints' not in cfg:
        raise ParamError("Missing 'controlPoints' in the curve config.")
    cfg.controlPoints = [tuple(p) for p in check_points(cfg.controlPoints).tolist()]
    _check_flag(cfg, 'showControlPoints', True)
    _check_flag(cfg, 'showSamplePoints', True)

    if cfg.tag == BEZIER:
        _check_flag(cfg, 'adaptiveSubdivision', False)
        _check_n_steps(cfg, optional=cfg.adaptiveSubdivision)
    elif cfg.tag == BSPLINE:
        _check_n_steps(cfg)
        degree = cfg.get('degree', None)
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < 1:
            raise ParamError(f"B-spline degree must be a positive integer, get: {degree!r}.")
    else:
        cfg.knotParametrization = KnotParametrization.create(cfg.get('knotParametrization', None))
    return cfg


@report
def evaluate_curve_config(cfg: Mapping) -> dotdict:
    """
    Compute sample points of the curve described by the config.
    :return: dotdict(tag, samples, n_steps) for Bézier and bspline curves,
        dotdict(tag, uniform, chordal, centripetal) for Catmull-Rom splines
    """
    cfg = check_curve_config(cfg)
    ps = cfg.controlPoints
    if cfg.tag == CATMULL_ROM:
        result = cubic_catmull_rom_spline(ps, cfg.knotParametrization)
        result.tag = cfg.tag
        return result

    if cfg.tag == BEZIER:
        if cfg.adaptiveSubdivision:
            samples = adaptive_subdivision(ps)
        else:
            samples = evaluate_bezier_curve(ps, uniform_parameters(cfg.nSteps))
    elif cfg.degree == 2:
        samples = quadratic_uniform_bspline(ps, uniform_parameters(cfg.nSteps))
    else:
        samples = uniform_bspline(ps, uniform_parameters(cfg.nSteps))
    return dotdict(tag=cfg.tag, samples=samples, n_steps=len(samples))


def load_curve_config(path: str) -> dotdict:
    """
    Load and validate the curve document from a YAML or JSON file.
    """
    return check_curve_config(load_config(path))


def dump_curve_config(cfg: Mapping, path: str):
    """
    Validate and write the curve document, JSON for the '.json' suffix, YAML otherwise.
    """
    cfg = check_curve_config(cfg)
    if cfg.tag == CATMULL_ROM:
        cfg.knotParametrization = asdict(cfg.knotParametrization)
    dump_config(cfg, path)
