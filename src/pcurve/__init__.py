from .exceptions import (ParamError, CurveError, InsufficientControlPointsError, DegenerateGeometryError,
                         SubdivisionDepthError, SubdivisionDepthErrorWarning, make_warning)
from .point import Point3, check_points
from .bezier import evaluate_bezier_curve, adaptive_subdivision, split_bezier, gravesen_error
from .bspline import uniform_bspline, quadratic_uniform_bspline
from .catmull_rom import KnotParametrization, KNOT_ALPHA, cubic_catmull_rom_spline, catmull_rom_segments
from .curve_config import (uniform_parameters, check_curve_config, evaluate_curve_config,
                           load_curve_config, dump_curve_config)
