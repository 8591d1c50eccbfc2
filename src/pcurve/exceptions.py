import warnings
from functools import lru_cache


@lru_cache(maxsize=None)
def make_warning(cls):
    """
    Takes 'class_name' of an object and creates new type 'class_nameWarning'
    as an descendant of Warning class.
    Used for retyping error classes to warnings.
    The type is created once per class, so it can be used as a filter category.
    """
    return type(cls.__name__ + "Warning", (Warning,), {})


def warn_or_raise(err_cls, msg, raise_error, stacklevel=3):
    """
    Raise `err_cls(msg)` if `raise_error` is True, otherwise issue
    the corresponding warning category made by `make_warning`.
    """
    if raise_error:
        raise err_cls(msg)
    warnings.warn(message=msg, category=make_warning(err_cls), stacklevel=stacklevel)


class ParamError(ValueError):
    pass


class CurveError(ParamError):
    pass


class InsufficientControlPointsError(CurveError):
    def __init__(self, required, given):
        super().__init__(f"At least {required} control points are required, got {given}.")
        self.required = required
        self.given = given


class DegenerateGeometryError(CurveError):
    pass


class SubdivisionDepthError(CurveError):
    pass


SubdivisionDepthErrorWarning = make_warning(SubdivisionDepthError)
