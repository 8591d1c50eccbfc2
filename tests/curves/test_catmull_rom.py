import numpy as np
import pytest

from pcurve import catmull_rom as cr
from pcurve import KnotParametrization, InsufficientControlPointsError, DegenerateGeometryError, ParamError


class TestKnotParametrization:

    def test_create(self):
        assert KnotParametrization.create(None) == KnotParametrization(uniform=True)
        sel = KnotParametrization.create({'chordal': True, 'centripetal': True})
        assert sel == KnotParametrization(uniform=False, chordal=True, centripetal=True)
        assert sel.active() == ['chordal', 'centripetal']
        assert KnotParametrization.create(sel) is sel
        with pytest.raises(ParamError):
            KnotParametrization.create({'cordal': True})
        with pytest.raises(ParamError):
            KnotParametrization.create([True, False, False])
        # only bool flags, a string is not read as a flag
        with pytest.raises(ParamError):
            KnotParametrization.create({'uniform': 'no'})
        with pytest.raises(ParamError):
            KnotParametrization.create({'chordal': 'false'})
        with pytest.raises(ParamError):
            KnotParametrization.create({'centripetal': 1})
        sel = KnotParametrization.create({'uniform': None, 'centripetal': True})
        assert sel == KnotParametrization(uniform=False, chordal=False, centripetal=True)


class TestCatmullRom:

    def test_single_segment(self, cubic_points):
        result = cr.cubic_catmull_rom_spline(cubic_points, KnotParametrization(uniform=True))
        assert len(result.uniform) == 21
        assert result['uniform'][0] == cubic_points[1]
        assert result['uniform'][20] == cubic_points[2]
        assert result.chordal == []
        assert result.centripetal == []

    def test_default_selector(self, cubic_points):
        result = cr.cubic_catmull_rom_spline(cubic_points)
        assert len(result.uniform) == 21
        assert result.chordal == [] and result.centripetal == []

    def test_all_parametrizations(self, space_points):
        flags = {'uniform': True, 'chordal': True, 'centripetal': True}
        result = cr.cubic_catmull_rom_spline(space_points, flags)
        n_samples = 21 * (len(space_points) - 3)
        assert len(result.uniform) == len(result.chordal) == len(result.centripetal) == n_samples
        assert not np.allclose(result.uniform, result.chordal)
        assert not np.allclose(result.uniform, result.centripetal)
        assert not np.allclose(result.chordal, result.centripetal)
        # all of them interpolate inner control points
        for name in ['uniform', 'chordal', 'centripetal']:
            for k in range(len(space_points) - 3):
                assert result[name][21 * k] == space_points[k + 1]
                assert result[name][21 * k + 20] == space_points[k + 2]

    def test_uniform_tangents(self):
        # equidistant points on a line, the uniform spline is the line itself
        ps = [(0, 0, 0), (1, 0, 0), (2, 0, 0), (3, 0, 0)]
        result = cr.catmull_rom_segments(ps, alpha=0.0)
        expected = np.stack([np.linspace(1, 2, 21), np.zeros(21), np.zeros(21)], axis=1)
        assert np.allclose(result, expected)

    def test_equal_spacing(self):
        # all knot intervals equal, the parametrizations coincide
        ps = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (0, 1, 1)]
        uniform = cr.catmull_rom_segments(ps, 0.0)
        assert np.allclose(uniform, cr.catmull_rom_segments(ps, 1.0))
        assert np.allclose(uniform, cr.catmull_rom_segments(ps, 0.5))

    def test_tension(self, cubic_points):
        # full tension gives zero tangents
        result = cr.catmull_rom_segments(cubic_points, 0.5, tension=1.0)
        p1, p2 = np.array(cubic_points[1]), np.array(cubic_points[2])
        t = 0.5
        h = 3 * t ** 2 - 2 * t ** 3
        assert np.allclose(result[10], (1 - h) * p1 + h * p2)

    def test_resolution(self, space_points):
        result = cr.catmull_rom_segments(space_points, 0.5, resolution=4)
        assert len(result) == 5 * (len(space_points) - 3)
        with pytest.raises(ParamError):
            cr.catmull_rom_segments(space_points, 0.5, resolution=0)
        with pytest.raises(ParamError):
            cr.catmull_rom_segments(space_points, 1.5)
        with pytest.raises(ParamError):
            cr.catmull_rom_segments(space_points, 0.5, tension=-0.1)

    def test_coincident_points(self):
        ps = [(0, 0, 0), (0, 0, 0), (1, 0, 0), (2, 1, 0)]
        with pytest.raises(DegenerateGeometryError):
            cr.cubic_catmull_rom_spline(ps, {'chordal': True})
        with pytest.raises(DegenerateGeometryError):
            cr.cubic_catmull_rom_spline(ps, {'centripetal': True})
        # uniform knot intervals do not depend on distances
        result = cr.cubic_catmull_rom_spline(ps, {'uniform': True})
        assert np.all(np.isfinite(result.uniform))
        assert result.uniform[0] == ps[1]
        assert result.uniform[-1] == ps[2]

    def test_coincident_end_points(self):
        ps = [(0, 0, 0), (1, 0, 0), (2, 1, 0), (2, 1, 0)]
        with pytest.raises(DegenerateGeometryError):
            cr.cubic_catmull_rom_spline(ps, {'chordal': True})
        with pytest.raises(DegenerateGeometryError):
            cr.cubic_catmull_rom_spline(ps, {'centripetal': True})
        result = cr.cubic_catmull_rom_spline(ps, {'uniform': True})
        assert np.all(np.isfinite(result.uniform))
        assert result.uniform[-1] == ps[2]

    def test_insufficient_points(self):
        with pytest.raises(InsufficientControlPointsError):
            cr.cubic_catmull_rom_spline([(0, 0, 0), (1, 0, 0), (2, 0, 0)])
        with pytest.raises(InsufficientControlPointsError):
            cr.catmull_rom_segments([(0, 0, 0)], 0.0)

    def test_input_not_modified(self, space_points):
        ps = np.array(space_points)
        ps_copy = ps.copy()
        first = cr.cubic_catmull_rom_spline(ps, {'uniform': True, 'chordal': True, 'centripetal': True})
        second = cr.cubic_catmull_rom_spline(ps, {'uniform': True, 'chordal': True, 'centripetal': True})
        assert np.all(ps == ps_copy)
        assert first == second
