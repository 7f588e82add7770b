"""Unit tests for coordinate-level geometry primitives."""
from fractions import Fraction

import numpy as np
import pytest

from dgweights.core import geometry
from dgweights.core.geometry import Angle, DegenerateTriangleError


class TestAngleClassification:

    def test_angle_from_dot_signs(self):
        assert geometry.angle_from_dot(2.5) is Angle.ACUTE
        assert geometry.angle_from_dot(0) is Angle.RIGHT
        assert geometry.angle_from_dot(-1e-30) is Angle.OBTUSE

    def test_angle_at_middle_point(self):
        o = (0, 0)
        assert geometry.angle_at((1, 0), o, (1, 1)) is Angle.ACUTE
        assert geometry.angle_at((1, 0), o, (0, 1)) is Angle.RIGHT
        assert geometry.angle_at((1, 0), o, (-1, 1)) is Angle.OBTUSE

    def test_angle_at_coincident_points_is_right(self):
        # zero vector -> zero dot product
        assert geometry.angle_at((0, 0), (0, 0), (3, 4)) is Angle.RIGHT

    def test_angle_in_space(self):
        assert geometry.angle_at((1, 0, 0), (0, 0, 0), (0, 0, 1)) is Angle.RIGHT
        assert geometry.angle_at((1, 0, 0), (0, 0, 0), (-1, 0, 1)) is Angle.OBTUSE

    def test_angle_values_are_signs(self):
        assert int(Angle.OBTUSE) == -1
        assert int(Angle.RIGHT) == 0
        assert int(Angle.ACUTE) == 1


def test_midpoint_exact():
    m = geometry.midpoint((Fraction(1), Fraction(0)), (Fraction(0), Fraction(1)))
    assert m == (Fraction(1, 2), Fraction(1, 2))


def test_cross_3_basis():
    assert geometry.cross_3((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
    assert geometry.cross_3((0, 1, 0), (1, 0, 0)) == (0, 0, -1)


def test_signed_area_2_orientation():
    assert geometry.signed_area_2((0, 0), (1, 0), (0, 1)) == 0.5
    assert geometry.signed_area_2((0, 0), (0, 1), (1, 0)) == -0.5


def test_squared_area_3_unit_right_triangle():
    assert geometry.squared_area_3((0, 0, 0), (1, 0, 0), (0, 1, 0)) == 0.25


class TestCircumcenter:

    def test_circumcenter_2_right_triangle(self):
        # right angle at the origin -> midpoint of the hypotenuse
        c = geometry.circumcenter_2((0, 0), (2, 0), (0, 2))
        assert c == (1, 1)

    def test_circumcenter_2_exact(self):
        pts = [(Fraction(0), Fraction(0)), (Fraction(4), Fraction(0)), (Fraction(1), Fraction(3))]
        assert geometry.circumcenter_2(*pts) == (Fraction(2), Fraction(1))

    def test_circumcenter_3_right_triangle(self):
        c = geometry.circumcenter_3((0, 0, 0), (2, 0, 0), (0, 2, 0))
        assert np.allclose(c, (1.0, 1.0, 0.0))

    def test_circumcenter_3_equidistant(self):
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([4.0, 0.0, -1.0])
        c = np.array([-2.0, 5.0, 2.0])
        o = np.array(geometry.circumcenter_3(a, b, c))
        da = np.linalg.norm(o - a)
        db = np.linalg.norm(o - b)
        dc = np.linalg.norm(o - c)
        assert abs(da - db) < 1e-10 and abs(da - dc) < 1e-10
        # lies in the triangle's plane
        n = np.cross(b - a, c - a)
        assert abs(np.dot(o - a, n)) < 1e-9

    def test_circumcenter_collinear_raises(self):
        with pytest.raises(DegenerateTriangleError):
            geometry.circumcenter_2((0, 0), (1, 1), (2, 2))
        with pytest.raises(DegenerateTriangleError):
            geometry.circumcenter_3((0, 0, 0), (1, 1, 1), (3, 3, 3))

    def test_degenerate_error_is_value_error(self):
        with pytest.raises(ValueError):
            geometry.circumcenter_2((0, 0), (0, 0), (0, 0))

    def test_circumcenter_eps_threshold(self):
        # nearly collinear: sin(angle at a) = 5e-11
        pts = ((0.0, 0.0), (1.0, 0.0), (2.0, 1e-10))
        geometry.circumcenter_2(*pts)
        with pytest.raises(DegenerateTriangleError):
            geometry.circumcenter_2(*pts, eps=1e-6)

    @pytest.mark.parametrize('s', [1e-12, 1e-9, 1e-5, 1.0, 1e5, 1e9])
    def test_circumcenter_threshold_is_scale_free(self, s):
        a, b, c = (0.0, 0.0), (4.0 * s, 0.0), (1.0 * s, 3.0 * s)
        o = geometry.circumcenter_2(a, b, c, eps=1e-15)
        assert np.allclose(o, (2.0 * s, 1.0 * s), rtol=1e-12, atol=0)
        o3 = geometry.circumcenter_3((*a, 0.0), (*b, 0.0), (*c, 0.0), eps=1e-15)
        assert np.allclose(o3, (2.0 * s, 1.0 * s, 0.0), rtol=1e-12, atol=1e-300)

    def test_thin_right_triangle_is_not_degenerate(self):
        # one tiny angle, but the angle at a is right
        o = geometry.circumcenter_2((0.0, 0.0), (1.0, 0.0), (0.0, 1e-10), eps=1e-6)
        assert np.allclose(o, (0.5, 5e-11))
