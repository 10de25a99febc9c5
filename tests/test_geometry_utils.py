"""Tests for vector and scalar helpers."""

import numpy as np
import pytest

from planetshine.utils.geometry_utils import (
    EPSILON,
    clamp01,
    safe_divide,
    normalize,
    angle_between_deg,
    any_perpendicular,
    rotate_about_axis,
    rotate_towards,
)


class TestScalarGuards:

    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.25) == 0.25
        assert clamp01(3.8) == 1.0

    def test_safe_divide_regular(self):
        assert safe_divide(6.0, 3.0) == pytest.approx(2.0)

    def test_safe_divide_zero_denominator_saturates(self):
        assert safe_divide(1.0, 0.0) == pytest.approx(1.0 / EPSILON)
        assert np.isfinite(safe_divide(-5.0, 0.0))

    def test_safe_divide_keeps_sign_of_small_negative(self):
        assert safe_divide(1.0, -1e-12) < 0


class TestVectors:

    def test_normalize(self):
        np.testing.assert_allclose(normalize(np.array([3.0, 0.0, 4.0])), [0.6, 0.0, 0.8])

    def test_normalize_zero_vector_fallback(self):
        np.testing.assert_array_equal(normalize(np.zeros(3)), np.zeros(3))
        np.testing.assert_array_equal(normalize(np.zeros(3), fallback=np.array([0.0, 1.0, 0.0])),
                                      [0.0, 1.0, 0.0])

    def test_angle_between(self):
        x = np.array([1.0, 0.0, 0.0])
        assert angle_between_deg(x, np.array([0.0, 2.0, 0.0])) == pytest.approx(90.0)
        assert angle_between_deg(x, -x) == pytest.approx(180.0)
        assert angle_between_deg(x, x) == pytest.approx(0.0)

    def test_angle_with_zero_vector_is_zero(self):
        assert angle_between_deg(np.zeros(3), np.array([1.0, 0.0, 0.0])) == 0.0

    def test_any_perpendicular(self):
        for v in (np.array([1.0, 0.0, 0.0]), np.array([0.0, 0.0, 5.0]), np.array([1.0, 1.0, 1.0])):
            p = any_perpendicular(v)
            assert np.dot(p, v) == pytest.approx(0.0, abs=1e-12)
            assert np.linalg.norm(p) == pytest.approx(1.0)


class TestRotations:

    def test_rotate_about_axis_right_hand(self):
        rotated = rotate_about_axis(np.array([1.0, 0.0, 0.0]), 90.0, np.array([0.0, 0.0, 1.0]))
        np.testing.assert_allclose(rotated, [0.0, 1.0, 0.0], atol=1e-12)

    def test_rotate_about_unnormalized_axis(self):
        rotated = rotate_about_axis(np.array([0.0, 1.0, 0.0]), 180.0, np.array([0.0, 0.0, 7.0]))
        np.testing.assert_allclose(rotated, [0.0, -1.0, 0.0], atol=1e-12)

    def test_rotate_about_degenerate_axis_is_identity(self):
        v = np.array([0.3, -0.2, 0.9])
        np.testing.assert_array_equal(rotate_about_axis(v, 45.0, np.zeros(3)), v)

    def test_rotate_towards_partial(self):
        result = rotate_towards(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), 30.0)
        np.testing.assert_allclose(result, [np.cos(np.radians(30)), np.sin(np.radians(30)), 0.0], atol=1e-12)

    def test_rotate_towards_stops_at_target(self):
        result = rotate_towards(np.array([1.0, 0.0, 0.0]), np.array([0.0, 3.0, 0.0]), 120.0)
        np.testing.assert_allclose(result, [0.0, 1.0, 0.0], atol=1e-12)

    def test_rotate_towards_zero_angle(self):
        result = rotate_towards(np.array([0.0, 0.0, 2.0]), np.array([0.0, 1.0, 0.0]), 0.0)
        np.testing.assert_allclose(result, [0.0, 0.0, 1.0], atol=1e-12)

    def test_rotate_towards_opposite_direction(self):
        x = np.array([1.0, 0.0, 0.0])
        result = rotate_towards(x, -x, 90.0)
        assert np.linalg.norm(result) == pytest.approx(1.0)
        assert angle_between_deg(result, x) == pytest.approx(90.0)
