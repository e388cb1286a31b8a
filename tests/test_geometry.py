"""
Tests for swarm geometry helpers.

Covers:
- Toroidal distance (scalar + vectorised)
- wrap() range, idempotence and fail-fast bounds
- clamp()
- mean_angle() circular mean and weighting
"""

import math

import numpy as np
import pytest

from boidswarm.boids.geometry import (
    toroidal_distance,
    toroidal_distances,
    wrap,
    clamp,
    mean_angle,
    bearing,
)


class TestToroidalDistance:
    """Shortest distance on a wrap-around plane."""

    def test_across_wrap_boundary(self):
        """(1,50)-(99,50) in 100x100 is 2, not 98."""
        assert toroidal_distance(1, 50, 99, 50, 100, 100) == pytest.approx(2.0)
        assert math.hypot(99 - 1, 0) == pytest.approx(98.0)

    def test_symmetric(self):
        """Swapping the points gives the same distance."""
        pairs = [
            ((10, 20), (90, 75)),
            ((0, 0), (50, 50)),
            ((3.5, 97.25), (96.0, 2.0)),
        ]
        for (ax, ay), (bx, by) in pairs:
            assert toroidal_distance(ax, ay, bx, by, 100, 100) == pytest.approx(
                toroidal_distance(bx, by, ax, ay, 100, 100)
            )

    def test_direct_when_closer(self):
        """Points close together use the direct gap."""
        assert toroidal_distance(10, 10, 13, 14, 100, 100) == pytest.approx(5.0)

    def test_wraps_both_axes(self):
        """Corner-to-corner wraps on x and y."""
        assert toroidal_distance(1, 1, 99, 99, 100, 100) == pytest.approx(math.sqrt(8))

    def test_same_point_is_zero(self):
        assert toroidal_distance(42, 17, 42, 17, 100, 100) == 0.0

    def test_vectorised_matches_scalar(self):
        """toroidal_distances agrees with toroidal_distance point by point."""
        xs = np.array([1.0, 50.0, 99.0, 20.0])
        ys = np.array([50.0, 50.0, 50.0, 95.0])
        result = toroidal_distances(1.0, 50.0, xs, ys, 100, 100)
        expected = [toroidal_distance(1.0, 50.0, x, y, 100, 100) for x, y in zip(xs, ys)]
        np.testing.assert_allclose(result, expected)


class TestWrap:
    """wrap() into [lo, hi)."""

    def test_in_range_unchanged(self):
        assert wrap(1.0, -math.pi, math.pi) == 1.0

    def test_upper_bound_excluded(self):
        """hi itself wraps to lo."""
        assert wrap(math.pi, -math.pi, math.pi) == pytest.approx(-math.pi)

    def test_lower_bound_included(self):
        assert wrap(-math.pi, -math.pi, math.pi) == -math.pi

    def test_position_domain(self):
        """Positions wrap into [-padding, width + 2*padding)."""
        assert wrap(110.0, -4, 108) == pytest.approx(-2.0)
        assert wrap(-6.0, -4, 108) == pytest.approx(106.0)

    def test_range_and_idempotent(self):
        """Result is always in range and wrapping twice changes nothing."""
        for value in np.linspace(-50.0, 50.0, 201):
            once = wrap(float(value), -math.pi, math.pi)
            assert -math.pi <= once < math.pi
            assert wrap(once, -math.pi, math.pi) == once

    def test_many_spans_away(self):
        assert wrap(1000.5, 0, 1) == pytest.approx(0.5)

    def test_one_ulp_below_lo_stays_below_hi(self):
        """value + span rounding up to hi must still land in [lo, hi)."""
        result = wrap(math.nextafter(-4.0, -math.inf), -4, 808)
        assert -4 <= result < 808

    def test_huge_value_terminates_in_range(self):
        """1e20 - span == 1e20 in floats; wrap still reduces it."""
        result = wrap(1e20, -math.pi, math.pi)
        assert -math.pi <= result < math.pi
        result = wrap(-1e20, -4, 808)
        assert -4 <= result < 808

    def test_bad_bounds_raise(self):
        """hi <= lo fails fast instead of looping."""
        with pytest.raises(ValueError):
            wrap(1.0, 5.0, 5.0)
        with pytest.raises(ValueError):
            wrap(1.0, 5.0, -5.0)

    def test_non_finite_raises(self):
        with pytest.raises(ValueError):
            wrap(float('inf'), 0, 1)
        with pytest.raises(ValueError):
            wrap(float('nan'), 0, 1)


class TestClamp:

    def test_never_exceeds_limit(self):
        """|clamp(v, L)| <= L for all inputs."""
        limit = math.pi / 15
        for value in np.linspace(-10.0, 10.0, 401):
            assert abs(clamp(float(value), limit)) <= limit

    def test_inside_limit_unchanged(self):
        assert clamp(0.1, 0.5) == 0.1
        assert clamp(-0.1, 0.5) == -0.1

    def test_clamps_both_sides(self):
        assert clamp(3.0, 0.5) == 0.5
        assert clamp(-3.0, 0.5) == -0.5


class TestMeanAngle:

    def test_copies_of_same_angle(self):
        """Mean of N copies of an angle is that angle (mod 2pi)."""
        for angle in [0.0, 1.0, -2.5, 3.0]:
            result = mean_angle([angle] * 5)
            diff = wrap(result - angle, -math.pi, math.pi)
            assert diff == pytest.approx(0.0, abs=1e-9)

    def test_across_pi_boundary(self):
        """Mean of just-below-pi and just-above--pi is pi, not 0."""
        result = mean_angle([math.pi - 0.1, -math.pi + 0.1])
        assert abs(result) == pytest.approx(math.pi)

    def test_repetition_weights(self):
        """[0, 0, 0, pi/2] leans 3:1 toward 0."""
        result = mean_angle([0.0, 0.0, 0.0, math.pi / 2])
        assert result == pytest.approx(math.atan2(0.25, 0.75))

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            mean_angle([])


class TestBearing:

    def test_cardinal_directions(self):
        assert bearing(0, 0, 10, 0) == pytest.approx(0.0)
        assert bearing(0, 0, 0, 10) == pytest.approx(math.pi / 2)
        assert bearing(0, 0, -10, 0) == pytest.approx(math.pi)
