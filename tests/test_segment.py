"""Tests for cubic Hermite segment evaluation."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from onedpath import HermiteSegment, start_acceleration, end_acceleration
from onedpath.segment import get_D_matrix


@pytest.fixture
def segment() -> HermiteSegment:
    return HermiteSegment(10.0, 3.0, 150.0, -4.0, 2.5)


class TestDerivativeMatrix:
    """Tests for the Bézier derivative matrix."""

    def test_cubic(self) -> None:
        expected = np.array([
            [-3, 3, 0, 0],
            [0, -3, 3, 0],
            [0, 0, -3, 3],
        ], dtype=float)
        assert_allclose(get_D_matrix(3), expected)


class TestBoundaryConditions:
    """The segment interpolates both nodes' position and velocity."""

    def test_positions(self, segment: HermiteSegment) -> None:
        assert segment.position(0.0) == pytest.approx(10.0)
        assert segment.position(2.5) == pytest.approx(150.0)

    def test_velocities(self, segment: HermiteSegment) -> None:
        assert segment.velocity(0.0) == pytest.approx(3.0)
        assert segment.velocity(2.5) == pytest.approx(-4.0)

    def test_accelerations_match_closed_form(self, segment: HermiteSegment) -> None:
        a_start, a_end = segment.boundary_accelerations()
        assert segment.acceleration(0.0) == pytest.approx(a_start)
        assert segment.acceleration(2.5) == pytest.approx(a_end)
        assert a_start == pytest.approx(start_acceleration(140.0, 3.0, -4.0, 2.5))
        assert a_end == pytest.approx(end_acceleration(140.0, 3.0, -4.0, 2.5))

    def test_acceleration_is_linear(self, segment: HermiteSegment) -> None:
        a_start, a_end = segment.boundary_accelerations()
        assert segment.acceleration(1.25) == pytest.approx(0.5 * (a_start + a_end))


class TestEvaluation:
    """Tests for array evaluation and range checks."""

    def test_scalar_returns_float(self, segment: HermiteSegment) -> None:
        assert isinstance(segment.position(1.0), float)

    def test_array_matches_scalars(self, segment: HermiteSegment) -> None:
        ts = np.array([0.0, 0.7, 1.9])
        values = segment.position(ts)
        assert values.shape == (3,)
        assert_allclose(values, [segment.position(t) for t in ts])

    def test_velocity_is_derivative_of_position(self, segment: HermiteSegment) -> None:
        t, eps = 1.1, 1e-6
        numeric = (segment.position(t + eps) - segment.position(t - eps)) / (2 * eps)
        assert segment.velocity(t) == pytest.approx(numeric, rel=1e-6)

    def test_out_of_range(self, segment: HermiteSegment) -> None:
        with pytest.raises(ValueError):
            segment.position(-0.1)
        with pytest.raises(ValueError):
            segment.acceleration(np.array([0.0, 3.0]))

    def test_sample(self, segment: HermiteSegment) -> None:
        ts, ps = segment.sample(11)
        assert ts[0] == 0.0 and ts[-1] == 2.5
        assert ps[0] == pytest.approx(10.0)
        assert ps[-1] == pytest.approx(150.0)


class TestNonPositiveDuration:
    """A negative duration runs the segment backward in t instead of failing."""

    def test_negative_duration(self) -> None:
        seg = HermiteSegment(0.0, 0.0, 10.0, 0.0, -2.0)
        assert seg.position(0.0) == pytest.approx(0.0)
        assert seg.position(-2.0) == pytest.approx(10.0)
        ts, ps = seg.sample(5)
        assert ts[-1] == -2.0
        assert ps[-1] == pytest.approx(10.0)

    def test_negative_duration_range(self) -> None:
        seg = HermiteSegment(0.0, 0.0, 10.0, 0.0, -2.0)
        with pytest.raises(ValueError):
            seg.position(1.0)
        with pytest.raises(ValueError):
            seg.position(-2.5)
