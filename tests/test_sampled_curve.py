from __future__ import annotations

import math

import numpy as np
import pytest

from curveplot import (
    Domain,
    Exponential,
    Polynomial,
    SampledCurve,
    Trigonometric,
    sample_points,
)


def test_sample_produces_num_points_plus_one_evenly_spaced_points() -> None:
    curve = SampledCurve(Polynomial((1, 0, -1)))
    curve.sample(Domain((-10, 10), (-10, 10)), 100)

    points = curve.points
    assert len(points) == 101
    assert points[0][0] == -10.0
    assert points[-1][0] == pytest.approx(10.0)
    step = 20.0 / 100
    for i, (x, y) in enumerate(points):
        assert x == -10.0 + i * step
        assert y == pytest.approx(1.0 - x * x, abs=1e-9)


def test_single_step_samples_both_endpoints() -> None:
    curve = SampledCurve(Polynomial((0, 1))).sample(Domain((2, 3), (0, 1)), 1)
    assert curve.points == ((2.0, 2.0), (3.0, 3.0))


def test_resampling_replaces_points() -> None:
    curve = SampledCurve(Trigonometric())
    curve.sample(Domain(), 50)
    curve.sample(Domain((0, 1), (0, 1)), 10)
    assert len(curve) == 11
    assert curve.points[0][0] == 0.0


def test_sampling_is_idempotent() -> None:
    curve = SampledCurve(Trigonometric("cos", 2.0, 0.3, 1.0))
    domain = Domain((-3, 7), (-1, 1))
    first = curve.sample(domain, 64).points
    second = curve.sample(domain, 64).points
    assert first == second


def test_non_finite_values_are_stored() -> None:
    curve = SampledCurve(Exponential(1.0, -2.0)).sample(Domain((0, 1), (0, 1)), 2)
    ys = [y for _, y in curve.points]
    assert ys[0] == 1.0
    assert math.isnan(ys[1])
    assert ys[2] == -2.0


def test_sample_accepts_a_bare_range() -> None:
    curve = SampledCurve(Polynomial((0, 2))).sample((0, 4), 4)
    assert [y for _, y in curve.points] == [0.0, 2.0, 4.0, 6.0, 8.0]


@pytest.mark.parametrize("num_points", [0, -1, 2.5, "many"])
def test_invalid_point_count_raises(num_points: object) -> None:
    curve = SampledCurve(Polynomial((1,)))
    with pytest.raises(ValueError):
        curve.sample(Domain(), num_points)  # type: ignore[arg-type]
    assert len(curve) == 0


def test_points_only_curve_cannot_be_sampled() -> None:
    curve = SampledCurve.from_points([(0, 1), (1, 2)])
    assert curve.function is None
    assert curve.label == ""
    assert curve.points == ((0.0, 1.0), (1.0, 2.0))
    with pytest.raises(ValueError, match="without a function"):
        curve.sample(Domain(), 10)


def test_new_curve_is_empty() -> None:
    curve = SampledCurve(Polynomial((1,)))
    assert len(curve) == 0
    assert curve.points == ()
    assert curve.x_data.shape == (0,)


def test_data_arrays_are_read_only_copies() -> None:
    curve = SampledCurve(Polynomial((0, 1))).sample((0, 1), 4)
    x_values = curve.x_data
    with pytest.raises(ValueError):
        x_values[0] = 99.0
    np.testing.assert_array_equal(curve.y_data, np.array([0.0, 0.25, 0.5, 0.75, 1.0]))


def test_reassigning_function_keeps_points_until_next_sample() -> None:
    curve = SampledCurve(Polynomial((1,))).sample((0, 1), 2)
    curve.function = Polynomial((5,))
    assert [y for _, y in curve.points] == [1.0, 1.0, 1.0]
    curve.sample((0, 1), 2)
    assert [y for _, y in curve.points] == [5.0, 5.0, 5.0]


def test_snapshot_is_decoupled_from_later_sampling() -> None:
    curve = SampledCurve(Polynomial((0, 1))).sample((0, 1), 2)
    snap = curve.snapshot()
    curve.sample((5, 6), 2)
    assert snap.label == "Polynomial Function"
    assert snap.points == ((0.0, 0.0), (0.5, 0.5), (1.0, 1.0))
    assert len(snap) == 3


def test_sample_points_helper_returns_arrays() -> None:
    xs, ys = sample_points(Polynomial((0, 0, 1)), (-1, 1), 2)
    np.testing.assert_array_equal(xs, np.array([-1.0, 0.0, 1.0]))
    np.testing.assert_array_equal(ys, np.array([1.0, 0.0, 1.0]))


def test_get_points_returns_ordered_pairs() -> None:
    curve = SampledCurve(Polynomial((0, 2))).sample((0, 1), 2)
    assert curve.get_points() == ((0.0, 0.0), (0.5, 1.0), (1.0, 2.0))
    assert curve.get_points() == curve.points
    assert SampledCurve.from_points([(3, 4)]).get_points() == ((3.0, 4.0),)
