from __future__ import annotations

import logging

import plotly.graph_objects as go
import pytest

from curveplot import (
    Domain,
    Exponential,
    Logarithmic,
    PlotterConfig,
    PlotterSession,
    Polynomial,
    Range,
    Trigonometric,
)


def test_session_starts_with_polynomial_and_sine() -> None:
    session = PlotterSession()
    labels = [curve.label for curve in session.curves]
    assert labels == ["Polynomial Function", "Trigonometric Function"]
    assert all(len(curve) == 101 for curve in session.curves)
    assert session.polynomial == Polynomial((1, 0, -1))
    assert session.trigonometric == Trigonometric("sin", 1, 1, 0)
    assert session.domain.x_range == Range(-10.0, 10.0)
    assert session.domain.y_range == Range(-10.0, 10.0)


def test_session_can_start_empty() -> None:
    session = PlotterSession(seed_default_curves=False)
    assert session.curves == ()


def test_plot_polynomial_replaces_curves_with_the_new_polynomial() -> None:
    session = PlotterSession()
    session.plot_polynomial(1, 2, 3)
    (curve,) = session.curves
    assert curve.function == Polynomial((1, 2, 3))
    assert session.polynomial == Polynomial((1, 2, 3))
    assert curve.points[0] == (-10.0, 1.0 - 20.0 + 300.0)


def test_plot_polynomial_accepts_text_input() -> None:
    session = PlotterSession()
    session.plot_polynomial("1 0 -1")
    assert session.curves[0].function == Polynomial((1, 0, -1))
    session.plot_polynomial("2", "pi")
    assert session.polynomial.coefficients[1] == pytest.approx(3.141592653589793)


def test_plot_polynomial_requires_coefficients() -> None:
    session = PlotterSession()
    with pytest.raises(ValueError, match="at least one coefficient"):
        session.plot_polynomial()
    with pytest.raises(ValueError, match="Invalid coefficient"):
        session.plot_polynomial(1, "oops")
    assert len(session.curves) == 2


def test_plot_trigonometric_shows_only_the_wave() -> None:
    session = PlotterSession()
    session.plot_trigonometric("2", 1, "pi/2", kind="cos")
    (curve,) = session.curves
    assert curve.function.kind == "cos"
    assert curve.function.amplitude == 2.0


def test_unknown_trigonometric_kind_plots_zero_line() -> None:
    session = PlotterSession()
    session.plot_trigonometric(1, 1, 0, kind="tan")
    assert {y for _, y in session.curves[0].points} == {0.0}


def test_plot_exponential_is_not_tracked() -> None:
    session = PlotterSession()
    session.plot_exponential(2, 3)
    (curve,) = session.curves
    assert curve.function == Exponential(2.0, 3.0)
    assert curve.points[0][1] == pytest.approx(2.0 * 3.0 ** -10)

    session.change_range((-1, 1), (-1, 1))
    assert [c.label for c in session.curves] == ["Polynomial Function", "Trigonometric Function"]


def test_plot_logarithmic_validates_base() -> None:
    session = PlotterSession()
    with pytest.raises(ValueError, match="logarithm base"):
        session.plot_logarithmic(1, 1, 0)
    session.plot_logarithmic(1, 10)
    assert session.curves[0].function == Logarithmic(1.0, 10.0, 0.0)


def test_change_range_updates_shared_domain_and_resamples() -> None:
    session = PlotterSession()
    domain = session.domain
    session.plot_polynomial(0, 1)

    session.change_range((0, 5), (-1, 1))

    assert session.domain is domain
    assert domain.x_range == Range(0.0, 5.0)
    poly, wave = session.curves
    assert poly.function == Polynomial((0, 1))
    assert poly.points[0] == (0.0, 0.0)
    assert poly.points[-1][0] == pytest.approx(5.0)
    assert wave.points[0][0] == 0.0


def test_change_range_parses_text_and_rejects_inverted_bounds() -> None:
    session = PlotterSession()
    session.change_range("-2 2", "-pi pi")
    assert session.domain.y_range.max == pytest.approx(3.141592653589793)

    before = session.domain.x_range
    with pytest.raises(ValueError, match="x_range"):
        session.change_range((3, -3), (0, 1))
    assert session.domain.x_range == before


def test_clear_removes_all_curves() -> None:
    session = PlotterSession()
    session.clear()
    assert session.curves == ()


def test_save_and_load_through_session(tmp_path) -> None:
    session = PlotterSession()
    expected = [curve.points for curve in session.curves]
    path = tmp_path / "session.txt"
    session.save(path)

    session.clear()
    session.load(path)
    assert [curve.points for curve in session.curves] == expected
    assert all(curve.function is None for curve in session.curves)


def test_load_missing_file_through_session(tmp_path) -> None:
    session = PlotterSession()
    session.load(tmp_path / "missing.txt")
    assert session.curves == ()


def test_sampling_points_come_from_config() -> None:
    session = PlotterSession(PlotterConfig(sampling_points=10, x_range=(0, 1)))
    assert all(len(curve) == 11 for curve in session.curves)
    assert session.domain == Domain((0, 1), (-10, 10))


def test_figure_renders_current_curves() -> None:
    session = PlotterSession()
    fig = session.figure()
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 2
    session.clear()
    assert len(session.figure().data) == 0


def test_actions_are_logged(caplog) -> None:
    caplog.set_level(logging.INFO, logger="curveplot.plotter_session")
    session = PlotterSession()
    session.change_range((0, 1), (0, 1))
    assert "range changed" in caplog.text


def test_debug_config_raises_package_log_level() -> None:
    package_logger = logging.getLogger("curveplot")
    previous = package_logger.level
    try:
        PlotterSession(PlotterConfig(debug=True))
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous)


def test_invalid_config_values_raise() -> None:
    with pytest.raises(ValueError, match="sampling_points"):
        PlotterConfig(sampling_points=0)
    with pytest.raises(ValueError, match="grid_spacing"):
        PlotterConfig(grid_spacing=-4)
    config = PlotterConfig().with_ranges((0, 2), (0, 3))
    assert config.x_range == Range(0.0, 2.0)
    assert config.sampling_points == 100


def test_change_range_accepts_range_objects() -> None:
    session = PlotterSession()
    session.change_range(Range(-1, 3), Range(-2, 2))
    assert session.domain.x_range == Range(-1.0, 3.0)
    assert session.curves[0].points[0][0] == -1.0
    with pytest.raises(ValueError, match="y_range"):
        session.change_range(Range(0, 1), Range(2, 2))
