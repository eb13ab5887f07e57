"""Headless driver for the interactive plotter.

Purpose
-------
``PlotterSession`` is the orchestrator between the text-menu collaborator and
the curve model. Each public method corresponds to one menu action and
performs it the same way every time:

1. convert raw user values with :func:`~curveplot.InputConvert.InputConvert`,
2. build or replace a function,
3. sample against the shared domain,
4. install the new curve set with clear-then-add.

Concepts and structure
----------------------
The session tracks two long-lived curves, a polynomial and a trigonometric
one, seeded with ``1 - x**2`` and ``sin(x)``. Changing the range re-samples
both and shows both. Exponential and logarithmic plots are one-off curves
that are dropped at the next action that clears the collection.

Logging
-------
Actions are logged at INFO on ``curveplot.plotter_session``. Pass
``PlotterConfig(debug=True)`` to switch the whole ``curveplot`` logger to
DEBUG, or configure logging yourself:

>>> import logging
>>> logging.basicConfig(level=logging.INFO)  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, Sequence, Union

import plotly.graph_objects as go

from .InputConvert import InputConvert, parse_coefficients, parse_range
from .curve_collection import CurveCollection
from .domain import Domain, Range, RangeLike, validate_range
from .figure_render import build_figure
from .math_function import Exponential, Logarithmic, MathFunction, Polynomial, Trigonometric
from .plotter_config import PlotterConfig
from .sampled_curve import SampledCurve

__all__ = ["PlotterSession"]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, "os.PathLike[str]"]
RangeInput = Union[RangeLike, str, Sequence[Any]]

DEFAULT_POLYNOMIAL = Polynomial((1.0, 0.0, -1.0))
DEFAULT_TRIGONOMETRIC = Trigonometric("sin", 1.0, 1.0, 0.0)


def _to_float(value: Any, name: str) -> float:
    try:
        return float(InputConvert(value, float, truncate=False))
    except ValueError as e:
        raise ValueError(f"Invalid {name}: {e}") from e


def _to_range(value: RangeInput, name: str) -> Range:
    if isinstance(value, str):
        return parse_range(value, name=name)
    raw_min, raw_max = value
    return validate_range((_to_float(raw_min, name), _to_float(raw_max, name)), name=name)


class PlotterSession:
    """Stateful plotter driven by discrete user actions.

    Parameters
    ----------
    config : PlotterConfig, optional
        Initial domain, sampling density, surface and projection settings.
    seed_default_curves : bool, default=True
        Start with the tracked polynomial and sine curves sampled and shown.

    Examples
    --------
    >>> session = PlotterSession()
    >>> [curve.label for curve in session.curves]
    ['Polynomial Function', 'Trigonometric Function']
    >>> session.plot_exponential(2, 3)
    >>> len(session.curves)
    1
    """

    def __init__(
        self,
        config: Optional[PlotterConfig] = None,
        *,
        seed_default_curves: bool = True,
    ) -> None:
        self._config = config if config is not None else PlotterConfig()
        if self._config.debug:
            logging.getLogger("curveplot").setLevel(logging.DEBUG)

        domain = Domain(self._config.x_range, self._config.y_range)
        self._collection = CurveCollection(domain)
        self._polynomial_curve = SampledCurve(DEFAULT_POLYNOMIAL)
        self._trigonometric_curve = SampledCurve(DEFAULT_TRIGONOMETRIC)

        if seed_default_curves:
            self._show(self._resample(self._polynomial_curve), self._resample(self._trigonometric_curve))

    # --- Properties ---

    @property
    def config(self) -> PlotterConfig:
        return self._config

    @property
    def collection(self) -> CurveCollection:
        return self._collection

    @property
    def domain(self) -> Domain:
        return self._collection.domain

    @property
    def curves(self) -> tuple[SampledCurve, ...]:
        return self._collection.get_curves()

    @property
    def polynomial(self) -> MathFunction:
        """Return the tracked polynomial."""
        return self._polynomial_curve.function  # type: ignore[return-value]

    @property
    def trigonometric(self) -> MathFunction:
        """Return the tracked trigonometric function."""
        return self._trigonometric_curve.function  # type: ignore[return-value]

    # --- Internals ---

    def _resample(self, curve: SampledCurve) -> SampledCurve:
        return curve.sample(self._collection.domain, self._config.sampling_points)

    def _show(self, *curves: SampledCurve) -> None:
        self._collection.clear()
        for curve in curves:
            self._collection.add_curve(curve)

    # --- Menu actions ---

    def plot_polynomial(self, *coefficients: Any) -> None:
        """Replace the tracked polynomial and show it alone.

        Parameters
        ----------
        *coefficients : float or str
            Coefficients in ascending power order, or a single string such as
            ``"1 0 -1"``.

        Raises
        ------
        ValueError
            If no coefficient is given or one cannot be converted.
        """
        if len(coefficients) == 1 and isinstance(coefficients[0], str):
            values = parse_coefficients(coefficients[0])
        else:
            values = [_to_float(c, "coefficient") for c in coefficients]
        if not values:
            raise ValueError("plot_polynomial() needs at least one coefficient.")
        self._polynomial_curve.function = Polynomial(tuple(values))
        self._show(self._resample(self._polynomial_curve))
        logger.info("plotted polynomial %s", self._polynomial_curve.function.symbolic)

    def plot_trigonometric(
        self, amplitude: Any, frequency: Any, phase: Any, kind: str = "sin"
    ) -> None:
        """Replace the tracked trigonometric function and show it alone.

        ``kind`` is stored as given; kinds other than ``"sin"``/``"cos"`` plot
        as the zero function.
        """
        function = Trigonometric(
            kind,
            _to_float(amplitude, "amplitude"),
            _to_float(frequency, "frequency"),
            _to_float(phase, "phase"),
        )
        if not function.is_known_kind:
            logger.info("unknown trigonometric kind %r plots as zero", kind)
        self._trigonometric_curve.function = function
        self._show(self._resample(self._trigonometric_curve))
        logger.info("plotted %s", function.symbolic)

    def plot_exponential(self, coefficient: Any, base: Any) -> None:
        """Sample ``coefficient * base**x`` and show it alone."""
        function = Exponential(_to_float(coefficient, "coefficient"), _to_float(base, "base"))
        self._show(self._resample(SampledCurve(function)))
        logger.info("plotted exponential %s", function.symbolic)

    def plot_logarithmic(self, coefficient: Any, base: Any, offset: Any = 0.0) -> None:
        """Sample ``coefficient * log_base(x) + offset`` and show it alone.

        Raises
        ------
        ValueError
            If the base is not positive or equals 1.
        """
        function = Logarithmic(
            _to_float(coefficient, "coefficient"),
            _to_float(base, "base"),
            _to_float(offset, "offset"),
        )
        self._show(self._resample(SampledCurve(function)))
        logger.info("plotted logarithm %s", function.symbolic)

    def change_range(self, x_range: RangeInput, y_range: RangeInput) -> None:
        """Set a new domain, re-sample both tracked curves and show them.

        Parameters
        ----------
        x_range, y_range : tuple[float, float] or Range or str
            New bounds; strings are parsed as ``"min max"``.

        Raises
        ------
        ValueError
            If a range does not satisfy ``min < max``. The domain is left
            unchanged.
        """
        new_x = _to_range(x_range, "x_range")
        new_y = _to_range(y_range, "y_range")
        self._collection.domain.set_ranges(new_x, new_y)
        self._show(self._resample(self._polynomial_curve), self._resample(self._trigonometric_curve))
        logger.info("range changed to x=%s y=%s", new_x.as_tuple(), new_y.as_tuple())

    def clear(self) -> None:
        """Remove every curve from the view."""
        self._collection.clear()
        logger.info("cleared all curves")

    def save(self, path: PathLike) -> None:
        self._collection.save(path)

    def load(self, path: PathLike) -> None:
        self._collection.load(path)

    def figure(self) -> go.Figure:
        """Render the current curves with :func:`~curveplot.figure_render.build_figure`."""
        return build_figure(self._collection, self._config)

    def __repr__(self) -> str:
        return f"PlotterSession(curves={len(self._collection)}, domain={self.domain!r})"
