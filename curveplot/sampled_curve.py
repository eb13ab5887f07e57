"""Per-curve sampling model used by :mod:`curveplot.curve_collection`.

Purpose
-------
Defines ``SampledCurve``, the unit that turns one :data:`MathFunction` and one
X range into an ordered sequence of ``(x, y)`` points.

Concepts and structure
----------------------
Each ``SampledCurve`` holds:

- a function handle (not owned; curves read from a file have none),
- the sampled x/y arrays from the most recent :meth:`SampledCurve.sample`.

Sampling uses a fixed step ``(x_max - x_min) / num_points`` and produces
``num_points + 1`` points, ``x_i = x_min + i * step``. Both endpoints are
included (the right one up to rounding).

Important gotchas
-----------------
- ``sample()`` replaces the points; it never appends.
- Nothing re-samples automatically when a domain changes. Callers re-invoke
  ``sample()`` themselves.
- Non-finite y values are stored as they come.
- The domain's ``min < max`` precondition is not checked here.

Examples
--------
>>> from curveplot.domain import Domain
>>> from curveplot.math_function import Polynomial
>>> curve = SampledCurve(Polynomial((0, 1)))
>>> curve.sample(Domain((0, 1), (0, 1)), 4).points[-1]
(1.0, 1.0)
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .CurveSnapshot import CurveSnapshot
from .InputConvert import InputConvert
from .domain import Domain, Range, RangeLike
from .math_function import MathFunction, evaluate

__all__ = ["Point", "SampledCurve", "sample_points"]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Point = Tuple[float, float]


def _coerce_num_points(num_points: Any) -> int:
    num = int(InputConvert(num_points, int, truncate=False))
    if num < 1:
        raise ValueError(f"num_points must be >= 1, got {num}")
    return num


def sample_points(
    function: MathFunction, x_range: RangeLike, num_points: int
) -> tuple[np.ndarray, np.ndarray]:
    """Sample ``function`` at ``num_points + 1`` evenly spaced abscissae.

    Parameters
    ----------
    function : MathFunction
        Function to evaluate.
    x_range : Range or tuple[float, float]
        Sampling interval; ``min < max`` is the caller's responsibility.
    num_points : int
        Number of steps (``>= 1``).

    Returns
    -------
    tuple[numpy.ndarray, numpy.ndarray]
        The x and y arrays, each of length ``num_points + 1``.
    """
    num = _coerce_num_points(num_points)
    rng = Range.coerce(x_range)
    step = (rng.max - rng.min) / num
    x_values = rng.min + np.arange(num + 1, dtype=float) * step
    y_values = np.asarray(evaluate(function, x_values), dtype=float)
    return x_values, y_values


class SampledCurve:
    """A function together with the points it was last sampled at.

    Parameters
    ----------
    function : MathFunction or None, optional
        Function to sample. ``None`` creates a points-only curve that can be
        drawn and saved but not re-sampled.
    points : iterable of (float, float), optional
        Initial points, typically from a file.
    """

    def __init__(
        self,
        function: Optional[MathFunction] = None,
        points: Iterable[Sequence[float]] = (),
    ) -> None:
        self._function = function
        self._x_data = np.empty(0, dtype=float)
        self._y_data = np.empty(0, dtype=float)
        self._set_points(points)

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "SampledCurve":
        """Build a function-less curve from stored points."""
        return cls(None, points)

    def _set_points(self, points: Iterable[Sequence[float]]) -> None:
        pairs = [(float(x), float(y)) for x, y in points]
        if pairs:
            self._x_data = np.array([p[0] for p in pairs], dtype=float)
            self._y_data = np.array([p[1] for p in pairs], dtype=float)
        else:
            self._x_data = np.empty(0, dtype=float)
            self._y_data = np.empty(0, dtype=float)

    @property
    def function(self) -> Optional[MathFunction]:
        """Return the function handle, or ``None`` for points-only curves."""
        return self._function

    @function.setter
    def function(self, value: Optional[MathFunction]) -> None:
        # Points keep describing the previous function until the next sample().
        self._function = value

    @property
    def label(self) -> str:
        return "" if self._function is None else self._function.label

    @property
    def points(self) -> tuple[Point, ...]:
        """Return the sampled points as ``(x, y)`` float tuples, in order."""
        return tuple(
            (float(x), float(y)) for x, y in zip(self._x_data, self._y_data)
        )

    def get_points(self) -> tuple[Point, ...]:
        return self.points

    @property
    def x_data(self) -> np.ndarray:
        """Return a read-only copy of the sampled x values."""
        x_values = self._x_data.copy()
        x_values.flags.writeable = False
        return x_values

    @property
    def y_data(self) -> np.ndarray:
        """Return a read-only copy of the sampled y values."""
        y_values = self._y_data.copy()
        y_values.flags.writeable = False
        return y_values

    def __len__(self) -> int:
        return int(self._x_data.size)

    def sample(self, domain: Union[Domain, RangeLike], num_points: int) -> "SampledCurve":
        """Replace the points with a fresh sampling of the function.

        Parameters
        ----------
        domain : Domain or Range or tuple[float, float]
            Domain whose X range is sampled (a bare range is accepted too).
        num_points : int
            Number of steps; the curve ends up with ``num_points + 1`` points.

        Returns
        -------
        SampledCurve
            ``self``, to allow chaining into ``add_curve``.

        Raises
        ------
        ValueError
            If the curve has no function or ``num_points < 1``.
        """
        if self._function is None:
            raise ValueError("Cannot sample a curve without a function (points-only curve).")
        x_range = domain.x_range if isinstance(domain, Domain) else Range.coerce(domain)
        x_values, y_values = sample_points(self._function, x_range, num_points)
        self._x_data = x_values
        self._y_data = y_values
        if logger.isEnabledFor(logging.DEBUG):
            finite = int(np.isfinite(y_values).sum())
            logger.debug(
                "sampled %s on [%r, %r]: %d points (%d finite)",
                self.label,
                x_range.min,
                x_range.max,
                x_values.size,
                finite,
            )
        return self

    def snapshot(self) -> CurveSnapshot:
        """Return an immutable snapshot of this curve."""
        return CurveSnapshot(label=self.label, function=self._function, points=self.points)

    def __repr__(self) -> str:
        return f"SampledCurve(label={self.label!r}, points={len(self)})"
